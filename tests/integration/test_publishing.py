import pytest

from photothing.app.exceptions import NotFoundError
from photothing.core.hashing import PublicIdCodec
from photothing.core.security import new_uuid
from photothing.db.pagination import Pagination
from photothing.models import Photo, PublishedAlbum
from photothing.services import albums, publishing

pytestmark = pytest.mark.integration


@pytest.fixture
def codec():
    return PublicIdCodec("test-id-salt", min_length=4)


@pytest.fixture
def owner(make_user):
    return make_user()


@pytest.fixture
def album(db_session, owner, storage):
    photo = Photo(uuid=new_uuid(), owner=owner.id)
    db_session.add(photo)
    db_session.commit()
    created = albums.create_album(db_session, owner, "holiday")
    return albums.add_photos_to_album(db_session, owner, storage, created.id, [photo.id])


def test_publish_workflow(db_session, owner, storage, codec, album):
    published = publishing.publish_album(db_session, owner, codec, album.id)
    assert published.active
    assert published.album_id == album.id
    assert published.share_url == f"https://photothing.example.com/p/{published.hash}"
    assert published.qr_code.startswith("data:image/png;base64,")

    public = publishing.get_published_photos(db_session, storage, codec, published.hash, Pagination.first())
    assert public == album

    toggled = publishing.toggle_published_album(db_session, owner, codec, published.hash, False)
    assert not toggled.active
    with pytest.raises(NotFoundError) as inactive:
        publishing.get_published_photos(db_session, storage, codec, published.hash, Pagination.first())
    with pytest.raises(NotFoundError) as bad_hash:
        publishing.get_published_photos(db_session, storage, codec, "not-a-hash", Pagination.first())
    assert inactive.value == bad_hash.value

    publishing.toggle_published_album(db_session, owner, codec, published.hash, True)
    assert publishing.get_published_photos(
        db_session, storage, codec, published.hash, Pagination.first()
    ) == album

    publishing.delete_published_album(db_session, owner, codec, published.hash)
    with pytest.raises(NotFoundError) as deleted:
        publishing.get_published_photos(db_session, storage, codec, published.hash, Pagination.first())
    assert deleted.value == bad_hash.value
    assert db_session.query(PublishedAlbum).count() == 0


def test_other_users_cannot_touch_a_publish(db_session, owner, make_user, storage, codec, album):
    intruder = make_user()

    with pytest.raises(NotFoundError):
        publishing.publish_album(db_session, intruder, codec, album.id)

    published = publishing.publish_album(db_session, owner, codec, album.id)
    with pytest.raises(NotFoundError):
        publishing.toggle_published_album(db_session, intruder, codec, published.hash, False)
    with pytest.raises(NotFoundError):
        publishing.delete_published_album(db_session, intruder, codec, published.hash)

    assert publishing.user_published_albums(db_session, intruder, codec) == []
    still_there = publishing.get_published_photos(db_session, storage, codec, published.hash, Pagination.first())
    assert still_there.id == album.id


def test_user_published_albums(db_session, owner, codec, album):
    first = publishing.publish_album(db_session, owner, codec, album.id)
    second = publishing.publish_album(db_session, owner, codec, album.id)

    listed = publishing.user_published_albums(db_session, owner, codec)
    assert [p.hash for p in listed] == [first.hash, second.hash]
    assert all(p.qr_code is None for p in listed)


def test_published_photo_urls_use_the_owner(db_session, owner, storage, codec, album):
    published = publishing.publish_album(db_session, owner, codec, album.id)
    public = publishing.get_published_photos(db_session, storage, codec, published.hash, Pagination.first())
    entry = public.photos.items[0]
    assert entry.photo.url == storage.resolve_public_url(owner.uuid, entry.photo.uuid)


@pytest.mark.parametrize("junk", ["", "a", "!!!!", "zzzzzzzzzzzzzzzzzzzzzzzz"])
def test_junk_hashes_are_not_found(db_session, storage, codec, junk):
    with pytest.raises(NotFoundError):
        publishing.get_published_photos(db_session, storage, codec, junk, Pagination.first())
