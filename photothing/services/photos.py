"""Photo uploads and listings."""
import logging

from sqlalchemy.orm import Session

from photothing.app.exceptions import BadRequestError, NotFoundError, not_found, server_errors
from photothing.db.pagination import Pagination
from photothing.models.photo import InvalidAttribute, validate_attribute
from photothing.models.user import User
from photothing.repositories.photo_repo import FILENAME_ATTR, PhotoRepository
from photothing.schemas.pagination import PageResponse
from photothing.schemas.photo import PendingUpload, PhotoResponse, UploadRequest, UploadResponse

logger = logging.getLogger(__name__)


def create_photo(db: Session, user: User, storage, upload: UploadRequest) -> PendingUpload:
    """
    Register a new photo and sign an upload for it.

    The photo row starts out not present; the client PUTs the file to the
    returned URL and then confirms it.
    """
    try:
        validate_attribute(FILENAME_ATTR, upload.filename)
    except InvalidAttribute as exc:
        raise BadRequestError(str(exc))

    with server_errors(db):
        photo, attrs = PhotoRepository(db).create_with_filename(user, upload.filename)

    signed = storage.sign_upload(user.uuid, photo.uuid, upload.file_type)
    logger.info("Created photo %s for user %s", photo.uuid, user.id)
    return PendingUpload(
        photo=PhotoResponse.build(photo, attrs, storage.resolve_public_url(user.uuid, photo.uuid)),
        upload=UploadResponse(**signed),
    )


def user_photos(db: Session, user: User, storage, page: Pagination) -> PageResponse[PhotoResponse]:
    with server_errors(db):
        photos = PhotoRepository(db).by_user(user, page)
    photos = photos.map(
        lambda pair: PhotoResponse.build(pair[0], pair[1], storage.resolve_public_url(user.uuid, pair[0].uuid))
    )
    return PageResponse[PhotoResponse].from_page(photos)


def confirm_photo(db: Session, user: User, storage, photo_uuid: str) -> PhotoResponse:
    """Mark a photo present once its object shows up in storage."""
    repo = PhotoRepository(db)
    with server_errors(db):
        photo = not_found(repo.by_uuid(user, photo_uuid), "could not find photo")

    if not storage.object_exists(storage.object_key(user.uuid, photo.uuid)):
        raise NotFoundError("photo has not been uploaded")

    with server_errors(db):
        photo = repo.mark_present(photo)
        attrs = repo.attrs_for([photo.id]).get(photo.id, [])
    return PhotoResponse.build(photo, attrs, storage.resolve_public_url(user.uuid, photo.uuid))
