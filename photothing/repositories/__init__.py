from .album_repo import AlbumRepository
from .photo_repo import PhotoRepository
from .published_album_repo import PublishedAlbumRepository
from .user_repo import PasswordResetRepository, UserRepository

__all__ = [
    "AlbumRepository",
    "PhotoRepository",
    "PublishedAlbumRepository",
    "PasswordResetRepository",
    "UserRepository",
]
