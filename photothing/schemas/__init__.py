from .admin import DashboardResponse, SubscriptionUpdate, UserSubscription
from .album import AlbumEntry, AlbumResponse, NewAlbum, PhotoIdsRequest
from .auth import (
    MessageResponse,
    PasswordResetRequest,
    PasswordResetResult,
    RegisterResponse,
    TokenResponse,
    UserLogin,
)
from .pagination import PageResponse
from .photo import PendingUpload, PhotoResponse, UploadRequest, UploadResponse
from .published import PublishedAlbumResponse, PublishedToggleRequest
