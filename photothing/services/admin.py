"""Admin dashboard."""
from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from photothing.app.exceptions import not_found, server_errors
from photothing.repositories.photo_repo import PhotoRepository
from photothing.repositories.user_repo import UserRepository
from photothing.schemas.admin import (
    DashboardResponse,
    PhotoStats,
    StorageStats,
    UserStats,
    UserSubscription,
)


def fetch_dashboard(db: Session, storage) -> DashboardResponse:
    with server_errors(db):
        users = UserRepository(db)
        photos = PhotoRepository(db)
        user_stats = UserStats(total=users.count_total(), subscribed=users.count_subscribed())
        photo_stats = PhotoStats(created=photos.count_created(), uploaded=photos.count_uploaded())
    return DashboardResponse(
        users=user_stats,
        photos=photo_stats,
        storage=StorageStats(**storage.stats()),
    )


def edit_subscription(db: Session, email: str, expires: Optional[date]) -> UserSubscription:
    """Set a user's subscription expiry under a row lock."""
    with server_errors(db):
        users = UserRepository(db)
        user = not_found(users.for_update(email), "could not find user")
        user = users.edit_subscription(user, expires)
    return UserSubscription(email=user.email, subscription_expires=user.subscription_expires)
