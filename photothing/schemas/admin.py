"""Admin dashboard schemas."""
from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class UserStats(BaseModel):
    total: int
    subscribed: int


class PhotoStats(BaseModel):
    created: int
    uploaded: int


class StorageStats(BaseModel):
    bucket: str
    cdn: str
    cdn_prefix: Optional[str] = None


class DashboardResponse(BaseModel):
    users: UserStats
    photos: PhotoStats
    storage: StorageStats


class SubscriptionUpdate(BaseModel):
    """Set or clear a user's subscription expiry."""
    email: str = Field(..., max_length=254)
    expires: Optional[date] = Field(None, description="Last day of the subscription; null cancels")


class UserSubscription(BaseModel):
    email: str
    subscription_expires: Optional[date] = None
