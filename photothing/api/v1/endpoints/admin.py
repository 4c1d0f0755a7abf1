"""Admin endpoints. Non-admin users get 404 for everything in here."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from photothing.api.deps import get_admin, get_storage
from photothing.db.base import get_db
from photothing.models.user import User
from photothing.schemas.admin import DashboardResponse, SubscriptionUpdate, UserSubscription
from photothing.services import admin as admin_service
from photothing.services.storage.s3 import S3Service

router = APIRouter()


@router.get('/dashboard', response_model=DashboardResponse)
def dashboard(
    admin: User = Depends(get_admin),
    storage: S3Service = Depends(get_storage),
    db: Session = Depends(get_db)
):
    return admin_service.fetch_dashboard(db, storage)


@router.put('/users/subscription', response_model=UserSubscription)
def edit_subscription(
    request: SubscriptionUpdate,
    admin: User = Depends(get_admin),
    db: Session = Depends(get_db)
):
    """Set or clear a user's subscription expiry."""
    return admin_service.edit_subscription(db, request.email, request.expires)
