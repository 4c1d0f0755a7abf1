"""User and password reset repositories."""
from datetime import date, timedelta
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from photothing.core.security import new_uuid
from photothing.models.base import utcnow
from photothing.models.user import PasswordReset, User
from photothing.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for user database operations."""

    def __init__(self, db: Session):
        super().__init__(User, db)

    def by_email(self, email: str) -> Optional[User]:
        """Look up a user by email; None when there is no such user."""
        return self.db.scalars(
            select(User).where(User.email == email).limit(1)
        ).first()

    def for_update(self, email: str) -> Optional[User]:
        """
        Select a user row for update (locks the row until the transaction ends).

        Use this before changing a password or subscription.
        """
        return self.db.scalars(
            select(User).where(User.email == email).with_for_update()
        ).first()

    def create_user(self, email: str, hashed_password: str, uuid: Optional[str] = None) -> User:
        return self.create({
            'email': email,
            'password': hashed_password,
            'uuid': uuid or new_uuid(),
        })

    def edit_subscription(self, user: User, expires: Optional[date]) -> User:
        user.subscription_expires = expires
        self.commit()
        self.refresh(user)
        return user

    def change_password(self, user: User, hashed_password: str) -> User:
        """Set a new password hash. Flushes only; the caller owns the transaction."""
        user.password = hashed_password
        self.flush()
        return user

    def count_total(self) -> int:
        return self.count()

    def count_subscribed(self) -> int:
        return self.count(User.subscription_expires.isnot(None))


class PasswordResetRepository(BaseRepository[PasswordReset]):
    """Repository for password reset tokens."""

    def __init__(self, db: Session, ttl: timedelta = timedelta(hours=24)):
        super().__init__(PasswordReset, db)
        self.ttl = ttl

    def create_for(self, user: User) -> PasswordReset:
        return self.create({'uuid': new_uuid(), 'user_id': user.id})

    def by_uuid(self, user: User, uuid: str) -> Optional[PasswordReset]:
        """
        Find and lock a reset token belonging to ``user``.

        Expired tokens are deleted (flushed, not committed) and reported as
        missing.
        """
        reset = self.db.scalars(
            select(PasswordReset)
            .where(PasswordReset.user_id == user.id, PasswordReset.uuid == uuid)
            .with_for_update()
        ).first()
        if reset is None:
            return None
        if utcnow() - reset.created_at < self.ttl:
            return reset
        self.delete(reset, commit=False)
        return None
