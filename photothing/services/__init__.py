"""Service layer: orchestration between the API and the repositories."""
from . import admin, albums, auth, photos, publishing

__all__ = ["admin", "albums", "auth", "photos", "publishing"]
