from fastapi import APIRouter
from photothing.api.v1.endpoints import admin, albums, auth, photos, published


api_router = APIRouter()

api_router.include_router(auth.router, tags=["authentication"])
api_router.include_router(photos.router, tags=["photos"])
api_router.include_router(albums.router, prefix="/albums", tags=["albums"])
api_router.include_router(published.router, prefix="/published", tags=["published"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
