from .base import Base, SessionLocal, engine, get_db
from .pagination import Page, Paginated, Pagination, paginate

__all__ = [
    "Base",
    "SessionLocal",
    "engine",
    "get_db",
    "Page",
    "Paginated",
    "Pagination",
    "paginate",
]
