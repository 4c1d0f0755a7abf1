"""Base repository with common CRUD operations."""
from typing import TypeVar, Generic, Type, Optional, Dict, Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from photothing.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


def insert_ignore(db: Session, model) -> Any:
    """
    INSERT ... ON CONFLICT DO NOTHING for the session's database.

    Args:
        db: Database session
        model: Table or mapped class to insert into

    Returns:
        Dialect specific insert construct; call ``on_conflict_do_nothing`` on it
    """
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        from sqlalchemy.dialects.postgresql import insert
    elif dialect == "sqlite":
        from sqlalchemy.dialects.sqlite import insert
    else:
        raise NotImplementedError(f"insert-ignore is not supported on {dialect}")
    return insert(model)


class BaseRepository(Generic[ModelType]):
    """Base repository with common database operations."""

    def __init__(self, model: Type[ModelType], db: Session):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            db: Database session
        """
        self.model = model
        self.db = db

    def create(self, obj_in: Dict[str, Any], commit: bool = True) -> ModelType:
        """
        Create new record.

        Args:
            obj_in: Dictionary with object data
            commit: Commit immediately; otherwise only flush so the caller
                can group several writes in one transaction

        Returns:
            Created model instance
        """
        db_obj = self.model(**obj_in)
        self.db.add(db_obj)
        if commit:
            self.db.commit()
            self.db.refresh(db_obj)
        else:
            self.db.flush()
        return db_obj

    def get(self, id: Any) -> Optional[ModelType]:
        """
        Get record by primary key.

        Args:
            id: Record id

        Returns:
            Model instance or None if not found
        """
        return self.db.get(self.model, id)

    def delete(self, db_obj: ModelType, commit: bool = True) -> None:
        """
        Hard delete a record.

        Args:
            db_obj: Instance to delete
            commit: Commit immediately
        """
        self.db.delete(db_obj)
        if commit:
            self.db.commit()
        else:
            self.db.flush()

    def count(self, *criteria) -> int:
        """
        Count records.

        Args:
            criteria: Optional filter expressions

        Returns:
            Count of records
        """
        query = select(func.count()).select_from(self.model)
        if criteria:
            query = query.where(*criteria)
        return self.db.scalar(query) or 0

    def refresh(self, db_obj: ModelType) -> ModelType:
        self.db.refresh(db_obj)
        return db_obj

    def commit(self) -> None:
        """Commit current transaction."""
        self.db.commit()

    def rollback(self) -> None:
        """Rollback current transaction."""
        self.db.rollback()

    def flush(self) -> None:
        """Flush changes to database without committing."""
        self.db.flush()
