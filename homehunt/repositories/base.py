"""
Base repository class with common CRUD operations using async SQLAlchemy.
Provides generic database operations that can be extended by specific repositories.

Write methods commit by default. Passing ``commit=False`` only flushes, so a
service can group several writes into one transaction and commit once.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete
from homehunt.database import Base
from typing import TypeVar, Generic, Optional, List, Dict, Any, Type, Sequence
import uuid
import logging

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository class providing common CRUD operations.
    Uses async SQLAlchemy for all database operations with proper error handling.
    """

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        """
        Initialize repository with model class and database session.

        Args:
            model: SQLAlchemy model class
            db: Async database session
        """
        self.model = model
        self.db = db

    async def create(self, obj_in: Dict[str, Any], commit: bool = True) -> ModelType:
        """
        Create a new record in the database.

        Args:
            obj_in: Dictionary of field values for the new record
            commit: Commit immediately, or only flush into the open transaction

        Returns:
            Created model instance

        Raises:
            Exception: If database operation fails
        """
        try:
            db_obj = self.model(**obj_in)
            self.db.add(db_obj)
            if commit:
                await self.db.commit()
            else:
                await self.db.flush()
            await self.db.refresh(db_obj)
            logger.debug(f"Created {self.model.__name__} with id: {db_obj.id}")
            return db_obj
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Failed to create {self.model.__name__}: {e}")
            raise

    async def get_by_id(self, id: uuid.UUID) -> Optional[ModelType]:
        """
        Get a record by its ID.

        Args:
            id: UUID of the record to retrieve

        Returns:
            Model instance if found, None otherwise
        """
        try:
            query = (
                select(self.model)
                .where(self.model.id == id)
                .execution_options(populate_existing=True)
            )
            result = await self.db.execute(query)
            obj = result.scalar_one_or_none()

            if obj is None:
                logger.debug(f"{self.model.__name__} with id {id} not found")

            return obj
        except Exception as e:
            logger.error(f"Failed to get {self.model.__name__} by id {id}: {e}")
            raise

    async def get_by_field(self, field: str, value: Any) -> Optional[ModelType]:
        """
        Get a single record by a specific field value.

        Args:
            field: Field name to search by
            value: Value to search for

        Returns:
            Model instance if found, None otherwise
        """
        if not hasattr(self.model, field):
            raise ValueError(f"Field '{field}' does not exist on {self.model.__name__}")

        try:
            query = (
                select(self.model)
                .where(getattr(self.model, field) == value)
                .execution_options(populate_existing=True)
            )
            result = await self.db.execute(query)
            return result.scalars().first()
        except Exception as e:
            logger.error(f"Failed to get {self.model.__name__} by {field}={value}: {e}")
            raise

    async def get_multi(
        self,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None,
        skip: int = 0,
        limit: Optional[int] = None
    ) -> List[ModelType]:
        """
        Get multiple records with optional filtering, ordering and pagination.

        Args:
            filters: Dictionary of field filters (list values match with IN)
            order_by: Field name to order by (prefix with '-' for descending);
                      natural order when omitted
            skip: Number of records to skip
            limit: Maximum number of records to return

        Returns:
            List of model instances
        """
        try:
            query = select(self.model)

            for field, value in (filters or {}).items():
                if not hasattr(self.model, field):
                    raise ValueError(f"Field '{field}' does not exist on {self.model.__name__}")
                column = getattr(self.model, field)
                if isinstance(value, (list, tuple, set)):
                    query = query.where(column.in_(list(value)))
                else:
                    query = query.where(column == value)

            if order_by:
                if order_by.startswith('-'):
                    query = query.order_by(getattr(self.model, order_by[1:]).desc())
                else:
                    query = query.order_by(getattr(self.model, order_by))

            if skip:
                query = query.offset(skip)
            if limit is not None:
                query = query.limit(limit)

            result = await self.db.execute(query.execution_options(populate_existing=True))
            objects = result.scalars().all()

            logger.debug(f"Retrieved {len(objects)} {self.model.__name__} records")
            return list(objects)
        except Exception as e:
            logger.error(f"Failed to get multiple {self.model.__name__} records: {e}")
            raise

    async def update_where(
        self,
        conditions: Sequence[Any],
        values: Dict[str, Any],
        commit: bool = True
    ) -> int:
        """
        Update every record matching all conditions.

        Args:
            conditions: SQLAlchemy boolean expressions combined with AND
            values: Field values to set
            commit: Commit immediately, or only flush into the open transaction

        Returns:
            Number of matched records
        """
        try:
            stmt = update(self.model).where(*conditions).values(**values)
            result = await self.db.execute(stmt)
            if commit:
                await self.db.commit()
            logger.debug(f"Updated {result.rowcount} {self.model.__name__} records")
            return result.rowcount
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Failed to update {self.model.__name__} records: {e}")
            raise

    async def delete_where(self, conditions: Sequence[Any], commit: bool = True) -> int:
        """
        Delete every record matching all conditions.

        Returns:
            Number of records deleted
        """
        try:
            stmt = delete(self.model).where(*conditions)
            result = await self.db.execute(stmt)
            if commit:
                await self.db.commit()
            logger.debug(f"Deleted {result.rowcount} {self.model.__name__} records")
            return result.rowcount
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Failed to delete {self.model.__name__} records: {e}")
            raise

    async def delete(self, id: uuid.UUID) -> bool:
        """
        Delete a record by its ID.

        Returns:
            True if record was deleted, False if not found
        """
        return await self.delete_where([self.model.id == id]) > 0
