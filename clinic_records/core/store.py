"""
Ordered record store - one durable key-value table per entity type.

A ``Store`` maps string ids to pydantic record objects and keeps them in a
SQLAlchemy-mapped table. Enumeration follows insertion order through the
table's ``position`` column; overwriting a key keeps its original position.
Records handed out are detached copies, never live ORM rows.
"""
from contextlib import contextmanager
from typing import Callable, Generic, Iterator, List, Optional, Type, TypeVar
import logging
import threading

from pydantic import BaseModel
from sqlalchemy import func
from sqlalchemy.orm import Session, sessionmaker

# Set up logging
logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)


class Store(Generic[R]):
    """
    Ordered key-value table holding one entity type.
    
    Every operation holds the store's re-entrant lock for its whole duration.
    Services that read, modify and write back a record hold ``store.lock``
    across the sequence so no other writer interleaves.
    
    Attributes:
        name: Table name, used in log messages
        model: SQLAlchemy model backing the table
        schema: Pydantic record type stored and returned
        lock: Re-entrant lock serializing access to the table
    """

    def __init__(self, session_factory: sessionmaker, model, schema: Type[R]):
        self._session_factory = session_factory
        self.model = model
        self.schema = schema
        self.name = model.__tablename__
        self.lock = threading.RLock()
        self._columns = [
            column.name for column in model.__table__.columns if column.name != "position"
        ]

    @contextmanager
    def _session(self) -> Iterator[Session]:
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def _to_record(self, row) -> R:
        return self.schema.model_validate({name: getattr(row, name) for name in self._columns})

    def insert(self, record_id: str, record: R) -> Optional[R]:
        """
        Insert or overwrite the record stored under ``record_id``.
        
        Args:
            record_id: Key to store the record under
            record: Record to store
            
        Returns:
            The previously stored record, or None if the key was new
        """
        values = record.model_dump()
        values["id"] = record_id
        with self.lock, self._session() as session:
            row = session.get(self.model, record_id)
            if row is None:
                previous = None
                last_position = session.query(func.max(self.model.position)).scalar()
                session.add(self.model(position=(last_position or 0) + 1, **values))
            else:
                previous = self._to_record(row)
                for field, value in values.items():
                    setattr(row, field, value)
        logger.debug(f"{self.name}: {'overwrote' if previous else 'inserted'} {record_id}")
        return previous

    def get(self, record_id: str) -> Optional[R]:
        """
        Look up a record by id.
        
        Returns:
            The stored record, or None if absent
        """
        with self.lock, self._session() as session:
            row = session.get(self.model, record_id)
            return self._to_record(row) if row is not None else None

    def remove(self, record_id: str) -> Optional[R]:
        """
        Delete a record by id.
        
        Returns:
            The removed record, or None if the key was absent
        """
        with self.lock, self._session() as session:
            row = session.get(self.model, record_id)
            if row is None:
                return None
            removed = self._to_record(row)
            session.delete(row)
        logger.debug(f"{self.name}: removed {record_id}")
        return removed

    def values(self) -> List[R]:
        """All records in insertion order."""
        with self.lock, self._session() as session:
            rows = session.query(self.model).order_by(self.model.position).all()
            return [self._to_record(row) for row in rows]

    def find(self, predicate: Callable[[R], bool]) -> List[R]:
        """Records matching ``predicate``, in insertion order."""
        return [record for record in self.values() if predicate(record)]

    def latest(self, **filters) -> Optional[R]:
        """
        The most recently inserted record whose columns equal ``filters``.

        Filtering happens in SQL, so indexed columns are used.

        Args:
            filters: Column name / value pairs, e.g. ``patient_id="..."``

        Returns:
            The matching record with the highest position, or None
        """
        with self.lock, self._session() as session:
            row = (
                session.query(self.model)
                .filter_by(**filters)
                .order_by(self.model.position.desc())
                .first()
            )
            return self._to_record(row) if row is not None else None

    def __contains__(self, record_id: object) -> bool:
        return isinstance(record_id, str) and self.get(record_id) is not None

    def __len__(self) -> int:
        with self.lock, self._session() as session:
            return session.query(func.count(self.model.id)).scalar() or 0

    def __repr__(self):
        return f"<Store(name={self.name!r})>"
