"""Table-level store capability handed to the services.

A ``TableStore`` wraps one mapped model and a session and exposes the four
operations the write path needs (select, insert, update, delete). Every
SQLAlchemy failure leaves the session rolled back and surfaces as a
:class:`~storefront.errors.StoreError` carrying a store-specific code.
"""
from __future__ import annotations

from typing import Any, Generic, Iterable, Mapping, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.errors import StoreError
from storefront.utils.db_retry import retry_db_operation

M = TypeVar("M")

# Postgres SQLSTATE for unique_violation
_PG_UNIQUE_VIOLATION = "23505"


def _is_unique_violation(exc: IntegrityError) -> bool:
    orig = getattr(exc, "orig", None)
    if getattr(orig, "pgcode", None) == _PG_UNIQUE_VIOLATION:
        return True
    message = str(orig or exc).lower()
    return "unique constraint" in message or "duplicate key" in message


class TableStore(Generic[M]):
    def __init__(self, session: Session, model: Type[M]) -> None:
        self.session = session
        self.model = model

    def __repr__(self) -> str:
        return f"TableStore({self.model.__name__})"

    def select(self, *, order_by: Iterable[Any] = (), **filters: Any) -> list[M]:
        stmt = select(self.model).filter_by(**filters)
        for clause in order_by:
            stmt = stmt.order_by(clause)
        try:
            return self._scalars(stmt)
        except SQLAlchemyError as e:
            raise self._fail(e) from e

    def first(self, **filters: Any) -> M | None:
        rows = self.select(**filters)
        return rows[0] if rows else None

    def column_values(self, column: str, *, exclude: Iterable[str] = ()) -> set[str]:
        """Snapshot of one column across the table, minus ``exclude``."""
        stmt = select(getattr(self.model, column))
        try:
            values = set(self._scalars(stmt))
        except SQLAlchemyError as e:
            raise self._fail(e) from e
        return values.difference(exclude)

    def insert(self, record: Mapping[str, Any]) -> M:
        row = self.model(**record)
        self.session.add(row)
        self._commit()
        return row

    def update(self, filters: Mapping[str, Any], patch: Mapping[str, Any]) -> M:
        row = self.first(**filters)
        if row is None:
            raise StoreError(f"{self.model.__tablename__}: no row matching {dict(filters)}", StoreError.NOT_FOUND)
        for key, value in patch.items():
            setattr(row, key, value)
        self._commit()
        return row

    def delete(self, filters: Mapping[str, Any]) -> None:
        row = self.first(**filters)
        if row is None:
            raise StoreError(f"{self.model.__tablename__}: no row matching {dict(filters)}", StoreError.NOT_FOUND)
        self.session.delete(row)
        self._commit()

    @retry_db_operation()
    def _scalars(self, stmt: Any) -> list[Any]:
        return list(self.session.execute(stmt).scalars())

    def _commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            raise self._fail(e) from e

    def _fail(self, exc: SQLAlchemyError) -> StoreError:
        self.session.rollback()
        if isinstance(exc, IntegrityError):
            code = StoreError.UNIQUE_VIOLATION if _is_unique_violation(exc) else StoreError.INTEGRITY_ERROR
        else:
            code = StoreError.STORE_ERROR
        return StoreError(str(getattr(exc, "orig", None) or exc), code)
