from __future__ import annotations

from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from .db import Base

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """Generic data access for one model class over a SQLAlchemy session.

    Every write commits immediately. Storage errors are not caught here; they
    propagate and fail the current request.
    """

    def __init__(self, session: Session, model: Type[ModelT]) -> None:
        self.session = session
        self.model = model

    def get(self, entity_id: int) -> Optional[ModelT]:
        return self.session.get(self.model, entity_id)

    def save(self, entity: ModelT) -> ModelT:
        self.session.add(entity)
        self.session.commit()
        self.session.refresh(entity)
        return entity

    def delete_by_id(self, entity_id: int) -> None:
        entity = self.get(entity_id)
        if entity is None:
            return
        self.session.delete(entity)
        self.session.commit()

    def list_all(self) -> list[ModelT]:
        stmt = select(self.model).order_by(self.model.id)
        return list(self.session.scalars(stmt))

    def list_by(self, column: Any, value: Any, order_by: tuple = ()) -> list[ModelT]:
        stmt = select(self.model).where(column == value)
        # id breaks ties between equal sort values
        stmt = stmt.order_by(*order_by, self.model.id)
        return list(self.session.scalars(stmt))

    def find_one_by(self, column: Any, value: Any) -> Optional[ModelT]:
        stmt = select(self.model).where(column == value)
        return self.session.scalars(stmt).first()
