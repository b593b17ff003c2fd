from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

from sqlmodel import Session, SQLModel, select

ModelT = TypeVar("ModelT", bound=SQLModel)


def list_all(session: Session, model: type[ModelT], *order_by: Any) -> Sequence[ModelT]:
    statement = select(model)
    if order_by:
        statement = statement.order_by(*order_by)
    return session.exec(statement).all()


def get_by_id(session: Session, model: type[ModelT], obj_id: object) -> ModelT | None:
    return session.get(model, obj_id)


def create(session: Session, model: type[ModelT], **data: Any) -> ModelT:
    obj = model(**data)
    return save(session, obj)


def save(session: Session, obj: ModelT) -> ModelT:
    session.add(obj)
    session.commit()
    session.refresh(obj)
    return obj


def delete_by_id(session: Session, model: type[ModelT], obj_id: object) -> bool:
    obj = session.get(model, obj_id)
    if obj is None:
        return False
    session.delete(obj)
    session.commit()
    return True
