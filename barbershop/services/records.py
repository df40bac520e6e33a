"""Operações de um único statement usadas pelos routers do admin."""

from __future__ import annotations

from typing import Any, Dict, List, Type

from pydantic import BaseModel
from sqlalchemy.orm import Session

from barbershop.core.database import Base


def payload_values(payload: BaseModel) -> Dict[str, Any]:
    """Campos do schema; texto opcional vazio é gravado como NULL."""
    values = payload.model_dump()
    for name, field in type(payload).model_fields.items():
        if not field.is_required() and values.get(name) == "":
            values[name] = None
    return values


def list_newest_first(db: Session, model: Type[Base]) -> List[Dict[str, Any]]:
    rows = db.query(model).order_by(model.id.desc()).all()
    return [row.to_dict() for row in rows]


def insert_row(db: Session, model: Type[Base], values: Dict[str, Any]) -> int:
    row = model(**values)
    db.add(row)
    db.commit()
    return row.id


def replace_row(db: Session, model: Type[Base], row_id: int, values: Dict[str, Any]) -> int:
    updated = (
        db.query(model)
        .filter(model.id == row_id)
        .update(values, synchronize_session=False)
    )
    db.commit()
    return updated


def delete_row(db: Session, model: Type[Base], row_id: int) -> int:
    deleted = (
        db.query(model)
        .filter(model.id == row_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted
