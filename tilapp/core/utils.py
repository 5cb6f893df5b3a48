# tilapp/core/utils.py

from fastapi import HTTPException
from sqlalchemy.orm import Session


def get_or_404(db: Session, model, object_id, detail: str | None = None):
    """
    Loads a record by primary key or aborts the request with a 404.
    """
    obj = db.get(model, object_id)
    if obj is None:
        raise HTTPException(
            status_code=404,
            detail=detail or f"{model.__name__} not found"
        )
    return obj
