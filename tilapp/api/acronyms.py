# tilapp/api/acronyms.py

import logging
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy import or_
from sqlalchemy.orm import Session

from tilapp.core.utils import get_or_404
from tilapp.database import get_db
from tilapp.models import Acronym, Category
from tilapp.schemas import (
    AcronymCreate,
    AcronymOut,
    AcronymUpdate,
    CategoryOut,
    UserPublic,
)


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/acronyms", tags=["acronyms"])


# -------------------------------
# Collection Endpoints
# -------------------------------

@router.get("", response_model=list[AcronymOut])
def get_all_acronyms(db: Session = Depends(get_db)):
    return db.query(Acronym).all()


@router.post("", response_model=AcronymOut)
def create_acronym(req: AcronymCreate, db: Session = Depends(get_db)):
    acronym = Acronym(short=req.short, long=req.long, user_id=req.user_id)
    db.add(acronym)
    db.commit()
    db.refresh(acronym)
    logger.info("Created acronym %s (%s)", acronym.id, acronym.short)
    return acronym


@router.get("/search", response_model=list[AcronymOut])
def search_acronyms(term: str | None = None, db: Session = Depends(get_db)):
    """
    Exact, case-sensitive match against either the short or the long form.
    """
    if term is None:
        raise HTTPException(status_code=400, detail="Missing search term")
    return (
        db.query(Acronym)
        .filter(or_(Acronym.short == term, Acronym.long == term))
        .all()
    )


@router.get("/first", response_model=AcronymOut)
def get_first_acronym(db: Session = Depends(get_db)):
    acronym = db.query(Acronym).order_by(Acronym.id).first()
    if acronym is None:
        raise HTTPException(status_code=404, detail="No acronyms")
    return acronym


@router.get("/sorted", response_model=list[AcronymOut])
def get_sorted_acronyms(db: Session = Depends(get_db)):
    return db.query(Acronym).order_by(Acronym.short.asc()).all()


# -------------------------------
# Single Acronym Endpoints
# -------------------------------

@router.get("/{acronym_id}", response_model=AcronymOut)
def get_acronym(acronym_id: int, db: Session = Depends(get_db)):
    return get_or_404(db, Acronym, acronym_id)


@router.put("/{acronym_id}", response_model=AcronymOut)
def update_acronym(acronym_id: int, req: AcronymUpdate, db: Session = Depends(get_db)):
    acronym = get_or_404(db, Acronym, acronym_id)
    acronym.short = req.short
    acronym.long = req.long
    if req.user_id is not None:
        acronym.user_id = req.user_id
    db.commit()
    db.refresh(acronym)
    logger.info("Updated acronym %s", acronym.id)
    return acronym


@router.delete("/{acronym_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_acronym(acronym_id: int, db: Session = Depends(get_db)):
    acronym = get_or_404(db, Acronym, acronym_id)
    db.delete(acronym)
    db.commit()
    logger.info("Deleted acronym %s", acronym_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# -------------------------------
# Relationship Endpoints
# -------------------------------

@router.get("/{acronym_id}/user", response_model=UserPublic)
def get_acronym_user(acronym_id: int, db: Session = Depends(get_db)):
    acronym = get_or_404(db, Acronym, acronym_id)
    return acronym.user.to_public()


@router.get("/{acronym_id}/categories", response_model=list[CategoryOut])
def get_acronym_categories(acronym_id: int, db: Session = Depends(get_db)):
    acronym = get_or_404(db, Acronym, acronym_id)
    return acronym.categories


@router.post("/{acronym_id}/categories/{category_id}", status_code=status.HTTP_201_CREATED)
def add_acronym_category(acronym_id: int, category_id: int, db: Session = Depends(get_db)):
    acronym = get_or_404(db, Acronym, acronym_id)
    category = get_or_404(db, Category, category_id)
    if category not in acronym.categories:
        acronym.categories.append(category)
        db.commit()
    return Response(status_code=status.HTTP_201_CREATED)


@router.delete("/{acronym_id}/categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_acronym_category(acronym_id: int, category_id: int, db: Session = Depends(get_db)):
    acronym = get_or_404(db, Acronym, acronym_id)
    category = get_or_404(db, Category, category_id)
    if category in acronym.categories:
        acronym.categories.remove(category)
        db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
