# tilapp/api/categories.py

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tilapp.core.utils import get_or_404
from tilapp.database import get_db
from tilapp.models import Category
from tilapp.schemas import AcronymOut, CategoryCreate, CategoryOut


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.post("", response_model=CategoryOut)
def create_category(req: CategoryCreate, db: Session = Depends(get_db)):
    category = Category(name=req.name)
    db.add(category)
    db.commit()
    db.refresh(category)
    logger.info("Created category %s (%s)", category.id, category.name)
    return category


@router.get("", response_model=list[CategoryOut])
def get_all_categories(db: Session = Depends(get_db)):
    return db.query(Category).order_by(Category.id).all()


@router.get("/{category_id}", response_model=CategoryOut)
def get_category(category_id: int, db: Session = Depends(get_db)):
    return get_or_404(db, Category, category_id)


@router.get("/{category_id}/acronyms", response_model=list[AcronymOut])
def get_category_acronyms(category_id: int, db: Session = Depends(get_db)):
    category = get_or_404(db, Category, category_id)
    return category.acronyms
