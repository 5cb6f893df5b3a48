# tilapp/api/users.py

import logging
import uuid
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from tilapp.core.security import get_password_hash
from tilapp.core.utils import get_or_404
from tilapp.database import get_db
from tilapp.models import User
from tilapp.schemas import AcronymOut, UserCreate, UserPublic, UserPublicV2


logger = logging.getLogger(__name__)


# -------------------------------
# Routers
# -------------------------------

# V1 responses use UserPublic; /api/v2 adds fields introduced later
router = APIRouter(prefix="/api/users", tags=["users"])
v2_router = APIRouter(prefix="/api/v2/users", tags=["users v2"])


# -------------------------------
# V1 Endpoints
# -------------------------------

@router.post("", response_model=UserPublic)
def create_user(req: UserCreate, db: Session = Depends(get_db)):
    """
    Registers a user. The password is stored as a bcrypt hash
    and never returned.
    """
    user_exists = db.query(User).filter(User.username == req.username).first()
    if user_exists:
        raise HTTPException(status_code=400, detail="Username already exists")

    user = User(
        name=req.name,
        username=req.username,
        password=get_password_hash(req.password),
        twitter_url=req.twitter_url,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Created user %s (%s)", user.id, user.username)
    return user.to_public()


@router.get("", response_model=list[UserPublic])
def get_all_users(db: Session = Depends(get_db)):
    return [user.to_public() for user in db.query(User).all()]


@router.get("/{user_id}", response_model=UserPublic)
def get_user(user_id: uuid.UUID, db: Session = Depends(get_db)):
    return get_or_404(db, User, user_id).to_public()


@router.get("/{user_id}/acronyms", response_model=list[AcronymOut])
def get_user_acronyms(user_id: uuid.UUID, db: Session = Depends(get_db)):
    return get_or_404(db, User, user_id).acronyms


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: uuid.UUID, db: Session = Depends(get_db)):
    """
    Deletes the user together with their acronyms and tokens.
    """
    user = get_or_404(db, User, user_id)
    db.delete(user)
    db.commit()
    logger.info("Deleted user %s", user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# -------------------------------
# V2 Endpoints
# -------------------------------

@v2_router.get("", response_model=list[UserPublicV2])
def get_all_users_v2(db: Session = Depends(get_db)):
    return [user.to_public_v2() for user in db.query(User).all()]


@v2_router.get("/{user_id}", response_model=UserPublicV2)
def get_user_v2(user_id: uuid.UUID, db: Session = Depends(get_db)):
    return get_or_404(db, User, user_id).to_public_v2()
