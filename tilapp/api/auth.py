# tilapp/api/auth.py

import logging
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import (
    HTTPAuthorizationCredentials,
    HTTPBasic,
    HTTPBasicCredentials,
    HTTPBearer,
)
from sqlalchemy.orm import Session

from tilapp.core.security import authenticate_user, decode_access_token, issue_token
from tilapp.database import get_db
from tilapp.models import Token as TokenModel, User as UserModel
from tilapp.schemas import Token, UserPublic


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["auth"])

basic_scheme = HTTPBasic()
# Missing credentials get the same 401 as invalid ones
bearer_scheme = HTTPBearer(auto_error=False)


def get_basic_user(
    credentials: HTTPBasicCredentials = Depends(basic_scheme),
    db: Session = Depends(get_db),
) -> UserModel:
    user = authenticate_user(db, credentials.username, credentials.password)
    if not user:
        logger.warning("Failed login for %r", credentials.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Basic"},
        )
    return user


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> UserModel:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None:
        raise credentials_exception

    payload = decode_access_token(credentials.credentials)
    if payload is None or payload.get("sub") is None:
        raise credentials_exception

    token = db.query(TokenModel).filter(TokenModel.value == credentials.credentials).first()
    if token is None or str(token.user_id) != payload["sub"]:
        raise credentials_exception
    return token.user


@router.post("/login", response_model=Token)
def login(user: UserModel = Depends(get_basic_user), db: Session = Depends(get_db)):
    token = issue_token(db, user)
    return {"access_token": token.value, "token_type": "bearer"}


@router.get("/me", response_model=UserPublic)
def read_users_me(current_user: UserModel = Depends(get_current_user)):
    return current_user.to_public()
