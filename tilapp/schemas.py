# tilapp/schemas.py

import uuid
from pydantic import BaseModel, ConfigDict


# -------------------------------
# Acronyms
# -------------------------------

class AcronymCreate(BaseModel):
    short: str
    long: str
    user_id: uuid.UUID


class AcronymUpdate(BaseModel):
    """
    Full overwrite of an acronym's text.
    The owner only changes when user_id is sent.
    """
    short: str
    long: str
    user_id: uuid.UUID | None = None


class AcronymOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    short: str
    long: str
    user_id: uuid.UUID


# -------------------------------
# Categories
# -------------------------------

class CategoryCreate(BaseModel):
    name: str


class CategoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


# -------------------------------
# Users & public projections
# -------------------------------

class UserCreate(BaseModel):
    name: str
    username: str
    password: str
    twitter_url: str | None = None


class UserPublic(BaseModel):
    """
    V1 projection of a user. Existing clients depend on this shape,
    so fields added to users later are not part of it.
    """
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    username: str


class UserPublicV2(UserPublic):
    twitter_url: str | None = None


class Token(BaseModel):
    access_token: str
    token_type: str
