# tilapp/models/user.py

import uuid
from sqlalchemy import Column, String, Uuid
from sqlalchemy.orm import relationship
from tilapp.schemas import UserPublic, UserPublicV2
from . import Base


# -------------------------------
# User Model
# -------------------------------

class User(Base):
    """
    Database model for application users.
    Stores the bcrypt hash of the password, never the password itself.
    The record is exposed to clients only through its public projections.
    """
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    username = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
    twitter_url = Column(String, nullable=True)

    acronyms = relationship(
        "Acronym",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="Acronym.id",
    )
    tokens = relationship(
        "Token",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<User {self.username}>"

    def to_public(self) -> UserPublic:
        return UserPublic.model_validate(self)

    def to_public_v2(self) -> UserPublicV2:
        return UserPublicV2.model_validate(self)
