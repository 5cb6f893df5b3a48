# tilapp/models/acronym.py

from sqlalchemy import Column, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import relationship
from . import Base


class Acronym(Base):
    __tablename__ = "acronyms"

    id = Column(Integer, primary_key=True, index=True)
    short = Column(String, nullable=False, index=True)
    long = Column(String, nullable=False)
    user_id = Column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user = relationship("User", back_populates="acronyms")
    categories = relationship(
        "Category",
        secondary="acronym_category",
        back_populates="acronyms",
        order_by="Category.name",
    )

    def __repr__(self):
        return f"<Acronym {self.short}>"
