# tilapp/models/category.py

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import relationship
from . import Base


# Pivot between acronyms and categories. The composite primary key keeps
# membership a set: one row per (acronym, category) pair.
acronym_category = Table(
    "acronym_category",
    Base.metadata,
    Column(
        "acronym_id",
        Integer,
        ForeignKey("acronyms.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "category_id",
        Integer,
        ForeignKey("categories.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, index=True, nullable=False)

    acronyms = relationship(
        "Acronym",
        secondary=acronym_category,
        back_populates="categories",
        order_by="Acronym.id",
    )
