# tilapp/models/__init__.py

from sqlalchemy.orm import declarative_base


Base = declarative_base()


from .user import User  # noqa: E402
from .acronym import Acronym  # noqa: E402
from .category import Category, acronym_category  # noqa: E402
from .token import Token  # noqa: E402
from .migration import MigrationRecord  # noqa: E402


__all__ = [
    "Base",
    "User",
    "Acronym",
    "Category",
    "acronym_category",
    "Token",
    "MigrationRecord",
]
