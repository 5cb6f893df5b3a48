# tilapp/core/categories.py

import logging
from sqlalchemy.orm import Session

from tilapp.models import Acronym, Category


logger = logging.getLogger(__name__)


def normalize_names(names) -> set[str]:
    """
    Turns submitted category names into a set, dropping blank entries.
    """
    return {name.strip() for name in names or [] if name and name.strip()}


def add_category(db: Session, name: str, acronym: Acronym) -> Category:
    """
    Attaches the category called `name` to the acronym, creating the
    category first if no category has that name yet.
    Attaching an already attached category is a no-op.
    """
    category = db.query(Category).filter(Category.name == name).first()
    if category is None:
        category = Category(name=name)
        db.add(category)
        logger.info("Created category %r", name)

    if category not in acronym.categories:
        acronym.categories.append(category)
    return category


def sync_categories(db: Session, acronym: Acronym, names) -> tuple[set[str], set[str]]:
    """
    Makes the acronym's categories equal to `names`.

    Categories in the new set but not attached are added, attached ones
    missing from the new set are detached, the rest are left alone.
    Changes are staged on the session; the caller commits them together.
    Returns the (added, removed) name sets.
    """
    existing = {category.name: category for category in acronym.categories}
    wanted = normalize_names(names)

    to_add = wanted - set(existing)
    to_remove = set(existing) - wanted

    for name in sorted(to_add):
        add_category(db, name, acronym)

    for name in to_remove:
        acronym.categories.remove(existing[name])

    if to_add or to_remove:
        logger.info(
            "Acronym %s categories: +%s -%s",
            acronym.id, sorted(to_add), sorted(to_remove)
        )
    return to_add, to_remove
