# tilapp/core/migrations.py

import logging
from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from tilapp.config import ADMIN_PASSWORD, ADMIN_USERNAME
from tilapp.core.security import get_password_hash
from tilapp.models import Base, MigrationRecord, User


logger = logging.getLogger(__name__)


# -------------------------------
# Migration Steps
# -------------------------------

def create_schema(db: Session):
    Base.metadata.create_all(bind=db.connection())


def add_user_twitter_url(db: Session):
    """
    Databases created before users had a twitter_url column get it here.
    Fresh databases already have it from create_schema.
    """
    columns = {column["name"] for column in inspect(db.connection()).get_columns("users")}
    if "twitter_url" not in columns:
        db.execute(text("ALTER TABLE users ADD COLUMN twitter_url VARCHAR"))


def seed_admin_user(db: Session):
    exists = db.query(User).filter(User.username == ADMIN_USERNAME).first()
    if exists:
        return
    db.add(User(
        name="Admin",
        username=ADMIN_USERNAME,
        password=get_password_hash(ADMIN_PASSWORD),
    ))


# Applied in order, each at most once per database
MIGRATIONS = [
    ("create_schema", create_schema),
    ("add_user_twitter_url", add_user_twitter_url),
    ("seed_admin_user", seed_admin_user),
]


# -------------------------------
# Runner
# -------------------------------

def run_migrations(engine: Engine) -> list[str]:
    MigrationRecord.__table__.create(bind=engine, checkfirst=True)

    applied = []
    with Session(engine) as db:
        done = {name for (name,) in db.query(MigrationRecord.name)}
        for name, migrate in MIGRATIONS:
            if name in done:
                continue
            migrate(db)
            db.add(MigrationRecord(name=name))
            db.commit()
            applied.append(name)
            logger.info("Applied migration %s", name)
    return applied
