# tilapp/models/migration.py

from datetime import datetime
from sqlalchemy import Column, DateTime, String
from . import Base


class MigrationRecord(Base):
    __tablename__ = "schema_migrations"

    name = Column(String, primary_key=True)
    applied_at = Column(DateTime, default=datetime.now)
