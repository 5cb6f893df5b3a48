# tilapp/config.py

import os
from dotenv import load_dotenv


load_dotenv()


# -------------------------------
# Database
# -------------------------------

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./til.db")


# -------------------------------
# Authentication
# -------------------------------

JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "change-me")
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

# Seeded by the admin user migration
ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "password")


# -------------------------------
# Logging
# -------------------------------

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


# -------------------------------
# Website sessions
# -------------------------------

SESSION_SECRET_KEY = os.getenv("SESSION_SECRET_KEY", "change-me-too")
