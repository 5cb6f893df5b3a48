# tilapp/main.py

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.middleware.sessions import SessionMiddleware

from tilapp.api import acronyms, auth, categories, users, website
from tilapp.config import LOG_LEVEL, SESSION_SECRET_KEY
from tilapp.database import init_db


logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    applied = init_db()
    logger.info("Database ready (%d migrations applied)", len(applied))
    yield


app = FastAPI(title="TIL", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Website logins are kept in a signed cookie
app.add_middleware(SessionMiddleware, secret_key=SESSION_SECRET_KEY)


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    # Unique usernames, category names and acronym owners are enforced by the schema
    logger.warning("Constraint violation on %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(status_code=400, content={"detail": "Constraint violation"})


# auth goes first so /api/users/login and /me are not taken as user ids
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(users.v2_router)
app.include_router(acronyms.router)
app.include_router(categories.router)
app.include_router(website.router)
