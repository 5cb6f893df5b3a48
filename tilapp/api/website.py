# tilapp/api/website.py

import logging
import uuid
from pathlib import Path
from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from tilapp.core.categories import add_category, normalize_names, sync_categories
from tilapp.core.contexts import (
    AcronymContext,
    AllCategoriesContext,
    AllUsersContext,
    CategoryContext,
    CreateAcronymContext,
    EditAcronymContext,
    IndexContext,
    LoginContext,
    UserContext,
    acronyms_out,
    categories_out,
    users_public,
)
from tilapp.core.security import authenticate_user
from tilapp.core.utils import get_or_404
from tilapp.database import get_db
from tilapp.models import Acronym, Category, User


logger = logging.getLogger(__name__)


# -------------------------------
# Router & Template Configuration
# -------------------------------

router = APIRouter(tags=["website"], default_response_class=HTMLResponse)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=TEMPLATES_DIR)


def render(request: Request, name: str, context):
    return templates.TemplateResponse(request, name, context.model_dump())


# -------------------------------
# Session Authentication
# -------------------------------

def get_session_user(request: Request, db: Session = Depends(get_db)) -> User | None:
    """
    Returns the user logged in through the website, if any.
    A session pointing at a deleted user counts as anonymous.
    """
    user_id = request.session.get("user_id")
    if user_id is None:
        return None
    try:
        return db.get(User, uuid.UUID(user_id))
    except ValueError:
        return None


def require_session_user(user: User | None = Depends(get_session_user)) -> User:
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_303_SEE_OTHER,
            headers={"Location": "/login"},
        )
    return user


@router.get("/login")
def login_form(request: Request, error: bool = False):
    return render(request, "login.html", LoginContext(login_error=error))


@router.post("/login")
def login(
    request: Request,
    username: str = Form(...),
    password: str = Form(...),
    db: Session = Depends(get_db),
):
    user = authenticate_user(db, username, password)
    if not user:
        logger.warning("Failed website login for %r", username)
        return RedirectResponse("/login?error=true", status_code=status.HTTP_303_SEE_OTHER)

    request.session["user_id"] = str(user.id)
    logger.info("User %s logged in to the website", user.username)
    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)


@router.post("/logout")
def logout(request: Request):
    request.session.clear()
    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)


# -------------------------------
# Read-only Pages
# -------------------------------

@router.get("/")
def index(request: Request, db: Session = Depends(get_db)):
    acronyms = db.query(Acronym).order_by(Acronym.id).all()
    context = IndexContext(acronyms=acronyms_out(acronyms))
    return render(request, "index.html", context)


@router.get("/users")
def all_users(request: Request, db: Session = Depends(get_db)):
    users = db.query(User).order_by(User.name).all()
    context = AllUsersContext(users=users_public(users))
    return render(request, "allUsers.html", context)


@router.get("/users/{user_id}")
def user_page(request: Request, user_id: uuid.UUID, db: Session = Depends(get_db)):
    user = get_or_404(db, User, user_id)
    context = UserContext(
        title=user.name,
        user=user.to_public(),
        acronyms=acronyms_out(user.acronyms),
    )
    return render(request, "user.html", context)


@router.get("/categories")
def all_categories(request: Request, db: Session = Depends(get_db)):
    categories = db.query(Category).order_by(Category.name).all()
    context = AllCategoriesContext(categories=categories_out(categories))
    return render(request, "allCategories.html", context)


@router.get("/categories/{category_id}")
def category_page(request: Request, category_id: int, db: Session = Depends(get_db)):
    category = get_or_404(db, Category, category_id)
    context = CategoryContext(
        title=category.name,
        category=categories_out([category])[0],
        acronyms=acronyms_out(category.acronyms),
    )
    return render(request, "category.html", context)


# -------------------------------
# Create Acronym
# -------------------------------
# Declared before /acronyms/{acronym_id} so "create" is not read as an id.

@router.get("/acronyms/create", dependencies=[Depends(require_session_user)])
def create_acronym_form(request: Request, db: Session = Depends(get_db)):
    users = db.query(User).order_by(User.name).all()
    context = CreateAcronymContext(users=users_public(users))
    return render(request, "createAcronym.html", context)


@router.post("/acronyms/create", dependencies=[Depends(require_session_user)])
def create_acronym(
    user_id: uuid.UUID = Form(...),
    short: str = Form(...),
    long: str = Form(...),
    categories: list[str] | None = Form(None),
    db: Session = Depends(get_db),
):
    acronym = Acronym(short=short, long=long, user_id=user_id)
    db.add(acronym)
    db.flush()
    if acronym.id is None:
        raise HTTPException(status_code=500, detail="Acronym was saved without an id")

    for name in sorted(normalize_names(categories)):
        add_category(db, name, acronym)
    db.commit()
    logger.info("Created acronym %s from website", acronym.id)

    return RedirectResponse(f"/acronyms/{acronym.id}", status_code=status.HTTP_303_SEE_OTHER)


# -------------------------------
# Single Acronym
# -------------------------------

@router.get("/acronyms/{acronym_id}")
def acronym_page(request: Request, acronym_id: int, db: Session = Depends(get_db)):
    acronym = get_or_404(db, Acronym, acronym_id)
    context = AcronymContext(
        title=acronym.short,
        acronym=acronyms_out([acronym])[0],
        user=acronym.user.to_public(),
        categories=categories_out(acronym.categories),
    )
    return render(request, "acronym.html", context)


@router.get("/acronyms/{acronym_id}/edit", dependencies=[Depends(require_session_user)])
def edit_acronym_form(request: Request, acronym_id: int, db: Session = Depends(get_db)):
    acronym = get_or_404(db, Acronym, acronym_id)
    users = db.query(User).order_by(User.name).all()
    context = EditAcronymContext(
        acronym=acronyms_out([acronym])[0],
        users=users_public(users),
        categories=categories_out(acronym.categories),
    )
    return render(request, "createAcronym.html", context)


@router.post("/acronyms/{acronym_id}/edit", dependencies=[Depends(require_session_user)])
def edit_acronym(
    acronym_id: int,
    user_id: uuid.UUID = Form(...),
    short: str = Form(...),
    long: str = Form(...),
    categories: list[str] | None = Form(None),
    db: Session = Depends(get_db),
):
    """
    Overwrites the acronym's fields and replaces its category set.
    Field changes and category changes are committed as one transaction.
    """
    acronym = get_or_404(db, Acronym, acronym_id)
    acronym.short = short
    acronym.long = long
    acronym.user_id = user_id

    sync_categories(db, acronym, categories)
    db.commit()
    logger.info("Edited acronym %s from website", acronym.id)

    return RedirectResponse(f"/acronyms/{acronym.id}", status_code=status.HTTP_303_SEE_OTHER)


@router.post("/acronyms/{acronym_id}/delete", dependencies=[Depends(require_session_user)])
def delete_acronym(acronym_id: int, db: Session = Depends(get_db)):
    acronym = get_or_404(db, Acronym, acronym_id)
    db.delete(acronym)
    db.commit()
    logger.info("Deleted acronym %s from website", acronym_id)
    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
