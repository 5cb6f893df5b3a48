# tilapp/core/contexts.py

from pydantic import BaseModel

from tilapp.schemas import AcronymOut, CategoryOut, UserPublic


# -------------------------------
# Page Contexts
# -------------------------------
# Each context pairs a page title with the data its template renders.

class IndexContext(BaseModel):
    title: str = "Home page"
    acronyms: list[AcronymOut]


class AcronymContext(BaseModel):
    title: str
    acronym: AcronymOut
    user: UserPublic
    categories: list[CategoryOut]


class UserContext(BaseModel):
    title: str
    user: UserPublic
    acronyms: list[AcronymOut]


class AllUsersContext(BaseModel):
    title: str = "All Users"
    users: list[UserPublic]


class AllCategoriesContext(BaseModel):
    title: str = "All Categories"
    categories: list[CategoryOut]


class CategoryContext(BaseModel):
    title: str
    category: CategoryOut
    acronyms: list[AcronymOut]


class CreateAcronymContext(BaseModel):
    title: str = "Create An Acronym"
    users: list[UserPublic]


class EditAcronymContext(BaseModel):
    """
    Shares the create form template; `editing` switches its labels
    and prefills the fields.
    """
    title: str = "Edit Acronym"
    acronym: AcronymOut
    users: list[UserPublic]
    categories: list[CategoryOut]
    editing: bool = True


class LoginContext(BaseModel):
    title: str = "Log In"
    login_error: bool = False


# -------------------------------
# Converters
# -------------------------------

def acronyms_out(acronyms) -> list[AcronymOut]:
    return [AcronymOut.model_validate(acronym) for acronym in acronyms]


def categories_out(categories) -> list[CategoryOut]:
    return [CategoryOut.model_validate(category) for category in categories]


def users_public(users) -> list[UserPublic]:
    return [user.to_public() for user in users]
