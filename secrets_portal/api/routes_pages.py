# File: secrets_portal/api/routes_pages.py

"""
HTML form flow: home, register and login pages plus the protected
secrets page.

Form field `username` carries the email address. Anything other than a
successful register/login is answered with a plain-text message.
"""

from pathlib import Path

from fastapi import APIRouter, Form, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.templating import Jinja2Templates

from secrets_portal.api.deps import DbSession
from secrets_portal.models.user import EMAIL_MAX_LENGTH
from secrets_portal.services.auth_service import (
    AuthOutcome,
    authenticate_user,
    register_user,
)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter()


def _render_outcome(request: Request, outcome: AuthOutcome):
    if outcome.is_success:
        return templates.TemplateResponse(request, "secrets.html")

    status_code = (
        status.HTTP_500_INTERNAL_SERVER_ERROR
        if outcome is AuthOutcome.INTERNAL_ERROR
        else status.HTTP_200_OK
    )
    return PlainTextResponse(outcome.message, status_code=status_code)


@router.get("/", response_class=HTMLResponse)
def home_page(request: Request):
    return templates.TemplateResponse(request, "home.html")


@router.get("/login", response_class=HTMLResponse)
def login_page(request: Request):
    return templates.TemplateResponse(request, "login.html")


@router.get("/register", response_class=HTMLResponse)
def register_page(request: Request):
    return templates.TemplateResponse(request, "register.html")


@router.post("/register")
def register_submit(
    request: Request,
    db: DbSession,
    username: str = Form(..., min_length=1, max_length=EMAIL_MAX_LENGTH),
    password: str = Form(..., min_length=1),
):
    outcome = register_user(db, email=username, password=password)
    return _render_outcome(request, outcome)


@router.post("/login")
def login_submit(
    request: Request,
    db: DbSession,
    username: str = Form(..., min_length=1, max_length=EMAIL_MAX_LENGTH),
    password: str = Form(..., min_length=1),
):
    outcome = authenticate_user(db, email=username, password=password)
    return _render_outcome(request, outcome)
