# File: secrets_portal/api/v1/routes_auth.py

"""
Auth API routes (JSON).

Same register / login operations as the HTML form flow, with the outcome
mapped to an HTTP status code. Every status carries an AuthResult body.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from secrets_portal.api.deps import DbSession
from secrets_portal.schemas.user import AuthResult, UserCredentials
from secrets_portal.services.auth_service import (
    AuthOutcome,
    authenticate_user,
    register_user,
)

router = APIRouter()

OUTCOME_STATUS = {
    AuthOutcome.REGISTERED: status.HTTP_201_CREATED,
    AuthOutcome.ALREADY_REGISTERED: status.HTTP_409_CONFLICT,
    AuthOutcome.AUTHENTICATED: status.HTTP_200_OK,
    AuthOutcome.INCORRECT_PASSWORD: status.HTTP_401_UNAUTHORIZED,
    AuthOutcome.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    AuthOutcome.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _documented(*outcomes: AuthOutcome) -> dict:
    return {
        OUTCOME_STATUS[outcome]: {"model": AuthResult, "description": outcome.message}
        for outcome in outcomes
    }


def _to_response(outcome: AuthOutcome) -> JSONResponse:
    return JSONResponse(
        status_code=OUTCOME_STATUS[outcome],
        content=AuthResult.from_outcome(outcome).model_dump(mode="json"),
    )


@router.post(
    "/login",
    summary="User login",
    response_class=JSONResponse,
    responses=_documented(
        AuthOutcome.AUTHENTICATED,
        AuthOutcome.INCORRECT_PASSWORD,
        AuthOutcome.USER_NOT_FOUND,
        AuthOutcome.INTERNAL_ERROR,
    ),
)
def login(payload: UserCredentials, db: DbSession):
    """
    Verify an email/password pair.

    200 on success, 401 for a wrong password, 404 for an unknown email.
    """
    outcome = authenticate_user(db, email=payload.email, password=payload.password)
    return _to_response(outcome)


@router.post(
    "/register",
    summary="User registration",
    response_class=JSONResponse,
    responses=_documented(
        AuthOutcome.REGISTERED,
        AuthOutcome.ALREADY_REGISTERED,
        AuthOutcome.INTERNAL_ERROR,
    ),
)
def register(payload: UserCredentials, db: DbSession):
    """
    Create a new user. 409 if the email is already registered.
    """
    outcome = register_user(db, email=payload.email, password=payload.password)
    return _to_response(outcome)
