"""
API routes - Verification code, registration, and login endpoints.

This module defines the HTTP endpoints:
- POST /send_code - Deliver a verification code to an identifier
- POST /register - Complete registration with the delivered code
- POST /login - Check credentials

Handlers are plain functions: FastAPI runs them on its worker threads, so
blocking store and transport calls never stall the event loop. Domain
errors propagate to the handlers in src.api.errors.
"""

from fastapi import APIRouter, Depends, Response, status

from src.api.dependencies import get_login_service, get_registration_service
from src.api.models import ErrorResponse, LoginRequest, RegisterRequest, SendCodeRequest
from src.domain.login import LoginService
from src.domain.registration import RegistrationService

router = APIRouter(tags=["auth"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid input or rejected request"},
    500: {"model": ErrorResponse, "description": "Database error"},
}


@router.post(
    "/send_code",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    responses=_ERROR_RESPONSES,
    summary="Send a verification code",
    description="Generate a 6-digit code, deliver it to the identifier by email or SMS, "
    "and remember it as the identifier's latest code.",
)
def send_code(
    request_data: SendCodeRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> Response:
    service.issue_code(request_data.identifier)
    return Response(status_code=status.HTTP_200_OK)


@router.post(
    "/register",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    responses=_ERROR_RESPONSES,
    summary="Register a new user",
    description="Create an account for the identifier using the last code sent to it. "
    "Codes expire one hour after they are sent.",
)
def register(
    request_data: RegisterRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> Response:
    """
    Redeem a verification code and create the account.

    - **identifier**: Email address or phone number the code was sent to
    - **name**: ASCII alphanumeric display name
    - **password**: Account password
    - **code**: Verification code
    """
    service.redeem(
        request_data.identifier,
        request_data.name,
        request_data.password,
        request_data.code,
    )
    return Response(status_code=status.HTTP_200_OK)


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    responses=_ERROR_RESPONSES,
    summary="Log in",
    description="Check an identifier/password pair. Unknown identifiers and wrong "
    "passwords produce the same response.",
)
def login(
    request_data: LoginRequest,
    service: LoginService = Depends(get_login_service),
) -> Response:
    service.authenticate(request_data.identifier, request_data.password)
    return Response(status_code=status.HTTP_200_OK)
