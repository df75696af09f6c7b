"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting domain services
wired to the infrastructure adapters and configuration placed on
app.state during app lifespan.
"""

from fastapi import Request

from src.domain.login import LoginService
from src.domain.ports import Transport, UserStore, VerificationStore
from src.domain.registration import RegistrationService
from src.domain.validation import Validator


def get_validator(request: Request) -> Validator:
    """Get the validator configured for this deployment's identifier mode."""
    return request.app.state.validator


def get_verification_store(request: Request) -> VerificationStore:
    return request.app.state.verification_store


def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store


def get_transport(request: Request) -> Transport:
    return request.app.state.transport


def get_registration_service(request: Request) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the validator, both stores, the transport, and the
    code TTL, message template and clock chosen at startup.
    """
    state = request.app.state
    return RegistrationService(
        validator=get_validator(request),
        verification_store=get_verification_store(request),
        user_store=get_user_store(request),
        transport=get_transport(request),
        code_ttl=state.code_ttl,
        message_template=state.message_template,
        clock=state.clock,
    )


def get_login_service(request: Request) -> LoginService:
    """Create login service with injected dependencies."""
    return LoginService(validator=get_validator(request), user_store=get_user_store(request))
