"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Request

from src.adapters.audit.file_log import FileAuditLog
from src.adapters.repository.flatfile import FlatFileRecordStore
from src.config.settings import get_settings
from src.domain.registration import RegistrationService


def get_record_store(request: Request) -> FlatFileRecordStore:
    """
    Get the record store from app state.

    The store is created and loaded during app lifespan startup and
    stored in app.state; it must outlive requests to keep its lock shared.
    """
    return request.app.state.store


def get_audit_log(request: Request) -> FileAuditLog:
    """Get the audit log from app state."""
    return request.app.state.audit_log


def get_registration_service(request: Request) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires the shared record store and the configured bcrypt cost.
    """
    settings = get_settings()
    return RegistrationService(
        store=get_record_store(request),
        bcrypt_rounds=settings.bcrypt_cost,
    )
