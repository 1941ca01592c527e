# Request-scoped access to the application's shared services.
# Date: 2026-10-19
# Version: 0.1.0

from fastapi import Request

from daylog.core.assistant import AssistantService
from daylog.services.record_store import RecordStore
from daylog.services.session_manager import SessionManager


def get_assistant(request: Request) -> AssistantService:
    return request.app.state.assistant


def get_record_store(request: Request) -> RecordStore:
    return request.app.state.record_store


def get_session_manager(request: Request) -> SessionManager:
    return request.app.state.session_manager
