# The module is to define the API endpoints for session management.
# Date: 2026-10-19
# Version: 0.1.0

from uuid import uuid4
from fastapi import APIRouter
from daylog.utils.logger import console
from daylog.models.api_models import NewSessionResponse

router = APIRouter()

def get_new_session_id() -> str:
    """Generates a new, unique session ID."""
    return str(uuid4())

@router.post("/new",
          response_model=NewSessionResponse)
def create_new_session():
    """
    Initializes a new session and returns a unique session ID.
    """
    session_id = get_new_session_id()
    console.info(f"New session created: {session_id}")
    return NewSessionResponse(
        session_id=session_id,
        message="New session created successfully."
    )
