# The module is to define the API endpoints for chat and report generation.
# Date: 2026-10-19
# Version: 0.1.0

from fastapi import APIRouter, Depends, HTTPException, status
from daylog.api.deps import get_assistant, get_record_store, get_session_manager
from daylog.core.assistant import AssistantService
from daylog.core.errors import AssistantError, NotConfiguredError
from daylog.models.api_models import ChatRequest, ChatResponse, ReportRequest, ReportResponse
from daylog.models.records import DateRange
from daylog.services.record_store import RecordStore
from daylog.services.session_manager import SessionManager
from daylog.utils.logger import console

router = APIRouter()

@router.post("/",
          response_model=ChatResponse)
async def chat_with_assistant(
    request: ChatRequest,
    assistant: AssistantService = Depends(get_assistant),
    sessions: SessionManager = Depends(get_session_manager),
):
    """
    Handles a single turn in a conversation. The session's earlier messages are
    replayed to the assistant and the new exchange is saved on success.
    """
    console.info(f"Received chat request for session_id: {request.session_id}")

    conversation = await sessions.get_conversation(request.session_id)
    try:
        reply = await assistant.chat(request.user_input, conversation.messages)
    except NotConfiguredError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except AssistantError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))

    await sessions.append_exchange(request.session_id, request.user_input, reply)
    console.success(f"Sending response for session_id: {request.session_id}")

    return ChatResponse(session_id=request.session_id, content=reply)

@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def clear_chat(session_id: str, sessions: SessionManager = Depends(get_session_manager)):
    """Forgets the history of a chat session."""
    await sessions.clear_conversation(session_id)

@router.post("/report",
          response_model=ReportResponse)
async def generate_report(
    request: ReportRequest,
    assistant: AssistantService = Depends(get_assistant),
    store: RecordStore = Depends(get_record_store),
):
    """
    Generates a report for today, or for start_date..end_date when both are given.
    """
    if (request.start_date is None) != (request.end_date is None):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="start_date and end_date must be given together.",
        )

    system_prompt = request.system_prompt
    if system_prompt is None and request.prompt_id is not None:
        prompt = await store.get_prompt(request.prompt_id)
        if prompt is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Prompt {request.prompt_id} not found.")
        system_prompt = prompt.content

    date_range = None
    if request.start_date is not None:
        date_range = DateRange(start_date=request.start_date, end_date=request.end_date)

    try:
        content = await assistant.generate_daily_report(system_prompt, date_range)
    except NotConfiguredError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except AssistantError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))

    return ReportResponse(content=content)
