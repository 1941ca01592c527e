# The module is to define the API endpoints for the assistant configuration.
# Date: 2026-10-19
# Version: 0.1.0

from fastapi import APIRouter, Depends, HTTPException, status
from daylog.api.deps import get_assistant, get_record_store
from daylog.core.assistant import AssistantService
from daylog.core.config import AssistantConfig
from daylog.models.api_models import ConfigStatusResponse, ConfigView
from daylog.services.record_store import RecordStore
from daylog.utils.logger import console

router = APIRouter()

@router.get("/", response_model=ConfigView)
async def get_api_config(assistant: AssistantService = Depends(get_assistant)):
    """Returns the configuration the assistant is currently running with, API key masked."""
    if assistant.config is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="The assistant has not been configured.")
    return ConfigView.masked(assistant.config)

@router.put("/", response_model=ConfigStatusResponse)
async def save_api_config(
    config: AssistantConfig,
    assistant: AssistantService = Depends(get_assistant),
    store: RecordStore = Depends(get_record_store),
):
    """Saves the configuration and re-initializes the assistant with it."""
    await store.save_api_config(config)
    assistant.initialize(config)
    console.success("Assistant re-initialized with the new configuration.")
    return ConfigStatusResponse(configured=assistant.is_configured())

@router.get("/status", response_model=ConfigStatusResponse)
async def get_config_status(assistant: AssistantService = Depends(get_assistant)):
    return ConfigStatusResponse(configured=assistant.is_configured())
