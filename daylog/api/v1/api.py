# The module is to define the API router for the application.
# Date: 2026-10-19
# Version: 0.1.0

from fastapi import APIRouter
from daylog.api.v1.endpoints import session, chat, config, prompts, records

api_router = APIRouter()

# Include the session router with a '/session' prefix
api_router.include_router(session.router, prefix="/session", tags=["Session Management"])

# Include the chat router with a '/chat' prefix
api_router.include_router(chat.router, prefix="/chat", tags=["Conversation"])

api_router.include_router(config.router, prefix="/config", tags=["Configuration"])
api_router.include_router(records.router, prefix="/records", tags=["Records"])
api_router.include_router(prompts.router, prefix="/prompts", tags=["Prompt Templates"])
