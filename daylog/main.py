# The module provides the FastAPI application that backs the DayLog UI.
# Date: 2026-10-19
# Version: 0.1.0

from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from daylog.api.v1.api import api_router
from daylog.core.assistant import AssistantService
from daylog.core.config import bootstrap_assistant_config, get_settings
from daylog.services.record_store import RecordStore
from daylog.services.session_manager import SessionManager
from daylog.utils.logger import console


def create_app(
    record_store: Optional[RecordStore] = None,
    session_manager: Optional[SessionManager] = None,
    assistant: Optional[AssistantService] = None,
) -> FastAPI:
    """
    Builds the application. Services not passed in are created from the
    environment settings when the application starts.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        settings = get_settings()
        owned = []
        store = record_store
        if store is None:
            store = RecordStore()
            owned.append(store)
        sessions = session_manager
        if sessions is None:
            sessions = SessionManager()
            owned.append(sessions)
        app.state.record_store = store
        app.state.session_manager = sessions

        if assistant is not None:
            app.state.assistant = assistant
        else:
            app.state.assistant = AssistantService(data_provider=store, settings=settings)
            config = await store.load_api_config() or bootstrap_assistant_config(settings)
            if config is not None:
                app.state.assistant.initialize(config)
            else:
                console.warning("No assistant configuration found. Configure it via PUT /v1/config.")

        console.success("DayLog server started.")
        try:
            yield
        finally:
            # Injected services belong to the caller.
            for service in owned:
                await service.close()

    app = FastAPI(
        title="DayLog",
        version="0.1.0",
        description="A personal work log with an AI assistant for chat and daily reports.",
        lifespan=lifespan,
    )

    @app.get("/", summary="Health Check", tags=["Status"])
    def read_root():
        """Root endpoint to check if the service is alive."""
        return {"message": "DayLog is alive and running!"}

    # Include the v1 router with a global '/v1' prefix
    app.include_router(api_router, prefix="/v1")
    return app


app = create_app()
