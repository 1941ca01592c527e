# The module is to define the API models for the application.
# Date: 2026-10-19
# Version: 0.1.0

from datetime import datetime
from pydantic import BaseModel, Field
from typing import List, Optional

class ChatRequest(BaseModel):
    """
    Defines the request body for the /v1/chat endpoint.
    Attributes:
        session_id (str): The unique ID for the conversation session.
        user_input (str): The user's text input to be processed by the chat service.
    """
    session_id: str = Field(..., description="The unique ID for the conversation session.")
    user_input: str = Field(..., min_length=1, description="The user's text input.")

class ChatResponse(BaseModel):
    """
    Defines the response body for the /v1/chat endpoint.
    Attributes:
        session_id (str): The unique ID for the conversation session.
        role (str): Always 'assistant'.
        content (str): The assistant's reply.
    """
    session_id: str
    role: str = "assistant"
    content: str

class ReportRequest(BaseModel):
    """
    Defines the request body for the /v1/chat/report endpoint.
    Attributes:
        prompt_id (Optional[int]): A saved prompt template to use as the system prompt.
        system_prompt (Optional[str]): An explicit system prompt; wins over prompt_id.
        start_date (Optional[str]): First day of the report, YYYY-MM-DD.
        end_date (Optional[str]): Last day of the report, YYYY-MM-DD.
    """
    prompt_id: Optional[int] = None
    system_prompt: Optional[str] = None
    start_date: Optional[str] = Field(default=None, pattern=r"^\d{4}-\d{2}-\d{2}$")
    end_date: Optional[str] = Field(default=None, pattern=r"^\d{4}-\d{2}-\d{2}$")

class ReportResponse(BaseModel):
    content: str

class NewSessionResponse(BaseModel):
    """
    Defines the response body for the /v1/session/new endpoint.
    Attributes:
        session_id (str): The unique ID for the newly created conversation session.
        message (str): A message indicating the session has been created successfully.
    """
    session_id: str
    message: str

class ConfigStatusResponse(BaseModel):
    configured: bool

class ConfigView(BaseModel):
    """
    The assistant configuration as shown to the UI. Only the last four
    characters of the API key are revealed.
    """
    api_key: str
    api_url: str
    model: str

    @classmethod
    def masked(cls, config) -> "ConfigView":
        key = config.api_key
        hint = "****" + key[-4:] if len(key) > 8 else "****"
        return cls(api_key=hint if key else "", api_url=config.api_url, model=config.model)

class IdeaCreate(BaseModel):
    content: str = Field(..., min_length=1)
    attachments: List[str] = Field(default_factory=list)
    timestamp: Optional[datetime] = None

class TaskCreate(BaseModel):
    content: str = Field(..., min_length=1)
    start_time: datetime
    end_time: datetime
    attachments: List[str] = Field(default_factory=list)
    timestamp: Optional[datetime] = None

class PromptWrite(BaseModel):
    name: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)

class CreatedResponse(BaseModel):
    id: int
