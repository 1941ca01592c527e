# The module is to define the transcript models shared by the engine and the API.
# Date: 2026-10-19
# Version: 0.1.0

import json
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional, Literal

from daylog.core.errors import ToolArgumentError

Role = Literal["system", "user",
               "assistant", "tool"]


class ToolCall(BaseModel):
    """
    Represents a tool call made by the assistant, including the function name and arguments.
    Attributes:
        id (str): The unique ID for the tool call.
        function (dict): The function name and its JSON-encoded arguments.
        type (str): The type of the tool call, e.g., 'function'.
    """
    id: str = Field(..., description="The unique ID for the tool call.")
    function: Dict[str, Any] = Field(..., description="The function name and arguments.")
    type: str = Field(default="function", description="The type of the tool call, e.g., 'function'.")

    @property
    def name(self) -> str:
        return self.function.get("name", "")

    def parse_arguments(self) -> Dict[str, Any]:
        """
        Decodes the JSON argument string sent by the model.

        Raises:
            ToolArgumentError: If the arguments are not a JSON object.
        """
        raw = self.function.get("arguments") or "{}"
        try:
            arguments = json.loads(raw)
        except (TypeError, json.JSONDecodeError) as e:
            raise ToolArgumentError(f"Arguments for '{self.name}' are not valid JSON: {e}") from e
        if not isinstance(arguments, dict):
            raise ToolArgumentError(f"Arguments for '{self.name}' must be a JSON object.")
        return arguments


class Message(BaseModel):
    """
    Represents one turn of a transcript, from the system, user, assistant, or a tool.
    Attributes:
        role (Role): The role of the message sender (system, user, assistant, or tool).
        content (Optional[str]): The content of the message.
        tool_calls (Optional[List[ToolCall]]): A list of tool calls requested by the assistant.
        tool_call_id (Optional[str]): The ID of the tool call this message is a result of.
    """
    role: Role = Field(..., description="The role of the message sender.")
    content: Optional[str] = Field(default=None, description="The content of the message.")
    tool_calls: Optional[List[ToolCall]] = Field(default=None, description="A list of tool calls requested by the assistant.")
    tool_call_id: Optional[str] = Field(default=None, description="The ID of the tool call this message is a result of.")

    @classmethod
    def system(cls, content: str) -> "Message":
        return cls(role="system", content=content)

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(role="user", content=content)

    @classmethod
    def tool_result(cls, tool_call_id: str, payload: Any) -> "Message":
        return cls(role="tool", tool_call_id=tool_call_id, content=json.dumps(payload, ensure_ascii=False))


class HistoryEntry(BaseModel):
    """
    A user or assistant message kept in an interactive chat history.
    Attributes:
        role (str): 'user' or 'assistant'.
        content (str): The text of the message.
        timestamp (int): Unix epoch seconds when the message was recorded.
    """
    role: Literal["user", "assistant"]
    content: str
    timestamp: Optional[int] = None


class Conversation(BaseModel):
    """
    Represents a persisted interactive chat session. Only user and assistant
    text is kept; tool traffic lives and dies inside a single engine run.
    """
    session_id: Optional[str] = None
    messages: List[HistoryEntry] = Field(default_factory=list, description="The history of messages in the conversation.")
