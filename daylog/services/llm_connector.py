# daylog/services/llm_connector.py
# The chat completion endpoint, seen through the OpenAI SDK.
# Date: 2026-10-19
# Version: 0.1.0

import json
from uuid import uuid4
from openai import AsyncOpenAI, APIError
from typing import Any, Dict, List, Optional
from daylog.core.config import AssistantConfig
from daylog.core.errors import EndpointError
from daylog.models.common import Message, ToolCall
from daylog.utils.logger import console


def _normalize_tool_call(raw_call: Dict[str, Any]) -> ToolCall:
    """
    Turns one tool-call directive into a ToolCall. Two shapes are accepted:
    the standard {"id", "function": {"name", "arguments"}} and the flat legacy
    {"id", "name", "arguments"}, whose arguments may already be decoded.
    """
    if isinstance(raw_call.get("function"), dict):
        name = raw_call["function"].get("name")
        arguments = raw_call["function"].get("arguments")
    elif "name" in raw_call:
        name = raw_call.get("name")
        arguments = raw_call.get("arguments")
    else:
        raise EndpointError(f"Unsupported tool call format: {raw_call}")

    if not name:
        raise EndpointError(f"Tool call without a function name: {raw_call}")
    if arguments is None:
        arguments = "{}"
    elif not isinstance(arguments, str):
        arguments = json.dumps(arguments, ensure_ascii=False)

    return ToolCall(
        id=raw_call.get("id") or f"call_{uuid4().hex}",
        function={"name": name, "arguments": arguments},
    )


def decode_message(response: Any) -> Message:
    """
    Extracts the first choice's message from a chat completion response and
    normalizes its tool calls, reading either 'tool_calls' or the legacy
    'function_calls' field.

    Raises:
        EndpointError: If the response does not contain a usable message.
    """
    raw = response.model_dump() if hasattr(response, "model_dump") else response
    if not isinstance(raw, dict):
        raise EndpointError("Malformed response from LLM provider: expected a JSON object.")

    choices = raw.get("choices") or []
    if not choices or not isinstance(choices[0], dict) or not isinstance(choices[0].get("message"), dict):
        raise EndpointError("Malformed response from LLM provider: no message in choices.")

    message = choices[0]["message"]
    raw_calls = message.get("tool_calls") or message.get("function_calls") or []
    if not isinstance(raw_calls, list):
        raise EndpointError("Malformed response from LLM provider: tool calls must be a list.")

    tool_calls = [_normalize_tool_call(call) for call in raw_calls]
    content = message.get("content")
    if content is not None and not isinstance(content, str):
        raise EndpointError("Malformed response from LLM provider: message content is not text.")

    return Message(role="assistant", content=content, tool_calls=tool_calls or None)


class ChatEndpoint:
    """
    One configured connection to an OpenAI-compatible chat completion API.
    The SDK's own retries are disabled; a failed request surfaces at once.
    """
    def __init__(
        self,
        config: AssistantConfig,
        temperature: float = 0.7,
        max_tokens: int = 2000,
        timeout: float = 60.0,
        client: Optional[AsyncOpenAI] = None,
    ):
        self.config = config
        self.temperature = temperature
        self.max_tokens = max_tokens
        self._client = client or AsyncOpenAI(
            api_key=config.api_key,
            base_url=config.api_url,
            timeout=timeout,
            max_retries=0,
        )

    async def create_chat_completion(self, messages: List[Message], tools: Optional[List[Dict[str, Any]]] = None) -> Message:
        request_params: Dict[str, Any] = {
            "model": self.config.model,
            "messages": [msg.model_dump(exclude_none=True) for msg in messages],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }
        if tools:
            request_params["tools"] = tools
            request_params["tool_choice"] = "auto"

        try:
            response = await self._client.chat.completions.create(**request_params)
        except APIError as e:
            message = str(e.body) if e.body is not None else str(e)
            if isinstance(e.body, dict):
                message = e.body.get('message', message)
            console.error(f"An API error occurred: {message}")
            raise EndpointError(f"Error from LLM provider: {message}") from e

        return decode_message(response)
