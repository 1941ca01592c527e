"""Tests for response decoding and the OpenAI-backed chat endpoint."""

import json
from types import SimpleNamespace

import httpx
import openai
from openai.types.chat import ChatCompletion
import pytest

from daylog.core.config import AssistantConfig
from daylog.core.errors import EndpointError
from daylog.models.common import Message
from daylog.services.llm_connector import ChatEndpoint, decode_message


def completion(message):
    return {"id": "chatcmpl-1", "choices": [{"index": 0, "message": message, "finish_reason": "stop"}]}


class TestDecodeMessage:
    def test_plain_text(self):
        message = decode_message(completion({"role": "assistant", "content": "Hello there"}))

        assert message.role == "assistant"
        assert message.content == "Hello there"
        assert message.tool_calls is None

    def test_tool_calls_shape(self):
        message = decode_message(completion({
            "role": "assistant",
            "content": None,
            "tool_calls": [
                {"id": "call_1", "type": "function", "function": {"name": "get_current_time", "arguments": "{}"}},
                {"id": "call_2", "type": "function", "function": {"name": "get_history_data", "arguments": '{"start_date": "2024-01-01", "end_date": "2024-01-02"}'}},
            ],
        }))

        assert [call.id for call in message.tool_calls] == ["call_1", "call_2"]
        assert message.tool_calls[1].name == "get_history_data"
        assert message.tool_calls[1].parse_arguments() == {"start_date": "2024-01-01", "end_date": "2024-01-02"}

    def test_legacy_function_calls_shape(self):
        message = decode_message(completion({
            "role": "assistant",
            "content": None,
            "function_calls": [
                {"id": "fc_1", "name": "get_history_data", "arguments": {"start_date": "2024-01-01", "end_date": "2024-01-01"}},
            ],
        }))

        call = message.tool_calls[0]
        assert call.id == "fc_1"
        assert call.type == "function"
        assert json.loads(call.function["arguments"]) == {"start_date": "2024-01-01", "end_date": "2024-01-01"}

    def test_legacy_call_without_id_gets_one(self):
        message = decode_message(completion({
            "role": "assistant",
            "function_calls": [{"name": "get_current_time", "arguments": "{}"}],
        }))

        assert message.tool_calls[0].id.startswith("call_")

    def test_empty_tool_calls_is_final_text(self):
        message = decode_message(completion({"role": "assistant", "content": "done", "tool_calls": []}))
        assert message.tool_calls is None

    @pytest.mark.parametrize("response", [
        {},
        {"choices": []},
        {"choices": [{"message": None}]},
        "not json",
    ])
    def test_malformed_responses(self, response):
        with pytest.raises(EndpointError):
            decode_message(response)

    def test_unsupported_tool_call_shape(self):
        with pytest.raises(EndpointError):
            decode_message(completion({"role": "assistant", "tool_calls": [{"id": "x", "kind": "magic"}]}))

    def test_reads_sdk_objects(self):
        response = ChatCompletion.model_validate({
            "id": "chatcmpl-1",
            "object": "chat.completion",
            "created": 0,
            "model": "test-model",
            "choices": [{
                "index": 0,
                "finish_reason": "tool_calls",
                "message": {
                    "role": "assistant",
                    "content": None,
                    "tool_calls": [{"id": "call_9", "type": "function", "function": {"name": "get_current_time", "arguments": "{}"}}],
                },
            }],
        })

        message = decode_message(response)

        assert message.tool_calls[0].id == "call_9"


class FakeCompletions:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    async def create(self, **params):
        self.calls.append(params)
        if self.error is not None:
            raise self.error
        return self.response


def make_endpoint(completions):
    config = AssistantConfig(api_key="sk-test", api_url="https://llm.example.com/v1", model="test-model")
    client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return ChatEndpoint(config, temperature=0.7, max_tokens=2000, client=client)


class TestChatEndpoint:
    async def test_request_parameters(self):
        completions = FakeCompletions(response=completion({"role": "assistant", "content": "hi"}))
        tools = [{"type": "function", "function": {"name": "get_current_time", "description": "", "parameters": {}}}]

        reply = await make_endpoint(completions).create_chat_completion([Message.user("hello")], tools)

        assert reply.content == "hi"
        params = completions.calls[0]
        assert params["model"] == "test-model"
        assert params["messages"] == [{"role": "user", "content": "hello"}]
        assert params["tools"] == tools
        assert params["tool_choice"] == "auto"
        assert params["temperature"] == 0.7
        assert params["max_tokens"] == 2000

    async def test_no_tools_means_no_tool_choice(self):
        completions = FakeCompletions(response=completion({"role": "assistant", "content": "hi"}))

        await make_endpoint(completions).create_chat_completion([Message.user("hello")])

        assert "tool_choice" not in completions.calls[0]

    async def test_connection_error_becomes_endpoint_error(self):
        request = httpx.Request("POST", "https://llm.example.com/v1/chat/completions")
        completions = FakeCompletions(error=openai.APIConnectionError(request=request))

        with pytest.raises(EndpointError) as excinfo:
            await make_endpoint(completions).create_chat_completion([Message.user("hello")])

        assert isinstance(excinfo.value.__cause__, openai.APIConnectionError)
        assert len(completions.calls) == 1

    async def test_status_error_becomes_endpoint_error(self):
        request = httpx.Request("POST", "https://llm.example.com/v1/chat/completions")
        response = httpx.Response(401, request=request, json={"error": {"message": "bad key"}})
        error = openai.AuthenticationError("bad key", response=response, body={"message": "bad key"})

        with pytest.raises(EndpointError, match="bad key"):
            await make_endpoint(FakeCompletions(error=error)).create_chat_completion([Message.user("hello")])

    async def test_real_client_disables_retries(self):
        config = AssistantConfig(api_key="sk-test", api_url="https://llm.example.com/v1", model="test-model")

        endpoint = ChatEndpoint(config)

        assert endpoint._client.max_retries == 0
