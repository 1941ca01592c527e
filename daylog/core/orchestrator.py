# daylog/core/orchestrator.py
# The conversation engine: a bounded request / tool-execution loop against the chat endpoint.
# Date: 2026-10-19
# Version: 0.1.0

from typing import Any, Dict, List, Optional, Protocol
from daylog.core.errors import IterationBudgetExhaustedError, ToolError
from daylog.core.tool_registry import ToolExecutor, ToolRegistry, tool_registry
from daylog.models.common import Message, ToolCall
from daylog.utils.logger import console

DEFAULT_MAX_ITERATIONS = 5


class ChatCompletionClient(Protocol):
    async def create_chat_completion(self, messages: List[Message], tools: Optional[List[Dict[str, Any]]] = None) -> Message:
        ...


class ConversationEngine:
    """
    Drives one conversation to a final answer.

    Each cycle sends the whole transcript and the tool definitions to the
    endpoint. A reply without tool calls ends the conversation; otherwise the
    reply is appended as-is, every requested tool is run in order and its
    result appended under the same call id, and the next cycle starts. After
    `max_iterations` tool cycles without an answer the run fails with
    IterationBudgetExhaustedError instead of sending another request.

    Endpoint errors propagate untouched. Tool errors are written into the
    transcript as {"error": ...} payloads so the model can react to them.
    """
    def __init__(
        self,
        endpoint: ChatCompletionClient,
        executor: ToolExecutor,
        registry: Optional[ToolRegistry] = None,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
    ):
        self.endpoint = endpoint
        self.executor = executor
        self.registry = registry or tool_registry
        self.max_iterations = max_iterations

    async def run(self, seed: List[Message]) -> str:
        transcript: List[Message] = list(seed)
        tools = self.registry.get_definitions()
        remaining_iterations = self.max_iterations
        cycle = 0

        while True:
            if remaining_iterations <= 0:
                console.error(f"No final answer after {self.max_iterations} tool rounds. Stopping.")
                raise IterationBudgetExhaustedError(self.max_iterations)

            cycle += 1
            console.rule(f"Request cycle {cycle}")
            reply = await self.endpoint.create_chat_completion(transcript, tools)

            if not reply.tool_calls:
                console.success(f"Final answer received after {cycle} request cycle(s).")
                return reply.content or ""

            transcript.append(reply)
            for tool_call in reply.tool_calls:
                transcript.append(await self._execute_tool(tool_call))

            remaining_iterations -= 1

    async def _execute_tool(self, tool_call: ToolCall) -> Message:
        """Runs one requested tool and returns its correlated result turn."""
        try:
            arguments = tool_call.parse_arguments()
            console.info(f"Executing tool '{tool_call.name}' (call {tool_call.id}).")
            result = await self.executor.execute(tool_call.name, arguments)
        except ToolError as e:
            console.warning(f"Tool '{tool_call.name}' failed: {e}")
            result = {"error": str(e)}
        except Exception as e:
            console.exception(f"Unexpected error executing tool '{tool_call.name}'")
            result = {"error": f"{type(e).__name__}: {e}"}
        return Message.tool_result(tool_call.id, result)
