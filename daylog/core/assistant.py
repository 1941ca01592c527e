# daylog/core/assistant.py
# The service facade the rest of the application talks to: chat and report generation.
# Date: 2026-10-19
# Version: 0.1.0

from typing import Any, Iterable, List, Mapping, Optional, Union
from daylog.core.config import AssistantConfig, Settings, get_settings
from daylog.core.errors import AssistantError, NotConfiguredError
from daylog.core.orchestrator import ConversationEngine, ChatCompletionClient
from daylog.core.tool_registry import ToolExecutor, ToolRegistry, tool_registry
from daylog.models.common import HistoryEntry, Message
from daylog.models.records import DateRange
from daylog.services.llm_connector import ChatEndpoint
from daylog.utils.logger import console

CHAT_SYSTEM_PROMPT = (
    "You are a helpful assistant that helps the user keep and analyze their daily work log. "
    "The log holds ideas and completed tasks. Use the available tools to look up the current "
    "date and the user's records whenever the question depends on them."
)

REPORT_SYSTEM_PROMPT = """You are a professional daily report analyst. Use the tools to fetch the data the user asks about, then write a detailed summary.

The summary should cover:
1. Work results and progress
2. Important ideas and reflections
3. Time management and efficiency
4. Suggestions for improvement

Keep the language professional, concise and well organized. Once you have the data, analyze it carefully and produce a valuable summary."""

REPORT_TODAY_REQUEST = (
    "Please analyze my work for today and write a daily report. Use the tools to get all of "
    "today's ideas and completed tasks, then analyze them in depth."
)

REPORT_RANGE_REQUEST = (
    "Please analyze my work from {start_date} to {end_date} and write a summary report. Use the "
    "tools to get all ideas and completed tasks in this period, then analyze them in depth."
)

HistoryItem = Union[HistoryEntry, Mapping[str, Any]]


class AssistantService:
    """
    Stateless entry points over a ConversationEngine.

    The service owns no transcript: every call builds its own seed and the
    engine discards it when the call returns. Configuration is set with
    initialize(); calling it again replaces the engine.
    """
    def __init__(
        self,
        data_provider,
        settings: Optional[Settings] = None,
        registry: Optional[ToolRegistry] = None,
    ):
        self.data_provider = data_provider
        self.settings = settings or get_settings()
        self.registry = registry or tool_registry
        self._config: Optional[AssistantConfig] = None
        self._engine: Optional[ConversationEngine] = None

    @property
    def config(self) -> Optional[AssistantConfig]:
        return self._config

    def initialize(self, config: AssistantConfig, endpoint: Optional[ChatCompletionClient] = None):
        """
        (Re)builds the engine for a configuration. An incomplete configuration
        leaves the service unconfigured.
        """
        self._config = config
        if not config.is_complete():
            console.warning("Assistant configuration is incomplete; the assistant stays disabled.")
            self._engine = None
            return

        endpoint = endpoint or ChatEndpoint(
            config,
            temperature=self.settings.LLM_TEMPERATURE,
            max_tokens=self.settings.LLM_MAX_TOKENS,
            timeout=self.settings.LLM_TIMEOUT_SECONDS,
        )
        self._engine = ConversationEngine(
            endpoint=endpoint,
            executor=ToolExecutor(self.data_provider, self.registry),
            registry=self.registry,
            max_iterations=self.settings.MAX_TOOL_ITERATIONS,
        )
        console.info(f"Assistant initialized with model '{config.model}' at {config.api_url}")

    def is_configured(self) -> bool:
        return self._engine is not None and self._config is not None and self._config.is_complete()

    def _require_engine(self) -> ConversationEngine:
        if not self.is_configured():
            raise NotConfiguredError()
        return self._engine

    async def chat(self, message: str, history: Iterable[HistoryItem] = ()) -> str:
        """
        Answers one user message in the context of the prior history.

        Args:
            message: The new user message.
            history: Earlier user/assistant messages, oldest first.

        Raises:
            NotConfiguredError: Before any network call if the assistant is not configured.
            AssistantError: If the conversation failed.
        """
        engine = self._require_engine()

        try:
            seed: List[Message] = [Message.system(CHAT_SYSTEM_PROMPT)]
            for item in history:
                entry = item if isinstance(item, HistoryEntry) else HistoryEntry.model_validate(item)
                seed.append(Message(role=entry.role, content=entry.content))
            seed.append(Message.user(message))

            return await engine.run(seed)
        except Exception as e:
            console.error(f"AI chat failed: {e}")
            raise AssistantError(f"Chat failed: {e}") from e

    async def generate_daily_report(
        self,
        system_prompt: Optional[str] = None,
        date_range: Optional[Union[DateRange, Mapping[str, str]]] = None,
    ) -> str:
        """
        Writes a report for today, or for an explicit date range.

        Args:
            system_prompt: Replaces the default report instructions when given.
            date_range: The inclusive range to report on; today when omitted.

        Raises:
            NotConfiguredError: Before any network call if the assistant is not configured.
            AssistantError: If report generation failed.
        """
        engine = self._require_engine()

        if date_range is not None and not isinstance(date_range, DateRange):
            date_range = DateRange.model_validate(date_range)

        if date_range is not None:
            request = REPORT_RANGE_REQUEST.format(start_date=date_range.start_date, end_date=date_range.end_date)
        else:
            request = REPORT_TODAY_REQUEST

        seed = [
            Message.system(system_prompt or REPORT_SYSTEM_PROMPT),
            Message.user(request),
        ]

        try:
            return await engine.run(seed)
        except Exception as e:
            console.error(f"Daily report generation failed: {e}")
            raise AssistantError(f"Daily report generation failed: {e}") from e
