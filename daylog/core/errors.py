# The module is to define the exception hierarchy of the assistant.
# Date: 2026-10-19
# Version: 0.1.0


class DayLogError(Exception):
    """Base class for every error raised by the assistant."""


class NotConfiguredError(DayLogError):
    """The assistant was used before an endpoint URL, credential and model were set."""

    def __init__(self, message: str = "The AI assistant is not configured. Set the API key, API URL and model first."):
        super().__init__(message)


class EndpointError(DayLogError):
    """
    The remote chat endpoint failed: network error, timeout, non-2xx status
    or a response body that could not be interpreted.
    """


class ToolError(DayLogError):
    """A local tool could not produce a result."""


class UnknownToolError(ToolError):
    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: '{tool_name}'")


class DataUnavailableError(ToolError):
    """The data provider failed while serving a tool."""


class ToolArgumentError(ToolError):
    """Tool arguments were not valid JSON or did not match the tool's schema."""


class IterationBudgetExhaustedError(ToolError):
    def __init__(self, budget: int):
        self.budget = budget
        super().__init__(
            f"The model requested tools {budget} times without giving an answer; "
            "the conversation was stopped to avoid a tool-call loop."
        )


class AssistantError(DayLogError):
    """
    Raised by the service facade. The message is meant for display; the original
    error is kept as __cause__.
    """
