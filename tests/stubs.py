"""Hand-written collaborators shared by the test suite."""

import json

from daylog.models.common import Message, ToolCall
from daylog.models.records import DailyRecords


def text_reply(content):
    return Message(role="assistant", content=content)


def tool_reply(*calls, content=None):
    """Builds an assistant reply from (id, name, arguments) triples."""
    tool_calls = [
        ToolCall(
            id=call_id,
            function={
                "name": name,
                "arguments": arguments if isinstance(arguments, str) else json.dumps(arguments),
            },
        )
        for call_id, name, arguments in calls
    ]
    return Message(role="assistant", content=content, tool_calls=tool_calls)


class StubChatEndpoint:
    """
    Replays scripted replies and records every request. Once the script runs
    out the last reply is repeated. A reply that is an exception is raised.
    """

    def __init__(self, replies):
        self.replies = list(replies)
        self.requests = []
        self.tools_seen = []

    @property
    def call_count(self):
        return len(self.requests)

    async def create_chat_completion(self, messages, tools=None):
        self.requests.append([msg.model_copy(deep=True) for msg in messages])
        self.tools_seen.append(tools)
        reply = self.replies[min(len(self.requests) - 1, len(self.replies) - 1)]
        if isinstance(reply, Exception):
            raise reply
        return reply


class StubDataProvider:
    def __init__(self, records=None, error=None):
        self.records = records or DailyRecords()
        self.error = error
        self.queries = []

    async def query_records_by_date_range(self, start_date, end_date):
        self.queries.append((start_date, end_date))
        if self.error is not None:
            raise self.error
        return self.records
