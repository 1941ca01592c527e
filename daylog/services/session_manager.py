# This module handles the persistence of interactive chat histories using Redis.
# Date: 2026-10-19
# Version: 0.1.0

import time
from typing import Optional

from redis.asyncio import Redis, from_url
from redis.exceptions import ConnectionError as RedisConnectionError

from daylog.core.config import get_settings
from daylog.models.common import Conversation, HistoryEntry
from daylog.utils.logger import console

class SessionManager:
    """
    Keeps the user/assistant history of chat sessions in Redis. The assistant
    itself is stateless; this is where a chat's memory lives between calls.
    """
    def __init__(self, redis_client: Optional[Redis] = None, key_prefix: Optional[str] = None, session_ttl: Optional[int] = None):
        settings = get_settings()
        self._redis_client = redis_client if redis_client is not None else from_url(settings.REDIS_URL, decode_responses=True)
        self._prefix = key_prefix or settings.REDIS_KEY_PREFIX
        self._session_ttl = session_ttl or settings.SESSION_TTL_SECONDS

    def _key(self, session_id: str) -> str:
        return f"{self._prefix}:session:{session_id}"

    async def save_conversation(self, session_id: str, conversation: Conversation):
        """
        Asynchronously saves a Conversation object to Redis.
        """
        conversation_json = conversation.model_dump_json()
        await self._redis_client.set(self._key(session_id), conversation_json, ex=self._session_ttl)
        console.info(f"Session '{session_id}' saved to Redis.")

    async def get_conversation(self, session_id: str) -> Conversation:
        """
        Asynchronously retrieves a Conversation object from Redis, or a new one
        if the session is unknown or unreadable.
        """
        try:
            conversation_json = await self._redis_client.get(self._key(session_id))
        except RedisConnectionError:
            console.exception(f"Could not connect to Redis when getting session '{session_id}'. Please ensure Redis is running and accessible.")
            raise

        if not conversation_json:
            console.info(f"Session '{session_id}' not found in Redis. Creating a new one.")
            return Conversation(session_id=session_id)
        try:
            return Conversation.model_validate_json(conversation_json)
        except ValueError:
            console.exception(f"Session '{session_id}' is unreadable. Starting a new conversation.")
            return Conversation(session_id=session_id)

    async def append_exchange(self, session_id: str, user_input: str, reply: str) -> Conversation:
        """Records one user message and the assistant's reply."""
        conversation = await self.get_conversation(session_id)
        now = int(time.time())
        conversation.messages.append(HistoryEntry(role="user", content=user_input, timestamp=now))
        conversation.messages.append(HistoryEntry(role="assistant", content=reply, timestamp=now))
        await self.save_conversation(session_id, conversation)
        return conversation

    async def clear_conversation(self, session_id: str) -> bool:
        removed = await self._redis_client.delete(self._key(session_id))
        return bool(removed)

    async def close(self):
        await self._redis_client.aclose()
        console.info("Session store connection closed.")
