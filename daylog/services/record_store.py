# This module persists ideas, completed tasks, prompt templates and the assistant configuration in Redis.
# Date: 2026-10-19
# Version: 0.1.0

import json
import time
from datetime import date, datetime
from typing import List, Optional, Protocol

from redis.asyncio import Redis, from_url

from daylog.core.config import AssistantConfig, get_settings
from daylog.models.records import DailyRecords, DoneTask, Idea, Prompt
from daylog.utils.logger import console


class DataProvider(Protocol):
    """The read side the assistant's tools depend on."""

    async def query_records_by_date_range(self, start_date: str, end_date: str) -> DailyRecords:
        ...


def _to_epoch(value: Optional[datetime]) -> int:
    if value is None:
        return int(time.time())
    return int(value.timestamp())


def _local_date(value: Optional[datetime]) -> str:
    moment = value if value is not None else datetime.now()
    return moment.astimezone().strftime("%Y-%m-%d")


def _date_score(day: str) -> int:
    return date.fromisoformat(day).toordinal()


class RecordStore:
    """
    Stores journal records as JSON documents keyed by auto-incrementing ids.

    Key layout, under the configured prefix:
        <prefix>:<kind>:next_id          INCR counter
        <prefix>:<kind>:<id>             JSON document
        <prefix>:<kind>:by_date          sorted set of ids scored by the ordinal of their local date
        <prefix>:prompts:all             set of prompt ids
        <prefix>:config                  JSON of the AssistantConfig
    """
    def __init__(self, redis_client: Optional[Redis] = None, key_prefix: Optional[str] = None):
        settings = get_settings()
        self._redis = redis_client if redis_client is not None else from_url(settings.REDIS_URL, decode_responses=True)
        self._prefix = key_prefix or settings.REDIS_KEY_PREFIX

    def _key(self, *parts) -> str:
        return ":".join([self._prefix, *map(str, parts)])

    async def _next_id(self, kind: str) -> int:
        return int(await self._redis.incr(self._key(kind, "next_id")))

    # ========== Ideas ==========

    async def add_idea(self, content: str, attachments: Optional[List[str]] = None, timestamp: Optional[datetime] = None) -> int:
        idea_id = await self._next_id("ideas")
        idea = Idea(
            id=idea_id,
            content=content,
            attachments=list(attachments or []),
            created_at=_to_epoch(timestamp),
            date=_local_date(timestamp),
        )
        await self._redis.set(self._key("ideas", idea_id), idea.model_dump_json())
        await self._redis.zadd(self._key("ideas", "by_date"), {idea_id: _date_score(idea.date)})
        console.info(f"Idea {idea_id} saved for {idea.date}.")
        return idea_id

    async def get_idea(self, idea_id: int) -> Optional[Idea]:
        raw = await self._redis.get(self._key("ideas", idea_id))
        return Idea.model_validate_json(raw) if raw else None

    async def delete_idea(self, idea_id: int) -> bool:
        idea = await self.get_idea(idea_id)
        if idea is None:
            return False
        await self._redis.delete(self._key("ideas", idea_id))
        await self._redis.zrem(self._key("ideas", "by_date"), idea_id)
        console.info(f"Idea {idea_id} deleted.")
        return True

    # ========== Completed tasks ==========

    async def add_done_task(
        self,
        content: str,
        start_time: datetime,
        end_time: datetime,
        attachments: Optional[List[str]] = None,
        timestamp: Optional[datetime] = None,
    ) -> int:
        """
        Records a completed task. The task is filed under the local date of its start time.

        Raises:
            ValueError: If the task ends before it starts.
        """
        if end_time < start_time:
            raise ValueError("A task cannot end before it starts.")

        task_id = await self._next_id("tasks")
        task = DoneTask(
            id=task_id,
            content=content,
            start_time=_to_epoch(start_time),
            end_time=_to_epoch(end_time),
            attachments=list(attachments or []),
            created_at=_to_epoch(timestamp),
            date=_local_date(start_time),
        )
        await self._redis.set(self._key("tasks", task_id), task.model_dump_json())
        await self._redis.zadd(self._key("tasks", "by_date"), {task_id: _date_score(task.date)})
        console.info(f"Task {task_id} saved for {task.date}.")
        return task_id

    async def get_done_task(self, task_id: int) -> Optional[DoneTask]:
        raw = await self._redis.get(self._key("tasks", task_id))
        return DoneTask.model_validate_json(raw) if raw else None

    async def delete_done_task(self, task_id: int) -> bool:
        task = await self.get_done_task(task_id)
        if task is None:
            return False
        await self._redis.delete(self._key("tasks", task_id))
        await self._redis.zrem(self._key("tasks", "by_date"), task_id)
        console.info(f"Task {task_id} deleted.")
        return True

    # ========== Range queries ==========

    async def _load_kind(self, kind: str, start_score: int, end_score: int) -> List[str]:
        ids = await self._redis.zrangebyscore(self._key(kind, "by_date"), start_score, end_score)
        if not ids:
            return []
        documents = await self._redis.mget([self._key(kind, record_id) for record_id in ids])
        return [doc for doc in documents if doc]

    async def query_records_by_date_range(self, start_date: str, end_date: str) -> DailyRecords:
        """
        Returns the ideas (newest first) and tasks (by start time) whose local
        date falls within [start_date, end_date].

        Raises:
            ValueError: If a date is not in YYYY-MM-DD format.
        """
        start, end = _date_score(start_date), _date_score(end_date)
        if end < start:
            return DailyRecords()

        ideas = [Idea.model_validate_json(doc) for doc in await self._load_kind("ideas", start, end)]
        tasks = [DoneTask.model_validate_json(doc) for doc in await self._load_kind("tasks", start, end)]
        ideas.sort(key=lambda idea: (idea.created_at, idea.id), reverse=True)
        tasks.sort(key=lambda task: (task.start_time, task.id))
        return DailyRecords(ideas=ideas, tasks=tasks)

    async def get_today_records(self) -> DailyRecords:
        today = _local_date(None)
        return await self.query_records_by_date_range(today, today)

    # ========== Prompt templates ==========

    async def add_prompt(self, name: str, content: str) -> int:
        prompt_id = await self._next_id("prompts")
        now = int(time.time())
        prompt = Prompt(id=prompt_id, name=name, content=content, created_at=now, updated_at=now)
        await self._redis.set(self._key("prompts", prompt_id), prompt.model_dump_json())
        await self._redis.sadd(self._key("prompts", "all"), prompt_id)
        return prompt_id

    async def get_prompt(self, prompt_id: int) -> Optional[Prompt]:
        raw = await self._redis.get(self._key("prompts", prompt_id))
        return Prompt.model_validate_json(raw) if raw else None

    async def update_prompt(self, prompt_id: int, name: str, content: str) -> Optional[Prompt]:
        prompt = await self.get_prompt(prompt_id)
        if prompt is None:
            return None
        updated = prompt.model_copy(update={"name": name, "content": content, "updated_at": int(time.time())})
        await self._redis.set(self._key("prompts", prompt_id), updated.model_dump_json())
        return updated

    async def delete_prompt(self, prompt_id: int) -> bool:
        removed = await self._redis.delete(self._key("prompts", prompt_id))
        await self._redis.srem(self._key("prompts", "all"), prompt_id)
        return bool(removed)

    async def list_prompts(self) -> List[Prompt]:
        ids = await self._redis.smembers(self._key("prompts", "all"))
        if not ids:
            return []
        documents = await self._redis.mget([self._key("prompts", prompt_id) for prompt_id in ids])
        prompts = [Prompt.model_validate_json(doc) for doc in documents if doc]
        return sorted(prompts, key=lambda prompt: prompt.id)

    # ========== Assistant configuration ==========

    async def save_api_config(self, config: AssistantConfig):
        await self._redis.set(self._key("config"), config.model_dump_json())
        console.info("Assistant configuration saved.")

    async def load_api_config(self) -> Optional[AssistantConfig]:
        raw = await self._redis.get(self._key("config"))
        if not raw:
            return None
        try:
            return AssistantConfig.model_validate(json.loads(raw))
        except (ValueError, TypeError):
            console.exception("Stored assistant configuration is unreadable; ignoring it.")
            return None

    async def close(self):
        await self._redis.aclose()
        console.info("Record store connection closed.")
