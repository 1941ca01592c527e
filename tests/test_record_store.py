"""Tests for the Redis-backed record store and chat session persistence."""

from datetime import datetime

import pytest

from daylog.core.config import AssistantConfig
from daylog.core.tool_registry import ToolExecutor


class TestIdeasAndTasks:
    async def test_ids_auto_increment(self, record_store):
        first = await record_store.add_idea("first", [], datetime(2024, 1, 1, 9, 0))
        second = await record_store.add_idea("second", [], datetime(2024, 1, 1, 10, 0))

        assert (first, second) == (1, 2)

    async def test_range_query_is_inclusive_and_ordered(self, record_store):
        await record_store.add_idea("early idea", ["a.png"], datetime(2024, 1, 1, 9, 0))
        await record_store.add_idea("late idea", [], datetime(2024, 1, 2, 18, 0))
        await record_store.add_idea("out of range", [], datetime(2024, 1, 4, 8, 0))
        await record_store.add_done_task("afternoon", datetime(2024, 1, 2, 14, 0), datetime(2024, 1, 2, 15, 0))
        await record_store.add_done_task("morning", datetime(2024, 1, 1, 9, 0), datetime(2024, 1, 1, 10, 30))

        records = await record_store.query_records_by_date_range("2024-01-01", "2024-01-03")

        assert [idea.content for idea in records.ideas] == ["late idea", "early idea"]
        assert [task.content for task in records.tasks] == ["morning", "afternoon"]
        assert records.ideas[1].attachments == ["a.png"]
        assert records.tasks[0].duration == 5400
        assert records.tasks[0].date == "2024-01-01"

    async def test_reversed_range_is_empty(self, record_store):
        await record_store.add_idea("idea", [], datetime(2024, 1, 1, 9, 0))

        records = await record_store.query_records_by_date_range("2024-01-02", "2024-01-01")

        assert records.ideas == [] and records.tasks == []

    async def test_wide_range_costs_constant_round_trips(self, record_store, fake_redis, monkeypatch):
        await record_store.add_idea("only idea", [], datetime(2024, 1, 1, 9, 0))
        commands = []
        execute_command = fake_redis.execute_command

        async def counting_execute_command(*args, **kwargs):
            commands.append(args[0])
            return await execute_command(*args, **kwargs)

        monkeypatch.setattr(fake_redis, "execute_command", counting_execute_command)

        result = await ToolExecutor(record_store).execute(
            "get_history_data", {"start_date": "1900-01-01", "end_date": "2099-12-31"}
        )

        assert result["summary"]["total_ideas"] == 1
        assert len(commands) <= 4

    async def test_invalid_date_raises(self, record_store):
        with pytest.raises(ValueError):
            await record_store.query_records_by_date_range("yesterday", "2024-01-01")

    async def test_task_ending_before_start_is_rejected(self, record_store):
        with pytest.raises(ValueError):
            await record_store.add_done_task("backwards", datetime(2024, 1, 1, 10, 0), datetime(2024, 1, 1, 9, 0))

    async def test_delete(self, record_store):
        idea_id = await record_store.add_idea("gone soon", [], datetime(2024, 1, 1, 9, 0))
        task_id = await record_store.add_done_task("task", datetime(2024, 1, 1, 9, 0), datetime(2024, 1, 1, 9, 30))

        assert await record_store.delete_idea(idea_id) is True
        assert await record_store.delete_done_task(task_id) is True
        assert await record_store.delete_idea(idea_id) is False

        records = await record_store.query_records_by_date_range("2024-01-01", "2024-01-01")
        assert records.ideas == [] and records.tasks == []

    async def test_today_records(self, record_store):
        await record_store.add_idea("now", [])

        records = await record_store.get_today_records()

        assert [idea.content for idea in records.ideas] == ["now"]


class TestPrompts:
    async def test_prompt_lifecycle(self, record_store):
        prompt_id = await record_store.add_prompt("Weekly", "Summarize my week.")
        await record_store.add_prompt("Haiku", "Write a haiku.")

        updated = await record_store.update_prompt(prompt_id, "Weekly review", "Summarize my week in bullets.")
        prompts = await record_store.list_prompts()

        assert updated.name == "Weekly review"
        assert [prompt.name for prompt in prompts] == ["Weekly review", "Haiku"]
        assert await record_store.delete_prompt(prompt_id) is True
        assert await record_store.get_prompt(prompt_id) is None
        assert await record_store.update_prompt(prompt_id, "x", "y") is None


class TestAssistantConfigPersistence:
    async def test_round_trip(self, record_store, assistant_config):
        assert await record_store.load_api_config() is None

        await record_store.save_api_config(assistant_config)

        assert await record_store.load_api_config() == assistant_config

    async def test_unreadable_config_is_ignored(self, record_store, fake_redis):
        await fake_redis.set("test:config", "{not json")

        assert await record_store.load_api_config() is None

    def test_completeness(self):
        assert AssistantConfig(api_key="k", api_url="u", model="m").is_complete()
        assert not AssistantConfig(api_key="k", api_url="u").is_complete()


class TestSessionManager:
    async def test_unknown_session_is_empty(self, session_manager):
        conversation = await session_manager.get_conversation("abc")

        assert conversation.session_id == "abc"
        assert conversation.messages == []

    async def test_append_and_clear(self, session_manager):
        await session_manager.append_exchange("abc", "hello", "hi there")
        await session_manager.append_exchange("abc", "what's up", "not much")

        conversation = await session_manager.get_conversation("abc")
        assert [(m.role, m.content) for m in conversation.messages] == [
            ("user", "hello"),
            ("assistant", "hi there"),
            ("user", "what's up"),
            ("assistant", "not much"),
        ]

        assert await session_manager.clear_conversation("abc") is True
        assert (await session_manager.get_conversation("abc")).messages == []


async def test_close_releases_connections(record_store, session_manager, fake_redis, monkeypatch):
    closed = []

    async def aclose():
        closed.append(True)

    monkeypatch.setattr(fake_redis, "aclose", aclose)

    await record_store.close()
    await session_manager.close()

    assert len(closed) == 2
