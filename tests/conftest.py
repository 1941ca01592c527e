import fakeredis
import pytest

from daylog.core.config import AssistantConfig, Settings
from daylog.models.records import DailyRecords, DoneTask, Idea
from daylog.services.record_store import RecordStore
from daylog.services.session_manager import SessionManager


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def assistant_config():
    return AssistantConfig(api_key="sk-test", api_url="https://llm.example.com/v1", model="test-model")


@pytest.fixture
def one_day_records():
    return DailyRecords(
        ideas=[
            Idea(id=1, content="Try batching the sync job", attachments=["notes/sync.png"], created_at=1704099600, date="2024-01-01"),
        ],
        tasks=[
            DoneTask(
                id=7,
                content="Reviewed the release checklist",
                start_time=1704096000,
                end_time=1704101400,
                attachments=[],
                created_at=1704101500,
                date="2024-01-01",
            ),
        ],
    )


@pytest.fixture
def fake_redis():
    return fakeredis.FakeAsyncRedis(server=fakeredis.FakeServer(), decode_responses=True)


@pytest.fixture
def record_store(fake_redis):
    return RecordStore(redis_client=fake_redis, key_prefix="test")


@pytest.fixture
def session_manager(fake_redis):
    return SessionManager(redis_client=fake_redis, key_prefix="test", session_ttl=60)
