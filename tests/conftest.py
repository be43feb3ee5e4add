import pytest
from starlette.testclient import TestClient

from msgql import MessageService, RecordStore, create_app, make_message_schema
from msgql.config import Settings
from msgql.execute import execute_sync


@pytest.fixture
def store():
    return RecordStore()


@pytest.fixture
def service(store):
    return MessageService(store)


@pytest.fixture
def schema():
    return make_message_schema()


@pytest.fixture
def execute(schema, service):
    def _execute(query: str, **variables):
        return execute_sync(
            schema, query, variables=variables or None, context_value={'messages': service}
        )

    return _execute


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def client(settings, store):
    return TestClient(create_app(settings, store))
