import pytest

from mockremote.fixture_builder import FixtureBuilder
from mockremote.mock_registry import MockRegistry
from todostore.todostore import TodoStore
from todosync.session import TodoSession, create_session


@pytest.fixture
def fixtures() -> FixtureBuilder:
    return FixtureBuilder()


@pytest.fixture
def mocks(fixtures: FixtureBuilder):
    registry = MockRegistry(fixtures)
    registry.reset_all()
    yield registry
    registry.reset_all()


@pytest.fixture
def store() -> TodoStore:
    return TodoStore("test")


@pytest.fixture
def session(mocks: MockRegistry):
    s: TodoSession = create_session(
        mocks.todos_query, mocks.toggle_mutation, mocks.overview_query, name="test"
    )
    yield s
    s.close()
