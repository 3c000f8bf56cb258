import pytest

from mockremote.mock_registry import MockRegistry
from remotesource.capabilities import MutationResult, QueryResult, RemoteError


def test_queries_report_default_fixtures(mocks: MockRegistry):
    assert mocks.todos_query.current().data == mocks.fixtures.default("todos")
    assert mocks.overview_query.current().data == mocks.fixtures.default("overview")
    assert mocks.todos_query.current().loading is False
    assert mocks.todos_query.current().error is None


def test_configure_query_publishes_to_subscribers(mocks: MockRegistry):
    seen: list[QueryResult] = []
    mocks.todos_query.subscribe(seen.append)

    mocks.configure_todos_query(loading=True, error=RemoteError("offline"))

    assert len(seen) == 1
    assert seen[0].data is None
    assert seen[0].loading is True
    assert seen[0].error == RemoteError("offline")
    assert mocks.todos_query.current() is seen[0]


def test_configure_by_capability_name(mocks: MockRegistry):
    data = mocks.fixtures.build("overview", {"overview": {"totalTodos": 9}})

    mocks.configure("overview_query", {"data": data})

    assert mocks.overview_query.current().data == data
    with pytest.raises(KeyError):
        mocks.configure("users_query", {})


@pytest.mark.asyncio
async def test_refetch_is_a_call_counter(mocks: MockRegistry):
    mocks.configure_todos_query(data=mocks.fixtures.build("todos"))

    await mocks.todos_query.current().refetch()
    await mocks.todos_query.current().refetch()

    assert mocks.todos_query.refetch.await_count == 2


@pytest.mark.asyncio
async def test_default_mutation_echoes_id(mocks: MockRegistry):
    result = await mocks.toggle_mutation(variables={"id": "7"})

    assert result.data is not None
    assert result.data["toggleTodo"]["id"] == "7"
    mocks.toggle_mutation.calls.assert_awaited_once_with(variables={"id": "7"})


@pytest.mark.asyncio
async def test_configured_mutation_handler(mocks: MockRegistry):
    async def handler(variables):
        return MutationResult(None)

    mocks.configure_toggle_mutation(handler)

    assert await mocks.toggle_mutation(variables={"id": "1"}) == MutationResult(None)


@pytest.mark.asyncio
async def test_reset_clears_configuration_and_history(mocks: MockRegistry):
    seen: list[QueryResult] = []
    mocks.todos_query.subscribe(seen.append)
    mocks.configure_todos_query(error=RemoteError("offline"))
    mocks.configure_toggle_mutation(lambda variables: MutationResult(None))
    await mocks.toggle_mutation(variables={"id": "1"})
    await mocks.todos_query.current().refetch()

    assert mocks.reset_all() is None
    mocks.reset()  # idempotent

    assert mocks.todos_query.current().error is None
    assert mocks.todos_query.current().data == mocks.fixtures.default("todos")
    assert mocks.todos_query.refetch.await_count == 0
    assert mocks.toggle_mutation.calls.await_count == 0
    result = await mocks.toggle_mutation(variables={"id": "1"})
    assert result.data is not None

    mocks.configure_todos_query(loading=True)
    assert len(seen) == 1  # subscribers are dropped on reset


def test_configure_with_query_result(mocks: MockRegistry):
    seen: list[QueryResult] = []
    mocks.todos_query.subscribe(seen.append)
    result = QueryResult(
        data=mocks.fixtures.build("todos", {"todos": []}),
        error=RemoteError("partial"),
    )

    mocks.configure("todos_query", result)

    assert mocks.todos_query.current() is result
    assert seen == [result]
