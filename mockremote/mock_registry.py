import inspect
import logging
from typing import Any, Awaitable, Callable, Mapping
from unittest.mock import AsyncMock

from mockremote.fixture_builder import FixtureBuilder
from remotesource.capabilities import (
    MutationResult,
    ObservableQuery,
    QueryResult,
    RemoteError,
    RemoteMutation,
)

logger = logging.getLogger(__name__)

MutationHandler = Callable[
    [Mapping[str, Any]], MutationResult | Awaitable[MutationResult]
]


class MockQuery(ObservableQuery):
    # stand-in query which reports whatever it was last configured with

    def __init__(self, name: str, shape_name: str, fixtures: FixtureBuilder) -> None:
        self.shape_name = shape_name
        self.fixtures = fixtures
        super().__init__(name)
        self.reset()

    def configure(
        self,
        data: Mapping[str, Any] | None = None,
        loading: bool = False,
        error: RemoteError | None = None,
        refetch: Callable[[], Any] | None = None,
    ) -> QueryResult:
        result = QueryResult(
            data=data,
            loading=loading,
            error=error,
            refetch=refetch if refetch is not None else AsyncMock(return_value=None),
        )
        self.publish(result)
        return result

    @property
    def refetch(self) -> Any:
        return self.current().refetch

    def reset(self) -> None:
        self.clear_subscribers()
        self._current = QueryResult(
            data=self.fixtures.build(self.shape_name),
            refetch=AsyncMock(return_value=None),
        )


class MockMutation(RemoteMutation):
    """
    stand-in mutation: every call is recorded on `calls` (an AsyncMock),
    the result comes from the configured handler, which may be sync or async
    """

    def __init__(self, name: str, fixtures: FixtureBuilder) -> None:
        self.name = name
        self.fixtures = fixtures
        self.calls = AsyncMock(return_value=None)
        self.handler: MutationHandler = self.echo

    def echo(self, variables: Mapping[str, Any]) -> MutationResult:
        return MutationResult(
            self.fixtures.build("toggle_todo", {"toggleTodo": {"id": variables["id"]}})
        )

    def configure(self, handler: MutationHandler) -> None:
        self.handler = handler

    async def __call__(self, variables: Mapping[str, Any]) -> MutationResult:
        await self.calls(variables=variables)
        result = self.handler(variables)
        if inspect.isawaitable(result):
            result = await result
        return result

    def reset(self) -> None:
        self.calls.reset_mock()
        self.handler = self.echo


class MockRegistry:
    """
    stand-ins for the three remote capabilities of a session:
    todos_query, overview_query and toggle_mutation
    """

    def __init__(self, fixtures: FixtureBuilder | None = None) -> None:
        self.fixtures = fixtures or FixtureBuilder()
        self.todos_query = MockQuery("todos_query", "todos", self.fixtures)
        self.overview_query = MockQuery("overview_query", "overview", self.fixtures)
        self.toggle_mutation = MockMutation("toggle_mutation", self.fixtures)

    def configure(self, capability: str, value: Any) -> None:
        # queries take a QueryResult or a mapping of its fields, the mutation a handler
        if capability == "toggle_mutation":
            self.configure_toggle_mutation(value)
            return
        if capability == "todos_query":
            query = self.todos_query
        elif capability == "overview_query":
            query = self.overview_query
        else:
            raise KeyError(f"unknown capability {capability!r}")
        if isinstance(value, QueryResult):
            query.publish(value)
        else:
            query.configure(**value)

    def configure_todos_query(self, **kwargs: Any) -> QueryResult:
        return self.todos_query.configure(**kwargs)

    def configure_overview_query(self, **kwargs: Any) -> QueryResult:
        return self.overview_query.configure(**kwargs)

    def configure_toggle_mutation(self, handler: MutationHandler) -> None:
        self.toggle_mutation.configure(handler)

    def reset_all(self) -> None:
        self.todos_query.reset()
        self.overview_query.reset()
        self.toggle_mutation.reset()
        logger.debug("mock registry reset")

    reset = reset_all
