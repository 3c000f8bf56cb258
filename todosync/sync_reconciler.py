import logging
from dataclasses import dataclass, field
from typing import Callable

from remotesource.capabilities import QueryResult, RemoteQuery
from remotesource.shapes import TodosResult, todos_result_schema
from todostore.todostore import TodoStore

logger = logging.getLogger(__name__)


@dataclass
class SyncReconciler:
    """
    projects every observation of the todos query into the store:
    data (if present) -> set_todos, loading -> set_loading, error -> set_error

    observations are applied in the order they arrive,
    a slow, older response can overwrite the data of a newer one
    """

    store: TodoStore
    query: RemoteQuery
    unsubscribe: Callable[[], None] | None = field(default=None, init=False)

    def attach(self) -> None:
        if self.unsubscribe is not None:
            return
        self.unsubscribe = self.query.subscribe(self.apply)
        self.apply(self.query.current())
        logger.info("%s: attached to todos query", self.store.name)

    def detach(self) -> None:
        if self.unsubscribe is not None:
            self.unsubscribe()
            self.unsubscribe = None

    def apply(self, result: QueryResult) -> None:
        # loading and error are projected even if the data cannot be mapped
        try:
            if result.data is not None:
                todos_result: TodosResult = todos_result_schema.load(result.data)  # type: ignore
                self.store.set_todos(todos_result.todos)
        finally:
            self.store.set_loading(result.loading)
            self.store.set_error(result.error.message if result.error else None)

    async def load_todos(self) -> None:
        # the next observation carries the refetched data, the store is not touched here
        await self.query.current().refetch()
