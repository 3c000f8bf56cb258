import logging
from dataclasses import dataclass

from remotesource.capabilities import RemoteMutation, RemoteQuery
from remotesource.network.client_remote_source import (
    HttpToggleMutation,
    http_overview_query,
    http_todos_query,
)
from todostore.todostore import Todo, TodoStore
from todosync.mutation_dispatcher import MutationDispatcher
from todosync.overview_projection import OverviewProjection
from todosync.settings import RemoteSourceSettings
from todosync.sync_reconciler import SyncReconciler

logger = logging.getLogger(__name__)


@dataclass
class TodoSession:
    # everything one ui session needs, wired around a single store

    store: TodoStore
    reconciler: SyncReconciler
    dispatcher: MutationDispatcher
    overview: OverviewProjection

    def start(self) -> None:
        self.reconciler.attach()

    def close(self) -> None:
        self.reconciler.detach()
        self.store.reset()
        logger.info("%s: session closed", self.store.name)

    async def load_todos(self) -> None:
        await self.reconciler.load_todos()

    async def toggle(self, todo_id: str) -> Todo | None:
        return await self.dispatcher.toggle(todo_id)

    async def reload_overview(self) -> None:
        await self.overview.reload()


def create_session(
    todos_query: RemoteQuery,
    toggle_mutation: RemoteMutation,
    overview_query: RemoteQuery,
    name: str = "session",
) -> TodoSession:
    store = TodoStore(name)
    return TodoSession(
        store=store,
        reconciler=SyncReconciler(store, todos_query),
        dispatcher=MutationDispatcher(store, toggle_mutation),
        overview=OverviewProjection(overview_query),
    )


def create_http_session(
    settings: RemoteSourceSettings, name: str = "session"
) -> TodoSession:
    return create_session(
        http_todos_query(settings),
        HttpToggleMutation(settings),
        http_overview_query(settings),
        name=name,
    )
