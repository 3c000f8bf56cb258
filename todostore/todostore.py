import logging
from dataclasses import dataclass, field
from typing import Callable


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Todo:
    id: str
    title: str = ""
    completed: bool = False


@dataclass(frozen=True)
class TodoListView:
    # read-only snapshot handed to the rendering layer

    todos: tuple[Todo, ...]
    loading: bool
    error: str | None


@dataclass
class TodoStore:
    """
    local, session-scoped state of the todo list,
    only to be changed through set_todos / set_loading / set_error / update_todo
    """

    name: str
    todos: list[Todo] = field(default_factory=list)
    loading: bool = False
    error: str | None = None
    listeners: list[Callable[[TodoListView], None]] = field(
        default_factory=list, repr=False, compare=False
    )

    def set_todos(self, collection: list[Todo]) -> None:
        self.todos = list(collection)
        self._notify()

    def set_loading(self, loading: bool) -> None:
        self.loading = loading
        self._notify()

    def set_error(self, error: str | None) -> None:
        self.error = error
        self._notify()

    def update_todo(self, record: Todo) -> None:
        for i, todo in enumerate(self.todos):
            if todo.id == record.id:
                self.todos[i] = record
                break
        else:
            logger.debug("%s: no todo with id %r, update ignored", self.name, record.id)
            return
        self._notify()

    def view(self) -> TodoListView:
        return TodoListView(tuple(self.todos), self.loading, self.error)

    def subscribe(
        self, callback: Callable[[TodoListView], None]
    ) -> Callable[[], None]:
        self.listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self.listeners:
                self.listeners.remove(callback)

        return unsubscribe

    def reset(self) -> None:
        self.todos = []
        self.loading = False
        self.error = None
        self._notify()

    def _notify(self) -> None:
        view = self.view()
        for listener in list(self.listeners):
            listener(view)
