import logging
from abc import ABCMeta, abstractmethod
from dataclasses import dataclass, field, replace

from remotesource.shapes import OverviewStats
from todostore.todostore import Todo

logger = logging.getLogger(__name__)


@dataclass
class TodoSource(metaclass=ABCMeta):
    # authoritative side of the sync: owns the todos, decides on toggles

    name: str

    @abstractmethod
    def list_todos(self) -> list[Todo]: ...

    @abstractmethod
    def toggle(self, todo_id: str) -> Todo | None: ...

    @abstractmethod
    def overview(self) -> OverviewStats: ...


@dataclass
class InMemoryTodoSource(TodoSource):
    todos: list[Todo] = field(default_factory=list)

    def list_todos(self) -> list[Todo]:
        return list(self.todos)

    def toggle(self, todo_id: str) -> Todo | None:
        for i, todo in enumerate(self.todos):
            if todo.id == todo_id:
                toggled = replace(todo, completed=not todo.completed)
                self.todos[i] = toggled
                logger.info("%s: toggled %s -> %s", self.name, todo_id, toggled.completed)
                return toggled
        return None

    def overview(self) -> OverviewStats:
        return OverviewStats(
            total_todos=len(self.todos),
            completed_todos=sum(1 for t in self.todos if t.completed),
        )
