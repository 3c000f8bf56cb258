import logging
from dataclasses import dataclass

from remotesource.capabilities import RemoteMutation
from remotesource.shapes import todo_schema
from todostore.todostore import Todo, TodoStore

logger = logging.getLogger(__name__)


@dataclass
class MutationDispatcher:
    store: TodoStore
    mutation: RemoteMutation
    mutated_field: str = "toggleTodo"

    async def toggle(self, todo_id: str) -> Todo | None:
        # the new completed value is decided remotely, a failed call leaves the store as is
        result = await self.mutation(variables={"id": todo_id})
        record = (result.data or {}).get(self.mutated_field)
        if record is None:
            logger.debug("%s: toggle %s returned no record", self.store.name, todo_id)
            return None
        todo: Todo = todo_schema.load(record)  # type: ignore
        self.store.update_todo(todo)
        return todo
