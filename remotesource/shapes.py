from dataclasses import dataclass, field

from marshmallow import EXCLUDE, Schema
from marshmallow_dataclass import class_schema

from todostore.todostore import Todo


# wire-level shapes of the remote todo source, keys as they appear in responses


@dataclass
class OverviewStats:
    total_todos: int = field(metadata={"data_key": "totalTodos"})
    completed_todos: int = field(metadata={"data_key": "completedTodos"})


@dataclass
class TodosResult:
    todos: list[Todo]


@dataclass
class OverviewResult:
    overview: OverviewStats


@dataclass
class ToggleTodoResult:
    toggle_todo: Todo = field(metadata={"data_key": "toggleTodo"})


class RemoteSchema(Schema):
    class Meta:
        # remote records may carry fields the local types do not know (e.g. __typename)
        unknown = EXCLUDE


todo_schema: Schema = class_schema(Todo, base_schema=RemoteSchema)()
todos_result_schema: Schema = class_schema(TodosResult, base_schema=RemoteSchema)()
overview_stats_schema: Schema = class_schema(OverviewStats, base_schema=RemoteSchema)()
overview_result_schema: Schema = class_schema(
    OverviewResult, base_schema=RemoteSchema
)()
toggle_todo_result_schema: Schema = class_schema(
    ToggleTodoResult, base_schema=RemoteSchema
)()
