import copy
from dataclasses import dataclass, fields, is_dataclass
from typing import Any, Callable, Mapping, get_type_hints

from marshmallow import Schema
from marshmallow_dataclass import class_schema

from remotesource.shapes import (
    OverviewResult,
    OverviewStats,
    RemoteSchema,
    TodosResult,
    ToggleTodoResult,
)
from todostore.todostore import Todo


@dataclass(frozen=True)
class Shape:
    """
    a named response shape: the dataclass declaring its fields
    and a factory for its structurally complete default value
    """

    name: str
    dataclass_type: type
    default_factory: Callable[[], Any]

    @property
    def schema(self) -> Schema:
        return class_schema(self.dataclass_type, base_schema=RemoteSchema)()

    def default(self) -> dict[str, Any]:
        return self.schema.dump(self.default_factory())  # type: ignore


def default_todo() -> Todo:
    return Todo(id="todo-1", title="Mock Todo", completed=False)


SHAPES: dict[str, Shape] = {
    s.name: s
    for s in [
        Shape("todo", Todo, default_todo),
        Shape("todos", TodosResult, lambda: TodosResult([default_todo()])),
        Shape(
            "overview",
            OverviewResult,
            lambda: OverviewResult(OverviewStats(total_todos=3, completed_todos=1)),
        ),
        Shape(
            "toggle_todo",
            ToggleTodoResult,
            lambda: ToggleTodoResult(
                Todo(id="todo-1", title="Mock Todo", completed=True)
            ),
        ),
    ]
}


def field_rules(dataclass_type: type) -> dict[str, type | None]:
    """
    wire key -> nested shape type for fields which merge recursively,
    None for fields which are replaced as a whole (scalars, lists)
    """
    hints = get_type_hints(dataclass_type)
    rules: dict[str, type | None] = {}
    for f in fields(dataclass_type):
        key = f.metadata.get("data_key", f.name)
        hint = hints[f.name]
        rules[key] = hint if is_dataclass(hint) else None
    return rules


def deep_merge(
    dataclass_type: type, default: Mapping[str, Any], overrides: Mapping[str, Any]
) -> dict[str, Any]:
    rules = field_rules(dataclass_type)
    merged = copy.deepcopy(dict(default))
    for key, value in overrides.items():
        if key not in rules:
            raise ValueError(f"{dataclass_type.__name__} has no field {key!r}")
        nested = rules[key]
        if (
            nested is not None
            and isinstance(merged.get(key), Mapping)
            and isinstance(value, Mapping)
        ):
            merged[key] = deep_merge(nested, merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


class FixtureBuilder:
    def __init__(self, shapes: Mapping[str, Shape] = SHAPES) -> None:
        self._shapes = dict(shapes)

    def shapes(self) -> list[str]:
        return sorted(self._shapes)

    def default(self, shape_name: str) -> dict[str, Any]:
        return self._shape(shape_name).default()

    def build(
        self, shape_name: str, overrides: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        shape = self._shape(shape_name)
        return deep_merge(shape.dataclass_type, shape.default(), overrides or {})

    def _shape(self, shape_name: str) -> Shape:
        if shape_name not in self._shapes:
            raise KeyError(f"unknown shape {shape_name!r}, known: {self.shapes()}")
        return self._shapes[shape_name]
