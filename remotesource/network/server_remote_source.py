import logging

from apiflask import APIFlask, abort

from remotesource.memory_source import InMemoryTodoSource, TodoSource
from remotesource.shapes import (
    OverviewResult,
    TodosResult,
    ToggleTodoResult,
    overview_result_schema,
    todos_result_schema,
    toggle_todo_result_schema,
)
from todostore.todostore import Todo
from todosync.settings import RemoteSourceSettings

logger = logging.getLogger(__name__)


# expose a todo source via http-endpoints, in the response shapes the client expects


def create_app(source: TodoSource) -> APIFlask:
    app = APIFlask(source.name)

    @app.get("/todos")
    @app.output(todos_result_schema)  # type: ignore
    def get_todos() -> TodosResult:
        return TodosResult(source.list_todos())

    @app.post("/todos/<todo_id>/toggle")
    @app.output(toggle_todo_result_schema)  # type: ignore
    def toggle_todo(todo_id: str) -> ToggleTodoResult:
        toggled = source.toggle(todo_id)
        if toggled is None:
            abort(404, f"no todo with id {todo_id}")
        return ToggleTodoResult(toggled)

    @app.get("/overview")
    @app.output(overview_result_schema)  # type: ignore
    def get_overview() -> OverviewResult:
        return OverviewResult(source.overview())

    return app


def run_remote_source_server(
    source: TodoSource, host: str, port: int, debug=False
) -> None:
    logger.info("serving %s on %s:%s", source.name, host, port)
    create_app(source).run(host, port, debug=debug, threaded=False, use_reloader=False)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    settings = RemoteSourceSettings.from_env()
    demo_source = InMemoryTodoSource(
        "demo",
        [Todo("1", "Write the sync layer"), Todo("2", "Test it", completed=True)],
    )
    run_remote_source_server(demo_source, settings.host, settings.port)
