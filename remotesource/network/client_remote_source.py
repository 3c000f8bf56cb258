import asyncio
import logging
from typing import Any, Mapping

import requests

from remotesource.capabilities import (
    MutationResult,
    ObservableQuery,
    QueryResult,
    RemoteError,
    RemoteMutation,
)
from todosync.settings import RemoteSourceSettings

logger = logging.getLogger(__name__)


class HttpQuery(ObservableQuery):
    """
    query capability backed by a GET endpoint of the remote todo source,
    every refetch publishes a loading observation followed by the data or an error
    """

    def __init__(self, settings: RemoteSourceSettings, path: str) -> None:
        super().__init__(f"GET {path}", QueryResult(loading=False, refetch=self.refetch))
        self.settings = settings
        self.path = path

    async def refetch(self) -> None:
        previous = self.current()
        self.publish(QueryResult(previous.data, loading=True, refetch=self.refetch))
        try:
            data = await asyncio.to_thread(self._get)
        except requests.RequestException as e:
            logger.warning("%s failed: %s", self.name, e)
            self.publish(
                QueryResult(previous.data, error=RemoteError(str(e)), refetch=self.refetch)
            )
            return
        self.publish(QueryResult(data, refetch=self.refetch))

    def _get(self) -> Mapping[str, Any]:
        r = requests.get(self.settings.base_url + self.path, timeout=self.settings.timeout)
        r.raise_for_status()
        return r.json()


class HttpToggleMutation(RemoteMutation):
    # failures are raised to the caller, they never become an observation

    def __init__(self, settings: RemoteSourceSettings) -> None:
        self.settings = settings

    async def __call__(self, variables: Mapping[str, Any]) -> MutationResult:
        data = await asyncio.to_thread(self._post, variables["id"])
        return MutationResult(data)

    def _post(self, todo_id: str) -> Mapping[str, Any]:
        r = requests.post(
            f"{self.settings.base_url}/todos/{todo_id}/toggle",
            timeout=self.settings.timeout,
        )
        r.raise_for_status()
        return r.json()


def http_todos_query(settings: RemoteSourceSettings) -> HttpQuery:
    return HttpQuery(settings, "/todos")


def http_overview_query(settings: RemoteSourceSettings) -> HttpQuery:
    return HttpQuery(settings, "/overview")
