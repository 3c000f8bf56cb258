import logging
from abc import ABCMeta, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Mapping

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RemoteError:
    message: str


async def _no_refetch() -> None:
    return None


@dataclass(frozen=True)
class QueryResult:
    """
    one observation of a remote query,
    data / loading / error carry no ordering guarantee relative to each other
    """

    data: Mapping[str, Any] | None = None
    loading: bool = False
    error: RemoteError | None = None
    refetch: Callable[[], Awaitable[None]] = field(default=_no_refetch, compare=False)


@dataclass(frozen=True)
class MutationResult:
    data: Mapping[str, Any] | None = None


QueryCallback = Callable[[QueryResult], None]


class RemoteQuery(metaclass=ABCMeta):
    # live, push-updated cell holding the latest observation of a remote read

    @abstractmethod
    def current(self) -> QueryResult: ...

    @abstractmethod
    def subscribe(self, callback: QueryCallback) -> Callable[[], None]: ...


class RemoteMutation(metaclass=ABCMeta):
    @abstractmethod
    async def __call__(self, variables: Mapping[str, Any]) -> MutationResult: ...


class ObservableQuery(RemoteQuery):
    """
    RemoteQuery which notifies its subscribers synchronously, in subscription order,
    on every published observation
    """

    def __init__(self, name: str, initial: QueryResult | None = None) -> None:
        self.name = name
        self._current = initial if initial is not None else QueryResult(loading=True)
        self._callbacks: list[QueryCallback] = []
        self._notifying = False

    def current(self) -> QueryResult:
        return self._current

    def subscribe(self, callback: QueryCallback) -> Callable[[], None]:
        self._callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return unsubscribe

    def publish(self, result: QueryResult) -> None:
        if self._notifying:
            raise RuntimeError(f"re-entrant publish on query {self.name}")
        self._current = result
        logger.debug(
            "%s: publish loading=%s error=%s data=%s",
            self.name,
            result.loading,
            result.error,
            result.data is not None,
        )
        self._notifying = True
        try:
            for callback in list(self._callbacks):
                callback(result)
        finally:
            self._notifying = False

    def clear_subscribers(self) -> None:
        self._callbacks.clear()
