from dataclasses import dataclass
from typing import Callable

from remotesource.capabilities import QueryResult, RemoteQuery
from remotesource.shapes import OverviewStats, overview_stats_schema


@dataclass(frozen=True)
class OverviewView:
    stats: OverviewStats | None
    loading: bool
    error: str | None


def to_overview_view(result: QueryResult) -> OverviewView:
    overview = (result.data or {}).get("overview")
    stats: OverviewStats | None = (
        overview_stats_schema.load(overview) if overview is not None else None  # type: ignore
    )
    return OverviewView(
        stats=stats,
        loading=result.loading,
        error=result.error.message if result.error else None,
    )


@dataclass
class OverviewProjection:
    # read-only view of the overview query, every call derives a fresh snapshot

    query: RemoteQuery

    def view(self) -> OverviewView:
        return to_overview_view(self.query.current())

    def subscribe(self, callback: Callable[[OverviewView], None]) -> Callable[[], None]:
        return self.query.subscribe(lambda result: callback(to_overview_view(result)))

    async def reload(self) -> None:
        await self.query.current().refetch()
