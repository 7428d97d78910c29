"""Row builders and an in-memory data service for tests."""

import asyncio
from datetime import datetime, timedelta, timezone

from platewise.services.data_service import DataServiceError

BASE_TIME = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def make_restaurant(index: int, **overrides) -> dict:
    """Build a restaurant row as returned by the REST endpoint."""
    row = {
        "id": f"rest-{index}",
        "name": f"Restaurant {index}",
        "cuisine_type": "Italian",
        "address": f"{index} Main St",
        "price_range": "$$",
        "created_at": (BASE_TIME + timedelta(hours=index)).isoformat(),
        "description": "extra column ignored by the model",
    }
    row.update(overrides)
    return row


def make_review(index: int, username: str | None = "foodie", **overrides) -> dict:
    """Build a review row with its joined profile."""
    row = {
        "id": f"rev-{index}",
        "rating": 4,
        "content": f"Review number {index}",
        "images": None,
        "created_at": (BASE_TIME + timedelta(hours=index)).isoformat(),
        "profiles": {"username": username, "avatar_url": None},
    }
    row.update(overrides)
    return row


class FakeDataService:
    """In-memory data service applying each query's ordering and limit.

    Tables listed in ``failures`` raise a DataServiceError. Tables listed in
    ``gates`` wait for the matching event before answering.
    """

    def __init__(self, tables: dict[str, list[dict]] | None = None) -> None:
        self.tables = tables or {}
        self.failures: set[str] = set()
        self.gates: dict[str, asyncio.Event] = {}
        self.queries = []

    async def select(self, query):
        self.queries.append(query)
        if query.table in self.gates:
            await self.gates[query.table].wait()
        if query.table in self.failures:
            raise DataServiceError(f"relation {query.table} unavailable", code="42P01")

        rows = list(self.tables.get(query.table, []))
        if query.order_by:
            rows.sort(key=lambda r: r[query.order_by], reverse=not query.ascending)
        if query.limit is not None:
            rows = rows[: query.limit]
        return rows
