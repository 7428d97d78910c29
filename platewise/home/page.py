"""Landing page state and data loading."""

import asyncio
import logging
from collections.abc import Callable, Iterable
from typing import Protocol, TypeVar

from pydantic import BaseModel

from platewise.models import Restaurant, Review, ToastVariant
from platewise.services.data_service import Query
from platewise.services.navigation import Navigator
from platewise.services.storage import StorageUrlResolver
from platewise.services.toaster import Toaster

logger = logging.getLogger(__name__)

FEATURED_RESTAURANT_LIMIT = 6
LATEST_REVIEW_LIMIT = 3

ModelT = TypeVar("ModelT", bound=BaseModel)


class RowSource(Protocol):
    """Anything that can answer a read query with a list of rows."""

    async def select(self, query: Query) -> list[dict]: ...


def restaurant_path(restaurant_id: str) -> str:
    """Detail route for a restaurant."""
    return f"/restaurant/{restaurant_id}"


def _parse_rows(
    model: type[ModelT],
    rows: Iterable[dict],
    limit: int,
    accept: Callable[[ModelT], bool] | None = None,
) -> list[ModelT]:
    """Validate rows, dropping repeated ids and rejected rows, up to ``limit``."""
    parsed: list[ModelT] = []
    seen: set[str] = set()
    for row in rows:
        item = model.model_validate(row)
        if item.id in seen:
            logger.warning(f"Dropping duplicate {model.__name__} {item.id}")
            continue
        if accept is not None and not accept(item):
            logger.warning(f"Dropping incomplete {model.__name__} {item.id}")
            continue
        seen.add(item.id)
        parsed.append(item)
        if len(parsed) == limit:
            break
    return parsed


def _has_author(review: Review) -> bool:
    return review.profile is not None


class HomePage:
    """The landing page: featured restaurants and latest reviews.

    Both lists start empty and are filled once per mount by two independent
    loads. A load that fails leaves its list untouched and raises a
    destructive toast instead of propagating. A load that finishes after the
    page was unmounted is discarded.
    """

    def __init__(
        self,
        data_service: RowSource,
        storage: StorageUrlResolver,
        toaster: Toaster,
        navigator: Navigator,
        restaurant_limit: int = FEATURED_RESTAURANT_LIMIT,
        review_limit: int = LATEST_REVIEW_LIMIT,
    ) -> None:
        self.data_service = data_service
        self.storage = storage
        self.toaster = toaster
        self.navigator = navigator
        self.restaurant_limit = restaurant_limit
        self.review_limit = review_limit

        self.restaurants: list[Restaurant] = []
        self.latest_reviews: list[Review] = []
        self.unmounted = False
        self._tasks: list[asyncio.Task] = []

    def mount(self) -> None:
        """Start both loads.

        Must be called from a running event loop. Mounting twice does not
        refetch.
        """
        if self._tasks or self.unmounted:
            return
        self._tasks = [
            asyncio.create_task(self.load_featured_restaurants()),
            asyncio.create_task(self.load_latest_reviews()),
        ]

    async def settled(self) -> None:
        """Wait until every load started by ``mount`` has finished."""
        if self._tasks:
            await asyncio.gather(*self._tasks)

    def unmount(self) -> None:
        """Mark the page unmounted; pending loads will commit nothing."""
        self.unmounted = True

    async def load_featured_restaurants(self) -> None:
        """Fetch the most recently added restaurants."""
        query = Query(
            table="restaurants",
            columns="*",
            order_by="created_at",
            ascending=False,
            limit=self.restaurant_limit,
        )
        try:
            rows = await self.data_service.select(query)
            restaurants = _parse_rows(Restaurant, rows or [], self.restaurant_limit)
        except Exception:
            logger.exception("Error fetching restaurants")
            self._notify_failure("Failed to load restaurants")
            return

        if self.unmounted:
            logger.debug("Discarding restaurants loaded after unmount")
            return
        self.restaurants = restaurants

    async def load_latest_reviews(self) -> None:
        """Fetch the most recent reviews along with their authors."""
        query = Query(
            table="reviews",
            columns="*, profiles (username, avatar_url)",
            order_by="created_at",
            ascending=False,
            limit=self.review_limit,
        )
        try:
            rows = await self.data_service.select(query)
            reviews = _parse_rows(
                Review, rows or [], self.review_limit, accept=_has_author
            )
        except Exception:
            logger.exception("Error fetching reviews")
            self._notify_failure("Failed to load reviews")
            return

        if self.unmounted:
            logger.debug("Discarding reviews loaded after unmount")
            return
        self.latest_reviews = reviews

    def _notify_failure(self, description: str) -> None:
        if self.unmounted:
            return
        self.toaster.toast(
            title="Error",
            description=description,
            variant=ToastVariant.DESTRUCTIVE,
        )

    def open_restaurant(self, restaurant_id: str) -> None:
        """Navigate to a restaurant's detail page."""
        self.navigator.navigate(restaurant_path(restaurant_id))
