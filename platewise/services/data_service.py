"""Read-only client for the Supabase REST (PostgREST) query endpoint."""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from platewise.config import Config, get_config

logger = logging.getLogger(__name__)


class DataServiceError(Exception):
    """Raised when a query against the data service fails."""

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        details: str | None = None,
        hint: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details
        self.hint = hint
        self.status_code = status_code


@dataclass(frozen=True)
class Query:
    """A single ordered, limited read against one table."""

    table: str
    columns: str = "*"
    order_by: str | None = None
    ascending: bool = True
    limit: int | None = None

    def to_params(self) -> dict[str, str]:
        """Build the PostgREST query-string parameters.

        Returns:
            Mapping of parameter name to value
        """
        params = {"select": "".join(self.columns.split())}
        if self.order_by:
            direction = "asc" if self.ascending else "desc"
            params["order"] = f"{self.order_by}.{direction}"
        if self.limit is not None:
            params["limit"] = str(self.limit)
        return params


class DataService:
    """Async read client for the hosted data backend.

    The underlying ``httpx.AsyncClient`` is shared across page views and owned
    by whoever created the service; call ``aclose`` on shutdown.
    """

    def __init__(
        self,
        config: Config | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the data service.

        Args:
            config: Application configuration (defaults to the global config)
            client: Pre-built HTTP client, mainly for tests
        """
        self.config = config or get_config()
        self.client = client or httpx.AsyncClient(
            base_url=f"{self.config.supabase_url}/rest/v1",
            headers=self._auth_headers(),
            timeout=self.config.request_timeout,
        )
        logger.info(f"Data service initialized for {self.config.supabase_url}")

    def _auth_headers(self) -> dict[str, str]:
        key = self.config.supabase_anon_key
        return {
            "apikey": key,
            "Authorization": f"Bearer {key}",
            "Accept": "application/json",
        }

    async def select(self, query: Query) -> list[dict[str, Any]]:
        """Run a read query.

        Args:
            query: Table, projection, ordering and limit to apply

        Returns:
            The returned rows, or an empty list when the service returns null

        Raises:
            DataServiceError: On transport failure, an error response, or a
                response body that is not a list of rows
        """
        logger.debug(f"Querying {query.table} with {query.to_params()}")

        try:
            response = await self.client.get(
                f"/{query.table}", params=query.to_params()
            )
        except httpx.HTTPError as e:
            msg = f"Request to {query.table} failed: {e}"
            raise DataServiceError(msg) from e

        if response.is_error:
            raise self._error_from_response(response)

        try:
            data = response.json()
        except ValueError as e:
            msg = f"Malformed response from {query.table}"
            raise DataServiceError(msg, status_code=response.status_code) from e

        if data is None:
            return []
        if not isinstance(data, list):
            msg = f"Expected a list of rows from {query.table}, got {type(data).__name__}"
            raise DataServiceError(msg, status_code=response.status_code)

        return data

    @staticmethod
    def _error_from_response(response: httpx.Response) -> DataServiceError:
        """Translate a PostgREST error response into a DataServiceError."""
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            return DataServiceError(
                body.get("message") or response.reason_phrase,
                code=body.get("code"),
                details=body.get("details"),
                hint=body.get("hint"),
                status_code=response.status_code,
            )

        return DataServiceError(
            f"HTTP {response.status_code}: {response.text or response.reason_phrase}",
            status_code=response.status_code,
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.aclose()
