"""HTTP client for the configuration backend.

All three backend calls used by the panel live here. Transport failures,
non-2xx responses and undecodable bodies are converted into the exception
classes below so the controller only has one thing to catch per operation.
"""

from __future__ import annotations

import json
import logging
from typing import Any, List, Optional
from urllib.parse import quote

import httpx

from . import config
from .resource_types import CategoryLike, resolve_category

logger = logging.getLogger(__name__)


class PanelApiError(Exception):
    """Base class for failures talking to the configuration backend."""

    def __init__(self, message: str, *, path: str = "", status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.path = path
        self.status_code = status_code


class ListFetchError(PanelApiError):
    """The names endpoint failed or returned something other than a list of names."""


class ContentFetchError(PanelApiError):
    """The content endpoint failed or returned an undecodable body."""


class SaveError(PanelApiError):
    """Saving a configuration failed."""


class ContentValidationError(SaveError):
    """The edited text is not valid JSON; nothing was sent."""


def names_path(category: CategoryLike) -> str:
    return f"/api/v1/panel/{resolve_category(category).key}"


def content_path(category: CategoryLike) -> str:
    return f"/api/v1/client/{resolve_category(category).singular_key}"


def save_path(category: CategoryLike, name: str) -> str:
    # The name is a single path segment; "/", "?" and "#" must not split it.
    return f"/api/resources/{resolve_category(category).key}/{quote(name, safe='')}"


class PanelApiClient:
    """Synchronous client for the panel's REST endpoints."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or config.get_api_base_url()).rstrip("/")
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout if timeout is not None else config.get_request_timeout()),
            transport=transport,
        )

    def __enter__(self) -> "PanelApiClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    # ------------------------------------------------------------------
    def list_names(self, category: CategoryLike) -> List[str]:
        """Return the configuration names of ``category`` in backend order."""
        path = names_path(category)
        data = self._get_json(path, ListFetchError)
        if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
            raise ListFetchError(f"Expected a list of names from {path}", path=path)
        return data

    def get_content(self, category: CategoryLike, name: str) -> Any:
        """Return the decoded JSON document stored under ``name``."""
        return self._get_json(content_path(category), ContentFetchError, params={"name": name})

    def save_content(self, category: CategoryLike, name: str, content: str) -> None:
        """Parse ``content`` and post it as the new document for ``name``.

        Raises ``ContentValidationError`` before any request when ``content``
        is not valid JSON.
        """
        path = save_path(category, name)
        try:
            parsed = json.loads(content)
        except ValueError as exc:
            raise ContentValidationError(f"Invalid JSON: {exc}", path=path) from exc

        logger.debug("POST %s", path)
        try:
            response = self._client.post(path, json={"content": parsed})
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise SaveError(
                f"Save rejected with status {exc.response.status_code}",
                path=path,
                status_code=exc.response.status_code,
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise SaveError(f"Save request failed: {exc}", path=path) from exc

    # ------------------------------------------------------------------
    def _get_json(self, path: str, error_cls: type[PanelApiError], params: Optional[dict] = None) -> Any:
        logger.debug("GET %s params=%s", path, params)
        try:
            response = self._client.get(path, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise error_cls(
                f"{path} returned status {exc.response.status_code}",
                path=path,
                status_code=exc.response.status_code,
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise error_cls(f"Request to {path} failed: {exc}", path=path) from exc
        try:
            return response.json()
        except ValueError as exc:
            raise error_cls(f"{path} returned a body that is not JSON", path=path) from exc
