"""Base HTTP client for JSON market-data APIs."""

import asyncio
import logging
from typing import Any, Dict, Optional

import aiohttp

from config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Raised when a market-data request fails."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class HTTPClient:
    """
    Thin aiohttp wrapper shared by the market-data clients.

    Owns one lazily created session. Subclasses set BASE_URL or pass
    base_url explicitly.
    """

    def __init__(
        self,
        base_url: str,
        settings: Optional[Settings] = None,
        timeout: Optional[float] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.settings = settings or get_settings()
        self.base_url = base_url.rstrip("/")
        self._timeout = timeout or self.settings.http_timeout_seconds
        self._headers = headers or {}
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._timeout),
                headers=self._headers,
            )
        return self._session

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        GET a JSON document.

        Raises:
            APIError: on an error status, a missing response, or a request failure
        """
        session = await self._get_session()
        url = self._url(path)
        try:
            async with session.get(url, params=params) as resp:
                if resp.status >= 400:
                    raise APIError(f"API Error: {resp.status} - {resp.reason}", status=resp.status)
                return await resp.json(content_type=None)
        except APIError:
            raise
        except (aiohttp.ServerDisconnectedError, asyncio.TimeoutError) as e:
            logger.debug(f"No response from {url}: {e!r}")
            raise APIError("No response received from API") from e
        except aiohttp.ClientError as e:
            raise APIError(f"API Request Error: {e}") from e

    async def close(self) -> None:
        """Close the session."""
        if self._session and not self._session.closed:
            await self._session.close()
