import asyncio
import logging
from typing import Any, Dict, Mapping, Optional, Union

import aiohttp
from multidict import MultiDict

from ..config.loader import ProviderConfig

Params = Union[Mapping[str, str], "MultiDict[str]"]

GENERIC_ERROR_MESSAGE = "Unknown error"


class ProviderError(Exception):
    """Raised for any transport or HTTP failure talking to an upstream provider."""

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        details: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.details = details

    def __str__(self) -> str:
        if self.status is not None:
            return f"HTTP {self.status}: {self.message}"
        return self.message


class ProviderClient:
    """Base class for read-only JSON API clients.

    Configuration is fixed at construction. Each request opens its own
    short-lived session unless one is injected.
    """

    name = "Provider"

    def __init__(
        self,
        config: ProviderConfig,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> None:
        self.config = config
        self.session = session
        self.timeout = aiohttp.ClientTimeout(total=config.timeout)
        self.logger = logging.getLogger(self.__class__.__name__)

    def prepare_params(self, params: Optional[Params]) -> "MultiDict[str]":
        """Merge configured default params under the request params."""
        merged: "MultiDict[str]" = MultiDict(params or {})
        for key, value in self.config.default_params.items():
            if key not in merged:
                merged[key] = value
        return merged

    def error_message(self, body: Any) -> Optional[str]:
        """Extract a human-readable message from an error response body."""
        return None

    async def get_json(
        self,
        path: str,
        params: Optional[Params] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """
        GET a JSON document relative to the configured base URL.

        Raises:
            ProviderError: On network failure, timeout, non-200 status or
                a body that is not a JSON object
        """
        url = self.config.base_url.rstrip("/") + "/" + path.lstrip("/")
        request_params = self.prepare_params(params)

        try:
            if self.session is not None:
                return await self._request(self.session, url, request_params, headers)
            async with aiohttp.ClientSession(
                timeout=self.timeout,
                headers=self.config.headers,
            ) as session:
                return await self._request(session, url, request_params, headers)
        except asyncio.TimeoutError as e:
            self.logger.error(f"Timeout after {self.timeout.total}s: {url}")
            raise ProviderError(self.generic_message(), details="timeout") from e
        except aiohttp.ClientError as e:
            self.logger.error(f"Network error fetching {url}: {e}")
            raise ProviderError(self.generic_message(), details=str(e)) from e

    async def _request(
        self,
        session: aiohttp.ClientSession,
        url: str,
        params: "MultiDict[str]",
        headers: Optional[Dict[str, str]],
    ) -> Dict[str, Any]:
        self.logger.debug(f"Fetching {url} with {self._redact(params)}")
        async with session.get(url, params=params, headers=headers) as response:
            body = await self._read_body(response)

            if response.status != 200:
                message = self.error_message(body) or self.generic_message()
                if response.status == 404:
                    self.logger.error(f"Not found (404): {url}")
                elif response.status in (401, 403):
                    self.logger.error(f"Access denied ({response.status}): {url}")
                elif response.status >= 500:
                    self.logger.error(f"Server error ({response.status}): {url}")
                else:
                    self.logger.error(f"HTTP {response.status}: {url}")
                raise ProviderError(message, status=response.status, details=str(body))

            if not isinstance(body, dict):
                raise ProviderError(
                    self.generic_message(),
                    status=response.status,
                    details=f"Expected a JSON object from {url}",
                )
            return body

    async def _read_body(self, response: aiohttp.ClientResponse) -> Any:
        try:
            return await response.json(content_type=None)
        except ValueError:
            return None

    def generic_message(self) -> str:
        return f"{self.name}: {GENERIC_ERROR_MESSAGE}"

    @staticmethod
    def _redact(params: "MultiDict[str]") -> Dict[str, str]:
        return {
            key: ("***" if key.lower() in ("apikey", "api_key") else value)
            for key, value in params.items()
        }
