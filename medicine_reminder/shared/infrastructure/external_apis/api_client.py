# 📄 File: medicine_reminder/shared/infrastructure/external_apis/api_client.py

# 🧭 Purpose (Layman Explanation):
# The app's messenger to the reminder server: it sends one request, waits for the answer,
# and reports clearly whether the server said yes, said no, or could not be reached.

# 🧪 Purpose (Technical Summary):
# Generic async HTTP client over one shared aiohttp ClientSession. JSON in, JSON out;
# non-2xx responses raise APIResponseError with the decoded body, transport problems
# raise ExternalAPIError / APITimeoutError. Exactly one attempt per call.

# 🔗 Dependencies:
# - aiohttp: Async HTTP client
# - medicine_reminder.shared.core.exceptions

# 🔄 Connected Modules / Calls From:
# Used by: medicine_reminder.modules.auth.infrastructure.external.auth_api_client

import asyncio
import json
import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import aiohttp
from aiohttp import ClientSession, ClientTimeout

from medicine_reminder.shared.config.settings import Settings
from medicine_reminder.shared.core.exceptions import (
    APIResponseError,
    APITimeoutError,
    ExternalAPIError,
)
from medicine_reminder.shared.utils.logging import get_logger

logger = get_logger(__name__)


class APIClient:
    """
    Generic async HTTP client for the reminder backend.

    Features:
    - Lazily created, shared aiohttp session (connection pool)
    - JSON request/response handling
    - Status and transport errors mapped to typed exceptions
    - Request logging and basic counters
    """

    def __init__(
        self,
        base_url: str,
        api_name: str,
        timeout: int = 30,
        max_connections: int = 10,
        headers: Optional[Dict[str, str]] = None,
        session: Optional[ClientSession] = None
    ):
        """Initialize API client with configuration."""
        self.base_url = base_url.rstrip('/')
        self.api_name = api_name
        self.timeout = timeout
        self.max_connections = max_connections
        self.headers = headers or {}

        self.session: Optional[ClientSession] = session
        self._owns_session = session is None

        self.stats = {
            'total_requests': 0,
            'successful_requests': 0,
            'failed_requests': 0,
            'last_request_time': None,
        }

    async def initialize(self) -> None:
        """Create the client session if none was injected."""
        if self.session is not None and not self.session.closed:
            return

        connector = aiohttp.TCPConnector(limit=self.max_connections)
        self.session = ClientSession(
            timeout=ClientTimeout(total=self.timeout),
            connector=connector,
            headers=self._get_default_headers()
        )
        self._owns_session = True
        logger.info(f"API client initialized for {self.api_name}", extra={'base_url': self.base_url})

    def _get_default_headers(self) -> Dict[str, str]:
        """Get default headers for requests."""
        return {
            'User-Agent': f'MedicineReminder/1.0 ({self.api_name}-client)',
            'Accept': 'application/json',
            'Content-Type': 'application/json',
            **self.headers
        }

    def build_url(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    async def request(
        self,
        method: str,
        endpoint: str,
        data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None
    ) -> Any:
        """
        Send one request and return the decoded JSON body.

        Args:
            method: HTTP method
            endpoint: Path relative to base_url
            data: JSON body
            params: Query parameters

        Returns:
            Decoded JSON payload (None for an empty body)

        Raises:
            APIResponseError: Non-2xx status; carries status and decoded body
            APITimeoutError: Request exceeded the configured timeout
            ExternalAPIError: Connection failure or a 2xx body that is not UTF-8 JSON
        """
        await self.initialize()

        url = self.build_url(endpoint)
        request_kwargs: Dict[str, Any] = {'method': method.upper(), 'url': url}
        if data is not None:
            request_kwargs['json'] = data
        if params:
            request_kwargs['params'] = params

        self.stats['total_requests'] += 1
        self.stats['last_request_time'] = datetime.now(timezone.utc).isoformat()
        start_time = time.perf_counter()
        status: Optional[int] = None

        try:
            async with self.session.request(**request_kwargs) as response:
                status = response.status
                body = await response.read()

        except asyncio.TimeoutError as e:
            self.stats['failed_requests'] += 1
            logger.warning(f"{self.api_name} request timed out: {method.upper()} {url}")
            raise APITimeoutError(self.api_name, self.timeout) from e

        except aiohttp.ClientError as e:
            self.stats['failed_requests'] += 1
            logger.warning(f"{self.api_name} transport error: {method.upper()} {url}: {e}")
            raise ExternalAPIError(
                f"Client error for {self.api_name}: {e}",
                api_name=self.api_name
            ) from e

        finally:
            logger.log_external_api_call(
                api_name=self.api_name,
                method=method.upper(),
                url=url,
                status_code=status,
                duration_ms=(time.perf_counter() - start_time) * 1000
            )

        if 200 <= status < 300:
            self.stats['successful_requests'] += 1
            return self._decode_success_body(body, method, url)

        self.stats['failed_requests'] += 1
        raise APIResponseError(
            status=status,
            data=self._decode_error_body(body),
            api_name=self.api_name,
            method=method.upper(),
            url=url
        )

    def _decode_success_body(self, body: bytes, method: str, url: str) -> Any:
        if not body:
            return None
        try:
            return json.loads(body.decode('utf-8'))
        except ValueError as e:
            raise ExternalAPIError(
                f"Invalid JSON from {self.api_name}: {method.upper()} {url}",
                api_name=self.api_name
            ) from e

    @staticmethod
    def _decode_error_body(body: bytes) -> Any:
        """
        Decode an error body.

        Non-JSON text is returned as is; a body that is not valid UTF-8 gives None.
        """
        if not body:
            return None
        try:
            text = body.decode('utf-8')
        except UnicodeDecodeError:
            return None
        try:
            return json.loads(text)
        except ValueError:
            return text

    async def post(self, endpoint: str, data: Optional[Dict[str, Any]] = None) -> Any:
        """Make POST request."""
        return await self.request('POST', endpoint, data=data)

    def get_stats(self) -> Dict[str, Any]:
        """Get client statistics."""
        return {'api_name': self.api_name, 'base_url': self.base_url, **self.stats}

    async def close(self) -> None:
        """Close the client session if this client created it."""
        if self.session is not None and self._owns_session and not self.session.closed:
            await self.session.close()
            logger.info(f"API client closed for {self.api_name}")
        self.session = None

    async def __aenter__(self) -> "APIClient":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()


def create_api_client(settings: Settings, api_name: str = "reminder-api") -> APIClient:
    """
    Factory function to create the API client from settings.

    Args:
        settings: Application settings
        api_name: Name used in logs and errors

    Returns:
        Configured (not yet initialized) APIClient
    """
    return APIClient(
        base_url=settings.API_BASE_URL,
        api_name=api_name,
        timeout=settings.API_TIMEOUT,
        max_connections=settings.API_MAX_CONNECTIONS
    )
