# 📄 File: app/shared/infrastructure/external_apis/api_client.py

# 🧭 Purpose (Layman Explanation):
# This file creates an HTTP client that knows how to talk to external services,
# handling timeouts and errors gracefully when the plant AI asks the language model for help.

# 🧪 Purpose (Technical Summary):
# Generic async HTTP client with status-code to exception mapping, optional bounded
# retry with jittered backoff (tenacity), request statistics and error history.

# 🔗 Dependencies:
# - aiohttp: Async HTTP client
# - tenacity: Retry logic and backoff strategies

# 🔄 Connected Modules / Calls From:
# Used by: OpenAI inference client (app.modules.plant_ai.infrastructure.external)

import asyncio
import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from urllib.parse import urljoin

import aiohttp
from aiohttp import ClientSession, ClientTimeout
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)

from app.shared.core.exceptions import (
    APIAuthenticationError,
    APIQuotaExceededError,
    APIRateLimitError,
    APITimeoutError,
    ExternalAPIError,
)
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)

# Transport failures worth another attempt; HTTP status errors are not.
RETRYABLE_EXCEPTIONS = (aiohttp.ClientError, asyncio.TimeoutError)


class APIClient:
    """
    Generic async HTTP client for external API integrations.

    Features:
    - Status code to exception mapping
    - Optional retry with jittered exponential backoff
    - Request/response logging
    - Performance metrics and error history
    - Bearer authentication
    """

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str],
        api_name: str,
        timeout: float = 30,
        max_retries: int = 0,
        retry_max_wait: float = 10.0,
        session: Optional[ClientSession] = None
    ):
        """Initialize API client with configuration."""
        self.base_url = base_url.rstrip('/') + '/'
        self.api_key = api_key
        self.api_name = api_name
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_max_wait = retry_max_wait

        self.session: Optional[ClientSession] = session
        self._owns_session = session is None

        self.stats = {
            'total_requests': 0,
            'successful_requests': 0,
            'failed_requests': 0,
            'average_response_time': 0,
            'last_request_time': None,
        }

        self.error_history: List[Dict[str, Any]] = []
        self.max_error_history = 100

    async def initialize(self):
        """Initialize the client session."""
        if self.session is not None:
            return

        timeout = ClientTimeout(total=self.timeout)
        connector = aiohttp.TCPConnector(limit=10, limit_per_host=5)

        self.session = ClientSession(
            timeout=timeout,
            connector=connector,
            headers=self._get_default_headers()
        )
        self._owns_session = True
        logger.info(f"API client initialized for {self.api_name}")

    def _get_default_headers(self) -> Dict[str, str]:
        """Get default headers for requests."""
        headers = {
            'User-Agent': f'Plantitas/1.0 ({self.api_name}-client)',
            'Accept': 'application/json',
            'Content-Type': 'application/json'
        }

        if self.api_key:
            headers['Authorization'] = f'Bearer {self.api_key}'

        return headers

    def _retrying(self) -> AsyncRetrying:
        return AsyncRetrying(
            stop=stop_after_attempt(self.max_retries + 1),
            wait=wait_random_exponential(multiplier=1, max=self.retry_max_wait),
            retry=retry_if_exception_type(RETRYABLE_EXCEPTIONS),
            reraise=True,
        )

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Dict[str, Any]:
        """Make an HTTP request, retrying transport failures when configured."""
        if not self.session:
            await self.initialize()

        url = urljoin(self.base_url, endpoint.lstrip('/'))

        request_headers = self._get_default_headers()
        if headers:
            request_headers.update(headers)

        request_kwargs: Dict[str, Any] = {
            'method': method,
            'url': url,
            'headers': request_headers,
        }
        if data is not None:
            request_kwargs['json'] = data

        try:
            async for attempt in self._retrying():
                with attempt:
                    if attempt.retry_state.attempt_number > 1:
                        logger.warning(
                            f"Retrying {self.api_name} request",
                            extra={'attempt': attempt.retry_state.attempt_number, 'url': url}
                        )
                    return await self._send(request_kwargs, method, url)
        except Exception as e:
            self.stats['failed_requests'] += 1
            self._record_error(e, method, url)
            raise self._transform_exception(e) from e

    async def _send(self, request_kwargs: Dict[str, Any], method: str, url: str) -> Dict[str, Any]:
        start_time = time.time()
        self.stats['total_requests'] += 1
        self.stats['last_request_time'] = datetime.now(timezone.utc).isoformat()

        async with self.session.request(**request_kwargs) as response:
            response_time = time.time() - start_time

            if self.stats['average_response_time'] == 0:
                self.stats['average_response_time'] = response_time
            else:
                self.stats['average_response_time'] = (
                    self.stats['average_response_time'] * 0.7 + response_time * 0.3
                )

            logger.performance.log_external_api_call(
                api_name=self.api_name,
                endpoint=url,
                method=method,
                status_code=response.status,
                duration_ms=response_time * 1000,
                success=200 <= response.status < 300,
            )

            await self._handle_response_status(response)

            try:
                response_data = await response.json(content_type=None)
            except ValueError:
                response_text = await response.text()
                response_data = {'raw_response': response_text}

            self.stats['successful_requests'] += 1
            return response_data

    async def _handle_response_status(self, response: aiohttp.ClientResponse):
        """Handle HTTP response status codes."""
        if 200 <= response.status < 300:
            return
        elif response.status in (401, 403):
            raise APIAuthenticationError(self.api_name, api_status_code=response.status)
        elif response.status == 429:
            retry_after = response.headers.get('Retry-After')
            raise APIRateLimitError(self.api_name, retry_after=retry_after)
        elif response.status == 402:
            raise APIQuotaExceededError(self.api_name, api_status_code=response.status)
        elif 400 <= response.status < 500:
            response_text = await response.text()
            raise ExternalAPIError(
                f"Client error for {self.api_name} ({response.status})",
                api_name=self.api_name,
                api_status_code=response.status,
                api_response=response_text[:500],
            )
        elif 500 <= response.status < 600:
            response_text = await response.text()
            raise ExternalAPIError(
                f"Server error for {self.api_name} ({response.status})",
                api_name=self.api_name,
                api_status_code=response.status,
                api_response=response_text[:500],
            )
        else:
            raise ExternalAPIError(
                f"Unexpected status code for {self.api_name}: {response.status}",
                api_name=self.api_name,
                api_status_code=response.status,
            )

    def _transform_exception(self, exception: Exception) -> Exception:
        """Transform exceptions to appropriate API exceptions."""
        if isinstance(exception, ExternalAPIError):
            return exception
        elif isinstance(exception, asyncio.TimeoutError):
            return APITimeoutError(self.api_name, self.timeout)
        elif isinstance(exception, aiohttp.ClientError):
            return ExternalAPIError(
                f"Client error for {self.api_name}: {exception}",
                api_name=self.api_name,
            )
        else:
            return exception

    def _record_error(self, error: Exception, method: str, url: str):
        """Record error for analysis and monitoring."""
        error_record = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'error_type': type(error).__name__,
            'error_message': str(error),
            'method': method,
            'url': url,
            'api_name': self.api_name
        }

        self.error_history.append(error_record)

        if len(self.error_history) > self.max_error_history:
            self.error_history = self.error_history[-self.max_error_history:]

        logger.error(f"API error recorded for {self.api_name}", extra=error_record)

    async def post(
        self,
        endpoint: str,
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Dict[str, Any]:
        """Make POST request."""
        return await self._make_request('POST', endpoint, data, headers)

    def get_stats(self) -> Dict[str, Any]:
        """Get client performance statistics."""
        return {
            **self.stats,
            'api_name': self.api_name,
            'error_rate': (
                self.stats['failed_requests'] / max(self.stats['total_requests'], 1)
            ) * 100,
        }

    def get_recent_errors(self, limit: int = 10) -> List[Dict]:
        """Get recent error history."""
        return self.error_history[-limit:]

    async def close(self):
        """Close the client session and cleanup resources."""
        if self.session and self._owns_session:
            await self.session.close()
        self.session = None

        logger.info(f"API client closed for {self.api_name}")
