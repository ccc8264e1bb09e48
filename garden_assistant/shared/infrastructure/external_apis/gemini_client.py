# 📄 File: garden_assistant/shared/infrastructure/external_apis/gemini_client.py

# 🧭 Purpose (Layman Explanation):
# The messenger that carries our questions and plant photos to Google's Gemini AI
# over the internet and brings the written answer back, reporting clearly when something fails.

# 🧪 Purpose (Technical Summary):
# Async HTTP client for the Gemini generateContent REST endpoint built on aiohttp,
# with error-status mapping, exception transformation, call statistics and
# structured call logging. No retries: every call is a single request.

# 🔗 Dependencies:
# - aiohttp: Async HTTP client
# - garden_assistant.shared.core.exceptions (external API errors)
# - garden_assistant.shared.utils.logging (structured logging)

# 🔄 Connected Modules / Calls From:
# Used by: GeminiModelService (plant identification and chat), health checks,
# application lifespan (initialize/close)

import asyncio
import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import aiohttp
from aiohttp import ClientSession, ClientTimeout

from garden_assistant.shared.core.exceptions import (
    ExternalAPIError,
    APIAuthenticationError,
    APIQuotaExceededError,
    APITimeoutError,
)
from garden_assistant.shared.utils.logging import get_logger

logger = get_logger(__name__)


class GeminiClient:
    """
    Async HTTP client for the Gemini generative language API.

    Features:
    - Single shared aiohttp session
    - HTTP status to domain exception mapping
    - Response text extraction from candidates
    - Request logging and performance stats
    """

    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout: Optional[int] = None,
        api_name: str = "gemini",
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.api_name = api_name

        self.session: Optional[ClientSession] = None

        self.stats = {
            'total_requests': 0,
            'successful_requests': 0,
            'failed_requests': 0,
            'average_response_time': 0,
            'last_request_time': None,
            'last_error': None,
        }

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def initialize(self):
        """Create the client session."""
        if self.session and not self.session.closed:
            return

        self.session = ClientSession(
            timeout=ClientTimeout(total=self.timeout),
            headers=self._get_default_headers()
        )
        logger.info(f"API client initialized for {self.api_name}", extra={'model': self.model})

    def _get_default_headers(self) -> Dict[str, str]:
        """Get default headers for requests."""
        headers = {
            'User-Agent': f'GardenAssistant/1.0 ({self.api_name}-client)',
            'Accept': 'application/json',
            'Content-Type': 'application/json'
        }
        if self.api_key:
            headers['x-goog-api-key'] = self.api_key
        return headers

    def _endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def generate_content(
        self,
        contents: List[Dict[str, Any]],
        system_instruction: Optional[str] = None,
    ) -> str:
        """
        Call generateContent and return the concatenated text of the first candidate.

        Args:
            contents: Gemini `contents` array (role + parts per turn)
            system_instruction: Optional system instruction text

        Returns:
            Model reply text

        Raises:
            ExternalAPIError: On transport failures, error statuses or empty replies
        """
        payload: Dict[str, Any] = {'contents': contents}
        if system_instruction:
            payload['system_instruction'] = {'parts': [{'text': system_instruction}]}

        response_data = await self._make_request(payload)
        return self._extract_text(response_data)

    async def _make_request(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Make a single POST request to generateContent."""
        if not self.is_configured:
            raise ExternalAPIError(
                f"{self.api_name} API key is not configured",
                api_name=self.api_name,
            )
        if not self.session or self.session.closed:
            await self.initialize()

        url = self._endpoint()
        start_time = time.time()
        status_code = None
        self.stats['total_requests'] += 1
        self.stats['last_request_time'] = datetime.now(timezone.utc).isoformat()

        try:
            async with self.session.post(url, json=payload) as response:
                status_code = response.status
                response_time = time.time() - start_time

                if self.stats['average_response_time'] == 0:
                    self.stats['average_response_time'] = response_time
                else:
                    self.stats['average_response_time'] = (
                        self.stats['average_response_time'] * 0.7 + response_time * 0.3
                    )

                await self._handle_response_status(response)

                try:
                    response_data = await response.json()
                except (aiohttp.ContentTypeError, ValueError):
                    response_text = await response.text()
                    raise ExternalAPIError(
                        f"Malformed response from {self.api_name}",
                        api_name=self.api_name,
                        api_status_code=response.status,
                        api_response=response_text[:500],
                    )

                self.stats['successful_requests'] += 1
                logger.performance.log_external_api_call(
                    api_name=self.api_name,
                    endpoint=url,
                    method='POST',
                    status_code=response.status,
                    duration_ms=response_time * 1000,
                    success=True,
                )

                return response_data

        except Exception as e:
            self.stats['failed_requests'] += 1
            self._record_error(e, url)
            logger.performance.log_external_api_call(
                api_name=self.api_name,
                endpoint=url,
                method='POST',
                status_code=status_code,
                duration_ms=(time.time() - start_time) * 1000,
                success=False,
                extra={'error_type': type(e).__name__},
            )
            transformed = self._transform_exception(e, url)
            if transformed is e:
                raise
            raise transformed from e

    async def _handle_response_status(self, response: aiohttp.ClientResponse):
        """Handle HTTP response status codes."""
        if response.status == 200:
            return
        elif response.status in (401, 403):
            raise APIAuthenticationError(self.api_name, api_status_code=response.status)
        elif response.status == 429:
            retry_after = response.headers.get('Retry-After')
            raise APIQuotaExceededError(
                self.api_name,
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
            )
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

    def _extract_text(self, response_data: Dict[str, Any]) -> str:
        """Join the text parts of the first candidate."""
        candidates = response_data.get('candidates') or []
        if not candidates:
            block_reason = (response_data.get('promptFeedback') or {}).get('blockReason')
            raise ExternalAPIError(
                f"{self.api_name} returned no candidates",
                api_name=self.api_name,
                details={'block_reason': block_reason} if block_reason else None,
            )

        parts = (candidates[0].get('content') or {}).get('parts') or []
        text = ''.join(part.get('text', '') for part in parts if isinstance(part, dict))
        if not text.strip():
            raise ExternalAPIError(
                f"{self.api_name} returned an empty reply",
                api_name=self.api_name,
                details={'finish_reason': candidates[0].get('finishReason')},
            )
        return text

    def _transform_exception(self, exception: Exception, url: str) -> Exception:
        """Transform exceptions to appropriate API exceptions."""
        if isinstance(exception, asyncio.TimeoutError):
            return APITimeoutError(self.api_name, timeout_seconds=self.timeout)
        elif isinstance(exception, aiohttp.ClientError):
            return ExternalAPIError(
                f"Client error for {self.api_name}: {exception}",
                api_name=self.api_name,
            )
        else:
            return exception

    def _record_error(self, error: Exception, url: str):
        """Keep the latest failure in stats and log it."""
        error_record = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'error_type': type(error).__name__,
            'error_message': str(error),
        }
        self.stats['last_error'] = error_record

        logger.error(f"API error recorded for {self.api_name}", extra={**error_record, 'url': url})

    def get_stats(self) -> Dict[str, Any]:
        """Get client performance statistics."""
        return {
            **self.stats,
            'api_name': self.api_name,
            'model': self.model,
            'configured': self.is_configured,
            'error_rate': (
                self.stats['failed_requests'] / max(self.stats['total_requests'], 1)
            ) * 100,
        }

    async def close(self):
        """Close the client session and cleanup resources."""
        if self.session:
            await self.session.close()
            self.session = None

        logger.info(f"API client closed for {self.api_name}")


def create_gemini_client(config: Dict[str, Any]) -> GeminiClient:
    """Factory function to create a configured Gemini client from settings.get_model_api_config()."""
    return GeminiClient(
        api_key=config.get("api_key"),
        model=config["model"],
        base_url=config.get("api_url") or "https://generativelanguage.googleapis.com/v1beta",
        timeout=config.get("timeout"),
    )
