"""
HTTP lesson service.

Talks to the lessons REST API with httpx:

- GET  {base_url}/lessons       -> array of lesson records
- POST {base_url}/lessons/take  -> claimed lesson record (body: {"lessonId": ...})
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from ..errors import NetworkFailureError, ParseFailureError, ServiceTimeoutError
from ..models.lesson import Lesson
from ..utils.config import SecureString
from ..validation.lesson_validator import LessonValidator
from .interfaces import DEFAULT_TIMEOUT, LessonService, bounded
from .parsing import parse_lesson_records


logger = logging.getLogger(__name__)


class HttpLessonService(LessonService):
    """
    Lesson service backed by the lessons REST API.

    Examples:
        >>> async with HttpLessonService("https://api.example.com", timeout=10) as service:
        ...     lessons = await service.fetch_lessons()
        ...     claimed = await service.claim_lesson("L007")
    """

    LESSONS_PATH = "/lessons"
    TAKE_CLASS_PATH = "/lessons/take"

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        token: Optional[SecureString] = None,
        client: Optional[httpx.AsyncClient] = None
    ):
        """
        Initialize HttpLessonService.

        Args:
            base_url: API base URL (e.g. "https://api.example.com")
            timeout: Timeout budget per call in seconds
            token: Optional bearer token
            client: Pre-built client (tests inject one with a MockTransport)
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.validator = LessonValidator()

        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if token is not None:
            headers["Authorization"] = f"Bearer {token.get_value()}"

        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout)
        )
        self._headers = headers

        logger.info(f"HttpLessonService initialized with base_url: {self.base_url}")

    async def __aenter__(self) -> 'HttpLessonService':
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self):
        """Close the underlying HTTP client if this service created it."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()

    async def _request_json(
        self,
        method: str,
        path: str,
        description: str,
        json_body: Optional[Dict[str, Any]] = None
    ) -> Any:
        """
        Send a request and decode its JSON body.

        Raises:
            ServiceTimeoutError: On httpx timeouts or when the budget is exceeded
            NetworkFailureError: On non-2xx responses and transport errors
            ParseFailureError: If the body is not valid JSON
        """
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url}")

        try:
            response = await bounded(
                self._client.request(method, url, json=json_body, headers=self._headers),
                self.timeout,
                description
            )
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise ServiceTimeoutError(
                f"{description} timed out after {self.timeout:g}s",
                timeout=self.timeout
            ) from e
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            reason = e.response.reason_phrase or "HTTP error"
            logger.error(f"{description} failed: HTTP {status_code} {reason}")
            raise NetworkFailureError(
                f"{description} failed: {status_code} {reason}",
                status_code=status_code
            ) from e
        except httpx.RequestError as e:
            logger.error(f"{description} failed: {type(e).__name__}: {e}")
            raise NetworkFailureError(f"{description} failed: {e}") from e

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise ParseFailureError(f"{description} returned invalid JSON: {e}") from e

    async def fetch_lessons(self) -> List[Lesson]:
        """
        Fetch all lessons.

        Returns:
            Lessons in response order

        Raises:
            ServiceTimeoutError, NetworkFailureError, ParseFailureError
        """
        payload = await self._request_json("GET", self.LESSONS_PATH, "Fetching lessons")
        lessons = parse_lesson_records(payload, self.validator)
        logger.info(f"Fetched {len(lessons)} lessons")
        return lessons

    async def claim_lesson(self, lesson_id: str) -> Dict[str, Any]:
        """
        Claim a lesson.

        Args:
            lesson_id: ID of the lesson to claim

        Returns:
            Lesson record returned by the API (possibly partial)

        Raises:
            ServiceTimeoutError, NetworkFailureError, ParseFailureError
        """
        payload = await self._request_json(
            "POST",
            self.TAKE_CLASS_PATH,
            f"Taking class {lesson_id}",
            json_body={"lessonId": lesson_id}
        )

        if payload is None:
            payload = {}

        if not isinstance(payload, dict):
            raise ParseFailureError(
                f"Expected a lesson object, got {type(payload).__name__}"
            )

        logger.info(f"Claimed lesson {lesson_id}")
        return payload
