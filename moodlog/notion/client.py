"""
HTTP Client for the Notion pages endpoint.

Sends a single page-creation request per call. Every request carries the
bearer token, a JSON content type and the pinned Notion-Version header.
No retries: transport errors propagate as httpx.HTTPError, API errors as
NotionAPIError.
"""

import json
from typing import Any

import httpx

from moodlog.core.config import get_app_config
from moodlog.core.exceptions import NotionAPIError
from moodlog.core.logging import get_logger, log_with_source
from moodlog.notion.schemas import PageCreateRequest, PageCreateResponse

logger = get_logger(__name__)

UNKNOWN_ERROR_MESSAGE = "Unknown error"


class NotionClient:
    """
    HTTP client for Notion page creation.

    Usage:
        with NotionClient(token="secret_...") as client:
            page = client.create_page(request)
            print(page.id)
    """

    def __init__(
        self,
        token: str,
        api_url: str = "https://api.notion.com/v1/pages",
        api_version: str = "2022-06-28",
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            token: Notion integration token, sent as a bearer token.
            api_url: Page-creation endpoint.
            api_version: Value of the Notion-Version header.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport, used by tests.
        """
        self.token = token
        self.api_url = api_url
        self.api_version = api_version
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.Client | None = None

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
            "Notion-Version": self.api_version,
        }

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(timeout=self.timeout, transport=self._transport)
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()
            self._client = None

    def __enter__(self) -> "NotionClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def create_page(self, request: PageCreateRequest) -> PageCreateResponse:
        """
        Create a page (database row).

        Args:
            request: Page creation payload

        Returns:
            Parsed response with the new page id

        Raises:
            NotionAPIError: On a non-2xx status or a 2xx body that is not JSON
            httpx.HTTPError: On transport failure
        """
        client = self._get_client()
        body = json.dumps(request.to_payload(), ensure_ascii=False).encode("utf-8")

        log_with_source(logger, "api", "debug", "Notion request", method="POST", url=self.api_url)

        try:
            response = client.post(self.api_url, content=body, headers=self.headers)
        except httpx.HTTPError as e:
            log_with_source(logger, "api", "error", "Notion request failed", url=self.api_url, error=str(e))
            raise

        log_with_source(
            logger,
            "api",
            "debug",
            "Notion response",
            url=self.api_url,
            status_code=response.status_code,
        )

        return self._handle_response(response)

    def _handle_response(self, response: httpx.Response) -> PageCreateResponse:
        """Map a raw response to a PageCreateResponse or raise NotionAPIError."""
        if not response.is_success:
            message = self._parse_error_message(response.text)
            raise NotionAPIError(
                f"HTTP Error {response.status_code}: {message}",
                status_code=response.status_code,
            )

        page = PageCreateResponse.from_response(response.text)
        if not page.is_success:
            raise NotionAPIError("Invalid JSON response", status_code=response.status_code)
        return page

    @staticmethod
    def _parse_error_message(body: str) -> str:
        """Extract the API error message, falling back to 'Unknown error'."""
        try:
            error_body = json.loads(body)
        except ValueError:
            return UNKNOWN_ERROR_MESSAGE
        if not isinstance(error_body, dict):
            return UNKNOWN_ERROR_MESSAGE
        return error_body.get("message") or UNKNOWN_ERROR_MESSAGE


def build_notion_client(token: str, transport: httpx.BaseTransport | None = None) -> NotionClient:
    """Create a client using the endpoint settings from application.yaml."""
    notion = get_app_config().application.notion
    return NotionClient(
        token=token,
        api_url=notion.api_url,
        api_version=notion.api_version,
        timeout=notion.timeout,
        transport=transport,
    )
