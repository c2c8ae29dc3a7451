"""
Notion Page Service.

Builds page requests from configuration and submits them.
"""

from typing import Any

import httpx

from moodlog.core.config import get_app_config, get_notion_credentials, get_settings
from moodlog.core.logging import get_logger
from moodlog.notion.client import build_notion_client
from moodlog.notion.schemas import PageCreateRequest, PageCreateResponse

logger = get_logger(__name__)


def build_page_request(database_id: str | None, title: str, mood: str) -> PageCreateRequest:
    """Build a page request using the column names from application.yaml."""
    properties = get_app_config().application.properties
    return PageCreateRequest.create(
        database_id,
        title,
        mood,
        title_property=properties.title,
        mood_property=properties.mood,
    )


def send_notion(
    title: str,
    mood: str,
    transport: httpx.BaseTransport | None = None,
) -> PageCreateResponse:
    """
    Create a page in the configured Notion database.

    Args:
        title: Page title
        mood: Mood text
        transport: Optional httpx transport, used by tests

    Returns:
        Parsed response holding the new page id

    Raises:
        ConfigurationError: If NOTION_TOKEN or NOTION_DATABASE_ID is unset
        NotionAPIError: If the API rejects the request
        httpx.HTTPError: On transport failure
    """
    token, database_id = get_notion_credentials()
    request = build_page_request(database_id, title, mood)

    logger.info("Creating page", extra={"title": title})

    with build_notion_client(token, transport=transport) as client:
        page = client.create_page(request)

    logger.info("Page created", extra={"page_id": page.id})
    return page


def create_request_body(title: str, mood: str) -> dict[str, Any]:
    """
    Return the request body for a page, as a plain dict.

    Kept for callers that post the payload themselves. Does not require
    NOTION_TOKEN; a missing NOTION_DATABASE_ID is sent as null.
    """
    database_id = get_settings().notion_database_id
    return build_page_request(database_id, title, mood).to_payload()
