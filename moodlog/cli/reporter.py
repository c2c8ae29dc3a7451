"""
Console Reporter.

Turns the outcome of a page creation into one line on stdout.
"""

import click
import httpx

from moodlog.core.exceptions import ApplicationError
from moodlog.core.logging import get_logger, log_with_source
from moodlog.notion.service import send_notion

logger = get_logger(__name__)


def format_success(page_id: str | None) -> str:
    return f"Success! Page created with ID: {page_id or ''}"


def format_failure(message: str) -> str:
    return f"Failed to create page: {message}"


def create_page_and_report(
    title: str,
    mood: str,
    transport: httpx.BaseTransport | None = None,
) -> bool:
    """
    Create the page and print the outcome.

    Returns:
        True if the page was created, False if the call failed.
    """
    try:
        page = send_notion(title, mood, transport=transport)
    except (ApplicationError, httpx.HTTPError) as e:
        log_with_source(logger, "cli", "warning", "Page creation failed", error=str(e))
        click.echo(format_failure(str(e)))
        return False

    click.echo(format_success(page.id))
    return True
