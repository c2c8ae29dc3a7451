"""
Mood Log CLI.

Creates one row in the configured Notion database from a title and a mood.

Usage:
    moodlog --help
    moodlog 今日のタスク とても 疲れた
    moodlog "会議　終了" 長かった --verbose
    python cli.py タスク完了 満足 --debug
"""

import sys

import click
import structlog

from moodlog.cli.arguments import parse_arguments, validate_arguments
from moodlog.cli.reporter import create_page_and_report
from moodlog.core.config import validate_project_root
from moodlog.core.exceptions import ArgumentValidationError
from moodlog.core.logging import get_logger, setup_logging


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("words", nargs=-1, type=click.UNPROCESSED)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output (INFO level logging).",
)
@click.option(
    "--debug", "-d",
    is_flag=True,
    help="Enable debug output (DEBUG level logging).",
)
def main(words: tuple[str, ...], verbose: bool, debug: bool) -> None:
    """
    Record a task title and mood in Notion.

    The first word is the title. All remaining words are joined, without
    spaces, into the mood. Half-width and full-width spaces both separate
    words. Words starting with "-" that are not options, such as "-_-",
    are kept as words. Put "--" before the words to keep "-v" or "-d"
    literally.

    \b
    Examples:
        moodlog 今日のタスク とても 疲れた
        moodlog "プロジェクト完了　やりがい があった"
        moodlog -- 会議 -v

    \b
    Environment:
        NOTION_TOKEN         Notion integration token
        NOTION_DATABASE_ID   Target database id
    """
    validate_project_root()

    if debug:
        log_level = "DEBUG"
    elif verbose:
        log_level = "INFO"
    else:
        log_level = "WARNING"

    setup_logging(level=log_level)

    structlog.contextvars.bind_contextvars(source="cli")

    logger = get_logger(__name__)

    logger.debug("CLI invoked", extra={"word_count": len(words), "log_level": log_level})

    try:
        title, mood = validate_arguments(parse_arguments(words))
    except ArgumentValidationError as e:
        raise click.UsageError(e.message) from e

    if not create_page_and_report(title, mood):
        sys.exit(1)


if __name__ == "__main__":
    main()
