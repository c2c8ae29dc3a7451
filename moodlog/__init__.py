"""
Mood Log.

Records a task title and a free-text mood as a new row in a Notion database.

- core/: Configuration, logging, exceptions
- notion/: Page payload schemas, HTTP client, page creation service
- cli/: Argument parsing, console reporting, click entry point
"""

__version__ = "1.0.0"
