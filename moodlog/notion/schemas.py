"""
Notion Page Schemas.

Pydantic schemas for the page-creation request and response.

The request body has a fixed shape:

    {
      "parent": {"database_id": "<id>"},
      "properties": {
        "<title property>": {"title":     [{"text": {"content": "<title>"}}]},
        "<mood property>":  {"rich_text": [{"text": {"content": "<mood>"}}]}
      }
    }
"""

import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TITLE_PROPERTY = "タスク"
DEFAULT_MOOD_PROPERTY = "お気持ち"


class TextContent(BaseModel):
    """Plain text fragment."""

    content: str

    model_config = ConfigDict(frozen=True)


class RichTextItem(BaseModel):
    """Single rich text element wrapping a text fragment."""

    text: TextContent

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(cls, content: str) -> "RichTextItem":
        return cls(text=TextContent(content=content))


class TitleProperty(BaseModel):
    """Value of a database title column."""

    title: list[RichTextItem]

    model_config = ConfigDict(frozen=True)


class RichTextProperty(BaseModel):
    """Value of a database rich text column."""

    rich_text: list[RichTextItem]

    model_config = ConfigDict(frozen=True)


class DatabaseParent(BaseModel):
    """Parent reference placing the page in a database."""

    database_id: str | None = Field(description="Target database identifier")

    model_config = ConfigDict(frozen=True)


class PageCreateRequest(BaseModel):
    """Schema for creating a new database row (page)."""

    parent: DatabaseParent
    properties: dict[str, TitleProperty | RichTextProperty]

    model_config = ConfigDict(frozen=True)

    @classmethod
    def create(
        cls,
        database_id: str | None,
        title: str,
        mood: str,
        title_property: str = DEFAULT_TITLE_PROPERTY,
        mood_property: str = DEFAULT_MOOD_PROPERTY,
    ) -> "PageCreateRequest":
        """
        Build a request for one row holding a title and a mood.

        Args:
            database_id: Target database identifier
            title: Page title
            mood: Mood text, stored in the rich text column
            title_property: Name of the title column
            mood_property: Name of the mood column
        """
        return cls(
            parent=DatabaseParent(database_id=database_id),
            properties={
                title_property: TitleProperty(title=[RichTextItem.of(title)]),
                mood_property: RichTextProperty(rich_text=[RichTextItem.of(mood)]),
            },
        )

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready request body."""
        return self.model_dump(mode="json")


class PageCreateResponse(BaseModel):
    """Outcome of parsing a page-creation response body."""

    id: str | None = Field(default=None, description="Created page identifier")
    status: Literal["success", "error"]
    body: dict[str, Any] = Field(default_factory=dict, description="Parsed response body")

    @classmethod
    def from_response(cls, body: str) -> "PageCreateResponse":
        """Parse a raw response body. Bodies that are not JSON objects yield an error status."""
        try:
            parsed = json.loads(body)
        except ValueError:
            return cls(id=None, status="error")
        if not isinstance(parsed, dict):
            return cls(id=None, status="error")
        return cls(id=parsed.get("id"), status="success", body=parsed)

    @property
    def is_success(self) -> bool:
        return self.status == "success"
