"""System announcements and their banner images."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class AnnouncementBanner:
    """An image shown with an announcement."""

    announcement_id: int
    image_url: str
    id: int = 0
    title: str = ""
    link: str = ""
    sort: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None


@dataclass
class Announcement:
    """An announcement with plain and optional rich (HTML) content."""

    title: str
    content: str
    tag: str
    id: int = 0
    rich_content: str | None = None
    status: int = 0
    is_publish: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None
    banners: list[AnnouncementBanner] = field(default_factory=list)

    def is_published(self) -> bool:
        """Published only when the status is 1 and the publish flag is set."""
        return self.status == 1 and self.is_publish

    def to_response(self) -> dict[str, Any]:
        """Client view; banners become their image URLs, or None if there are none."""
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "rich_content": self.rich_content,
            "tag": self.tag,
            "status": self.status,
            "is_publish": self.is_publish,
            "created_at": self.created_at,
            "banners": [banner.image_url for banner in self.banners] or None,
        }