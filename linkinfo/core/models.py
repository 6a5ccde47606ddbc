from typing import Optional, Dict, Any, NamedTuple
from dataclasses import dataclass

from linkinfo.core.enums import ContentKind


class ImageSize(NamedTuple):
    width: float
    height: float


@dataclass(frozen=True)
class TwitterCard:
    """
    Twitter Card tags found on a page. Informational only, never used as a
    fallback for the Open Graph fields.
    """
    card: Optional[str] = None
    site: Optional[str] = None
    creator: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "card": self.card,
            "site": self.site,
            "creator": self.creator,
            "title": self.title,
            "description": self.description,
            "image": self.image
        }


@dataclass(frozen=True, eq=False)
class MetadataRecord:
    """
    Metadata extracted for one URL.

    Two records are the same record when they point at the same resolved
    address, whatever their other fields say.
    """
    original_address: str
    resolved_address: str
    content_type: ContentKind = ContentKind.WEBSITE
    title: Optional[str] = None
    description: Optional[str] = None
    site_name: Optional[str] = None
    author: Optional[str] = None
    keywords: Optional[str] = None
    image_address: Optional[str] = None
    image_size: Optional[ImageSize] = None
    favicon_address: Optional[str] = None
    touch_icon_address: Optional[str] = None
    publish_date: Optional[str] = None
    section: Optional[str] = None
    response_status: Optional[int] = None
    twitter_card: Optional[TwitterCard] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MetadataRecord):
            return NotImplemented
        return self.resolved_address == other.resolved_address

    def __hash__(self) -> int:
        return hash(self.resolved_address)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the record to a dictionary representation"""
        return {
            "original_address": self.original_address,
            "resolved_address": self.resolved_address,
            "content_type": self.content_type.value,
            "title": self.title,
            "description": self.description,
            "site_name": self.site_name,
            "author": self.author,
            "keywords": self.keywords,
            "image_address": self.image_address,
            "image_size": self.image_size._asdict() if self.image_size else None,
            "favicon_address": self.favicon_address,
            "touch_icon_address": self.touch_icon_address,
            "publish_date": self.publish_date,
            "section": self.section,
            "response_status": self.response_status,
            "twitter_card": self.twitter_card.to_dict() if self.twitter_card else None
        }
