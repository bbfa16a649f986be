from dataclasses import dataclass
from typing import Optional

from models import PropertySource


@dataclass(frozen=True)
class SourceSelectors:
    listing: str
    title: Optional[str] = None
    price: Optional[str] = None
    location: Optional[str] = None
    size: Optional[str] = None
    rooms: Optional[str] = None
    link: Optional[str] = None
    image: Optional[str] = None


@dataclass(frozen=True)
class Source:
    """
    One listing site: where its search results live and how to read them.

    Selectors are a snapshot of the site's markup at the time of writing.
    When the markup changes fields fall back to their defaults.
    """

    name: PropertySource
    base_url: str
    search_url: str
    consent_text: str
    selectors: SourceSelectors
    max_listings: int
    max_listed_days: int
    default_location: str = "Amsterdam"
    default_size: str = "N/A"

    @property
    def slug(self) -> str:
        return self.name.value.lower()

    def default_title(self, index: int) -> str:
        return f"{self.name.value} Property {index + 1}"
