from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional


class PropertySource(str, Enum):
    PARARIUS = "Pararius"
    FUNDA = "Funda"


def property_type_for_rooms(rooms: int) -> str:
    if rooms <= 1:
        return "Studio"
    if rooms == 2:
        return "Apartment"
    return "House"


@dataclass(frozen=True)
class Property:
    id: str
    title: str
    location: str
    price: int
    size: str
    rooms: int
    property_type: str
    source: PropertySource
    source_url: str
    listed_days: int
    image: str = ""
    images: List[str] = field(default_factory=list)

    # placeholders, not read from the listing page
    build_year: Optional[int] = None
    interior: str = ""
    energy_label: str = ""
    features: List[str] = field(default_factory=list)

    deposit: int = 0
    neighborhood: str = ""
    full_description: str = ""
    scraped_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "location": self.location,
            "price": self.price,
            "size": self.size,
            "rooms": self.rooms,
            "type": self.property_type,
            "source": self.source.value,
            "sourceUrl": self.source_url,
            "listedDays": self.listed_days,
            "image": self.image,
            "images": list(self.images),
            "buildYear": self.build_year,
            "interior": self.interior,
            "energyLabel": self.energy_label,
            "features": list(self.features),
            "deposit": self.deposit,
            "neighborhood": self.neighborhood,
            "fullDescription": self.full_description,
            "scrapedAt": self.scraped_at.isoformat(),
        }
