from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PropertyResponse(BaseModel):
    id: str
    title: str
    location: str
    price: int
    size: str
    rooms: int
    property_type: str = Field(alias="type")
    source: str
    source_url: str
    listed_days: int
    image: str = ""
    images: List[str] = []
    build_year: Optional[int] = None
    interior: str = ""
    energy_label: str = ""
    features: List[str] = []
    deposit: int = 0
    neighborhood: str = ""
    full_description: str = ""
    scraped_at: datetime

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_property(cls, prop):
        return cls.model_validate(prop.to_dict())


class PropertyListResponse(BaseModel):
    results: List[PropertyResponse]
    total: int


class SourceResponse(BaseModel):
    name: str
    slug: str
    base_url: str
    search_url: str
    max_listings: int

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
