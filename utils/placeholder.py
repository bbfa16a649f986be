import random
from datetime import date
from typing import List, Optional


class PlaceholderGenerator:
    """Filler values for fields the listing pages do not show."""

    INTERIORS = ("Furnished", "Upholstered", "Shell")
    ENERGY_LABELS = ("A+++", "A++", "A+", "A", "B", "C", "D")
    FEATURES = (
        "Balcony",
        "Garden",
        "Roof terrace",
        "Elevator",
        "Storage room",
        "Dishwasher",
        "Washing machine",
        "Parking",
        "Pets allowed",
        "Bicycle shed",
    )
    MIN_BUILD_YEAR = 1900

    def __init__(self, seed: Optional[int] = None):
        self.random = random.Random(seed)

    def listed_days(self, max_days: int) -> int:
        return self.random.randint(1, max(1, max_days))

    def build_year(self) -> int:
        return self.random.randint(self.MIN_BUILD_YEAR, date.today().year)

    def interior(self) -> str:
        return self.random.choice(self.INTERIORS)

    def energy_label(self) -> str:
        return self.random.choice(self.ENERGY_LABELS)

    def features(self, max_count: int = 4) -> List[str]:
        count = self.random.randint(1, min(max_count, len(self.FEATURES)))
        return self.random.sample(self.FEATURES, count)
