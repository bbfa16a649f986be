"""
Text helpers for listing cards: price and room parsing, URL resolution and
the small templated fields built from already extracted values.
"""

import re
from typing import Optional
from urllib.parse import urljoin

DEFAULT_ROOMS = 2

_NUMBER_RE = re.compile(r"\d[\d.,]*")
_ROOMS_RE = re.compile(r"(\d+)\s*(?:rooms?|kamers?|bedrooms?|slaapkamers?)\b", re.IGNORECASE)
_BARE_NUMBER_RE = re.compile(r"^\s*(\d+)\s*$")


def clean_text(text: Optional[str]) -> str:
    if not text:
        return ""
    return " ".join(text.split())


def parse_price(text: Optional[str]) -> int:
    """
    Pull the first amount out of a price label.

    Examples:
        "€1,250 per month" -> 1250
        "€ 1.250,- /mnd" -> 1250
        "Price on request" -> 0
    """
    if not text:
        return 0
    match = _NUMBER_RE.search(text)
    if not match:
        return 0
    number = match.group(0).rstrip(".,")
    # cents are dropped: "1.250,50" -> "1.250"
    number = re.sub(r"[.,]\d{2}$", "", number)
    digits = re.sub(r"\D", "", number)
    return int(digits) if digits else 0


def parse_rooms(text: Optional[str], default: int = DEFAULT_ROOMS) -> int:
    if not text:
        return default
    match = _ROOMS_RE.search(text) or _BARE_NUMBER_RE.match(text)
    if not match:
        return default
    return int(match.group(1))


def resolve_url(href: Optional[str], base_url: str, default: str = "") -> str:
    if not href:
        return default
    href = href.strip()
    if href.startswith(("http://", "https://")):
        return href
    return urljoin(base_url, href)


def extract_neighborhood(location: str) -> str:
    """
    "1012 AB Amsterdam (Centrum)" -> "Centrum"
    "1016 HJ Amsterdam" -> "Amsterdam"
    """
    location = clean_text(location)
    if not location:
        return ""
    district = re.search(r"\(([^)]+)\)", location)
    if district:
        return district.group(1).strip()
    without_postcode = re.sub(r"^\d{4}\s?[A-Z]{2}\s+", "", location)
    return without_postcode.split(",")[-1].strip() or location


def describe_property(title: str, property_type: str, size: str, rooms: int, location: str, source: str) -> str:
    size_part = f" of {size}" if size and size != "N/A" else ""
    room_word = "room" if rooms == 1 else "rooms"
    article = "an" if property_type[:1].lower() in "aeiou" else "a"
    return (
        f"{title} is {article} {property_type.lower()}{size_part} with {rooms} {room_word} "
        f"in {location}, listed on {source}."
    )
