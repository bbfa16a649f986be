from typing import Dict, Iterable, List

from sources.base import Source
from sources.funda import FUNDA
from sources.pararius import PARARIUS

SOURCES: Dict[str, Source] = {
    PARARIUS.slug: PARARIUS,
    FUNDA.slug: FUNDA,
}


def get_source(name: str) -> Source:
    try:
        return SOURCES[name.strip().lower()]
    except KeyError:
        raise KeyError(f"Unknown source: {name!r} (available: {', '.join(SOURCES)})") from None


def resolve_sources(names: Iterable[str]) -> List[Source]:
    return [get_source(name) for name in names]
