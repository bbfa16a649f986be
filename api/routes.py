import asyncio
from typing import Callable, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from config import Config
from scraper import ScreenshotScraper
from sources.base import Source
from sources.registry import get_source, resolve_sources
from api.schemas import PropertyListResponse, PropertyResponse, SourceResponse

router = APIRouter()

ScraperFactory = Callable[[List[Source]], ScreenshotScraper]

# one browser session at a time
_scrape_lock = asyncio.Lock()


def get_config() -> Config:
    return Config.from_env()


def get_scraper_factory(config: Config = Depends(get_config)) -> ScraperFactory:
    def factory(sources: List[Source]) -> ScreenshotScraper:
        return ScreenshotScraper(config, sources=sources)
    return factory


@router.get("/sources", response_model=List[SourceResponse])
async def list_sources(config: Config = Depends(get_config)):
    return [
        SourceResponse(
            name=source.name.value,
            slug=source.slug,
            base_url=source.base_url,
            search_url=source.search_url,
            max_listings=source.max_listings,
        )
        for source in resolve_sources(config.enabled_sources)
    ]


@router.get("/properties", response_model=PropertyListResponse)
async def list_properties(
    source: Optional[str] = Query(None, description="Scrape only this source, e.g. 'pararius'"),
    config: Config = Depends(get_config),
    scraper_factory: ScraperFactory = Depends(get_scraper_factory),
):
    """
    Runs a scraping pass and returns the listings sorted by ``listedDays``.

    Screenshots referenced by ``image`` are served from the static
    screenshot directory.
    """
    if source:
        try:
            sources = [get_source(source)]
        except KeyError:
            raise HTTPException(status_code=404, detail=f"Unknown source: {source}")
    else:
        sources = resolve_sources(config.enabled_sources)

    async with _scrape_lock:
        properties = await scraper_factory(sources).scrape_all()

    return PropertyListResponse(
        results=[PropertyResponse.from_property(p) for p in properties],
        total=len(properties),
    )
