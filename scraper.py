import asyncio
import logging
import os
import time
from typing import List, Optional, Sequence

from playwright.async_api import async_playwright, Browser, BrowserContext, Page, Error as PlaywrightError, TimeoutError as PlaywrightTimeoutError

from config import Config
from models import Property, property_type_for_rooms
from sources.base import Source
from sources.registry import resolve_sources
from utils.extraction import extract_or_default, read_href
from utils.placeholder import PlaceholderGenerator
from utils.storage import Storage
from utils.text_parser import describe_property, extract_neighborhood, parse_price, parse_rooms, resolve_url

logger = logging.getLogger(__name__)

BROWSER_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-blink-features=AutomationControlled",
]


class ScreenshotScraper:
    """
    Scrapes listing cards from the configured sources and screenshots their
    thumbnails.

    The browser session is created lazily and reused for every source of a
    run. Use ``async with`` or ``scrape_all()`` so it is always closed.
    """

    def __init__(
        self,
        config: Config,
        sources: Optional[Sequence[Source]] = None,
        placeholders: Optional[PlaceholderGenerator] = None,
        storage: Optional[Storage] = None,
    ):
        self.config = config
        self.sources = list(sources) if sources is not None else resolve_sources(config.enabled_sources)
        self.placeholders = placeholders or PlaceholderGenerator(config.placeholder_seed)
        self.storage = storage or Storage(config.output_dir, config.screenshot_dir, config.screenshot_url_prefix)
        self.playwright = None
        self.browser: Optional[Browser] = None
        self.context: Optional[BrowserContext] = None

    async def __aenter__(self):
        await self.init_browser()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close_browser()

    @property
    def is_running(self) -> bool:
        return self.browser is not None

    async def init_browser(self) -> None:
        if self.browser is not None:
            return

        logger.info("Launching browser (headless=%s)", self.config.headless)
        try:
            self.playwright = await async_playwright().start()
            self.browser = await self.playwright.chromium.launch(
                headless=self.config.headless,
                args=BROWSER_ARGS,
            )
            self.context = await self.browser.new_context(
                user_agent=self.config.user_agent,
                viewport={"width": 1920, "height": 1080},
                locale="nl-NL",
            )
        except Exception:
            logger.exception("Browser launch failed")
            await self.close_browser()
            raise
        logger.info("Browser ready")

    async def close_browser(self) -> None:
        if self.context is not None:
            try:
                await self.context.close()
            except Exception as e:
                logger.warning("Failed to close browser context: %s", e)
            self.context = None

        if self.browser is not None:
            try:
                await self.browser.close()
            except Exception as e:
                logger.warning("Failed to close browser: %s", e)
            self.browser = None
            logger.info("Browser closed")

        if self.playwright is not None:
            try:
                await self.playwright.stop()
            except Exception as e:
                logger.warning("Failed to stop Playwright: %s", e)
            self.playwright = None

    async def _new_page(self) -> Page:
        return await self.context.new_page()

    async def scrape(self, source: Source) -> List[Property]:
        await self.init_browser()

        page = None
        try:
            page = await self._new_page()
            return await self._scrape_page(page, source)
        except PlaywrightTimeoutError as e:
            logger.warning("[%s] Timed out, no listings from this source: %s", source.slug, e)
            return []
        except Exception as e:
            logger.error("[%s] Scraping failed, no listings from this source: %s", source.slug, e)
            return []
        finally:
            if page is not None:
                try:
                    if not page.is_closed():
                        await page.close()
                except Exception as e:
                    logger.debug("[%s] Page close failed: %s", source.slug, e)

    async def scrape_all(self) -> List[Property]:
        try:
            await self.init_browser()
            properties: List[Property] = []
            for source in self.sources:
                found = await self.scrape(source)
                logger.info("[%s] %d listings", source.slug, len(found))
                properties.extend(found)
            properties.sort(key=lambda p: p.listed_days)
            logger.info("Collected %d listings from %d sources", len(properties), len(self.sources))
            return properties
        finally:
            await self.close_browser()

    async def _scrape_page(self, page: Page, source: Source) -> List[Property]:
        logger.info("[%s] Loading %s", source.slug, source.search_url)
        await page.goto(
            source.search_url,
            wait_until="networkidle",
            timeout=Config.timeout_ms(self.config.navigation_timeout),
        )

        await self._dismiss_cookie_consent(page, source)

        await page.wait_for_selector(
            source.selectors.listing,
            state="attached",
            timeout=Config.timeout_ms(self.config.listing_timeout),
        )
        cards = await page.query_selector_all(source.selectors.listing)
        cards = cards[: source.max_listings]
        logger.info("[%s] Processing %d listing cards", source.slug, len(cards))

        self.storage.ensure_screenshot_dir()
        timestamp = int(time.time() * 1000)
        items: List[Property] = []

        for index, card in enumerate(cards):
            try:
                items.append(await self._extract_property(card, source, index, timestamp))
            except Exception as e:
                logger.warning("[%s] Skipping listing #%d: %s", source.slug, index + 1, e)

            if index < len(cards) - 1 and self.config.element_delay > 0:
                await asyncio.sleep(self.config.element_delay)

        return items

    async def _dismiss_cookie_consent(self, page: Page, source: Source) -> bool:
        if not source.consent_text:
            return False
        try:
            await page.click(
                f"button:has-text('{source.consent_text}')",
                timeout=Config.timeout_ms(self.config.consent_timeout),
            )
            logger.debug("[%s] Cookie consent dismissed", source.slug)
            return True
        except PlaywrightTimeoutError:
            logger.debug("[%s] No cookie consent dialog", source.slug)
        except PlaywrightError as e:
            logger.debug("[%s] Cookie consent click failed: %s", source.slug, e)
        return False

    async def _capture_screenshot(self, card, source: Source, index: int, timestamp: int) -> str:
        if not source.selectors.image:
            return ""
        try:
            image_el = await card.query_selector(source.selectors.image)
            if image_el is None:
                return ""
            path, public_path = self.storage.screenshot_path(source.slug, index, timestamp)
            await image_el.screenshot(path=path)
            if not os.path.exists(path):
                logger.warning("[%s] Screenshot for listing #%d was not written", source.slug, index + 1)
                return ""
            return public_path
        except Exception as e:
            logger.warning("[%s] Screenshot failed for listing #%d: %s", source.slug, index + 1, e)
            return ""

    async def _extract_property(self, card, source: Source, index: int, timestamp: int) -> Property:
        selectors = source.selectors

        title = await extract_or_default(card, selectors.title, source.default_title(index))
        price_text = await extract_or_default(card, selectors.price, "")
        location = await extract_or_default(card, selectors.location, source.default_location)
        size = await extract_or_default(card, selectors.size, source.default_size)
        rooms_text = await extract_or_default(card, selectors.rooms, "")
        href = await extract_or_default(card, selectors.link, "", read=read_href)

        price = parse_price(price_text)
        rooms = parse_rooms(rooms_text)
        property_type = property_type_for_rooms(rooms)
        image = await self._capture_screenshot(card, source, index, timestamp)

        return Property(
            id=f"{source.slug}-{timestamp}-{index}",
            title=title,
            location=location,
            price=price,
            size=size,
            rooms=rooms,
            property_type=property_type,
            source=source.name,
            source_url=resolve_url(href, source.base_url, default=source.search_url),
            listed_days=self.placeholders.listed_days(source.max_listed_days),
            image=image,
            images=[image] if image else [],
            build_year=self.placeholders.build_year(),
            interior=self.placeholders.interior(),
            energy_label=self.placeholders.energy_label(),
            features=self.placeholders.features(),
            deposit=price * 2,
            neighborhood=extract_neighborhood(location),
            full_description=describe_property(title, property_type, size, rooms, location, source.name.value),
        )
