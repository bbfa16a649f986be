import asyncio
import logging
import sys
from datetime import datetime
from typing import List

from config import Config
from models import Property
from scraper import ScreenshotScraper
from utils.storage import Storage

logger = logging.getLogger(__name__)


def setup_logging(config: Config) -> None:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )
    logging.getLogger("asyncio").setLevel(logging.CRITICAL)
    logging.getLogger("playwright").setLevel(logging.ERROR)


async def main_async(config: Config) -> List[Property]:
    storage = Storage(config.output_dir, config.screenshot_dir, config.screenshot_url_prefix)
    scraper = ScreenshotScraper(config, storage=storage)

    properties = await scraper.scrape_all()

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    if config.save_json:
        json_path = storage.save_json(properties, f"properties_{ts}.json")
        logger.info("Saved JSON: %s", json_path)
    if config.save_csv:
        csv_path = storage.save_csv(properties, f"properties_{ts}.csv")
        logger.info("Saved CSV: %s", csv_path)
    return properties


def main() -> None:
    config = Config.from_env()
    setup_logging(config)

    try:
        properties = asyncio.run(main_async(config))
    except KeyboardInterrupt:
        logger.info("Interrupted")
        sys.exit(130)
    except Exception:
        logger.exception("Scraping run failed")
        sys.exit(1)

    logger.info("Done: %d listings", len(properties))


if __name__ == "__main__":
    main()
