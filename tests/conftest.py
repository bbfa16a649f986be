import pytest

from config import Config
from scraper import ScreenshotScraper
from sources.funda import FUNDA
from sources.pararius import PARARIUS
from utils.placeholder import PlaceholderGenerator
from utils.storage import Storage


@pytest.fixture
def config(tmp_path):
    return Config(
        screenshot_dir=str(tmp_path / "public" / "screenshots"),
        output_dir=str(tmp_path / "output"),
        element_delay=0,
        placeholder_seed=42,
        log_file=None,
    )


@pytest.fixture
def storage(config):
    return Storage(config.output_dir, config.screenshot_dir, config.screenshot_url_prefix)


@pytest.fixture
def scraper(config, storage):
    return ScreenshotScraper(
        config,
        sources=[PARARIUS, FUNDA],
        placeholders=PlaceholderGenerator(seed=42),
        storage=storage,
    )
