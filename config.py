from dataclasses import dataclass, field
from typing import List, Optional
import os

from dotenv import load_dotenv


def _env_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Config:

    screenshot_dir: str = os.path.join("public", "screenshots")
    screenshot_url_prefix: str = "/screenshots"

    headless: bool = True
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )

    # seconds
    navigation_timeout: int = 30
    consent_timeout: int = 3
    listing_timeout: int = 10
    element_delay: float = 0.5

    enabled_sources: List[str] = field(default_factory=lambda: ["pararius", "funda"])

    placeholder_seed: Optional[int] = None

    output_dir: str = "output"
    save_json: bool = True
    save_csv: bool = True

    log_level: str = "INFO"
    log_file: Optional[str] = "scraper.log"

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()
        config = cls()

        screenshot_dir = os.getenv("SCREENSHOT_DIR")
        if screenshot_dir:
            config.screenshot_dir = screenshot_dir

        url_prefix = os.getenv("SCREENSHOT_URL_PREFIX")
        if url_prefix:
            if not url_prefix.strip("/"):
                raise ValueError("SCREENSHOT_URL_PREFIX must name a sub-path such as /screenshots")
            config.screenshot_url_prefix = "/" + url_prefix.strip("/")

        headless = os.getenv("HEADLESS")
        if headless:
            config.headless = _env_bool(headless)

        user_agent = os.getenv("USER_AGENT")
        if user_agent:
            config.user_agent = user_agent

        for name in ("navigation_timeout", "consent_timeout", "listing_timeout"):
            value = os.getenv(name.upper())
            if value:
                setattr(config, name, int(value))

        delay = os.getenv("ELEMENT_DELAY")
        if delay:
            config.element_delay = float(delay)

        sources_env = os.getenv("ENABLED_SOURCES")
        if sources_env:
            config.enabled_sources = [s.strip().lower() for s in sources_env.split(",") if s.strip()]

        seed = os.getenv("PLACEHOLDER_SEED")
        if seed:
            config.placeholder_seed = int(seed)

        output_dir = os.getenv("OUTPUT_DIR")
        if output_dir:
            config.output_dir = output_dir

        save_json = os.getenv("SAVE_JSON")
        if save_json:
            config.save_json = _env_bool(save_json)

        save_csv = os.getenv("SAVE_CSV")
        if save_csv:
            config.save_csv = _env_bool(save_csv)

        log_level = os.getenv("LOG_LEVEL")
        if log_level:
            config.log_level = log_level.upper()

        log_file = os.getenv("LOG_FILE")
        if log_file is not None:
            config.log_file = log_file or None

        return config

    @staticmethod
    def timeout_ms(seconds: float) -> int:
        return int(seconds * 1000)
