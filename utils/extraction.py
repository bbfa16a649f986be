from typing import Any, Awaitable, Callable, Optional

from utils.text_parser import clean_text

Reader = Callable[[Any], Awaitable[Optional[str]]]


async def read_text(element) -> Optional[str]:
    return await element.inner_text()


async def read_href(element) -> Optional[str]:
    return await element.get_attribute("href")


async def extract_or_default(card, selector: Optional[str], default: str, read: Reader = read_text) -> str:
    """
    Read one optional field of a listing card.

    A missing selector, an element that is not on the card or an empty value
    all give back ``default``. Errors raised by the browser are not swallowed
    here; the caller decides whether the whole card is skipped.
    """
    if not selector:
        return default
    element = await card.query_selector(selector)
    if element is None:
        return default
    value = clean_text(await read(element))
    return value or default
