import asyncio

from fakes import FakeElement
from utils.extraction import extract_or_default, read_href


def test_extract_or_default():
    card = FakeElement(children={
        ".title": FakeElement(text="  Singel 10 \n"),
        ".empty": FakeElement(text="   "),
        "a": FakeElement(attrs={"href": "/listing/1"}),
    })

    assert asyncio.run(extract_or_default(card, ".title", "fallback")) == "Singel 10"
    assert asyncio.run(extract_or_default(card, ".empty", "fallback")) == "fallback"
    assert asyncio.run(extract_or_default(card, ".missing", "fallback")) == "fallback"
    assert asyncio.run(extract_or_default(card, None, "fallback")) == "fallback"
    assert asyncio.run(extract_or_default(card, "a", "", read=read_href)) == "/listing/1"
