from playwright.async_api import Error as PlaywrightError, TimeoutError as PlaywrightTimeoutError

PNG_BYTES = b"\x89PNG\r\n\x1a\n"


class FakeElement:
    def __init__(self, text=None, attrs=None, children=None, screenshot_error=None, inner_text_error=None):
        self.text = text
        self.attrs = attrs or {}
        self.children = children or {}
        self.screenshot_error = screenshot_error
        self.inner_text_error = inner_text_error
        self.screenshots = []

    async def query_selector(self, selector):
        return self.children.get(selector)

    async def inner_text(self):
        if self.inner_text_error:
            raise self.inner_text_error
        return self.text or ""

    async def get_attribute(self, name):
        return self.attrs.get(name)

    async def screenshot(self, path=None, **kwargs):
        if self.screenshot_error:
            raise self.screenshot_error
        with open(path, "wb") as f:
            f.write(PNG_BYTES)
        self.screenshots.append(path)
        return PNG_BYTES


class FakePage:
    def __init__(self, cards=None, goto_error=None, has_consent=False, consent_error=None):
        self.cards = list(cards or [])
        self.goto_error = goto_error
        self.has_consent = has_consent
        self.consent_error = consent_error
        self.visited = []
        self.clicked = []
        self.waited = []
        self.closed = False

    async def goto(self, url, wait_until=None, timeout=None):
        self.visited.append((url, wait_until, timeout))
        if self.goto_error:
            raise self.goto_error

    async def click(self, selector, timeout=None):
        if self.consent_error:
            raise self.consent_error
        if not self.has_consent:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for {selector}")
        self.clicked.append(selector)

    async def wait_for_selector(self, selector, state=None, timeout=None):
        self.waited.append((selector, state, timeout))
        if not self.cards:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for {selector}")
        return self.cards[0]

    async def query_selector_all(self, selector):
        return list(self.cards)

    def is_closed(self):
        return self.closed

    async def close(self):
        self.closed = True


class FakeContext:
    def __init__(self, pages):
        self.pages = list(pages)
        self.opened = []
        self.closed = False

    async def new_page(self):
        if self.closed:
            raise PlaywrightError("Target page, context or browser has been closed")
        page = self.pages.pop(0)
        self.opened.append(page)
        return page

    async def close(self):
        self.closed = True


class FakeBrowser:
    def __init__(self):
        self.close_calls = 0

    async def close(self):
        self.close_calls += 1


def make_card(selectors, index=0, title=None, price=None, location=None, size=None, rooms=None,
              href=None, image=True, screenshot_error=None):
    children = {}
    if title is not None:
        children[selectors.title] = FakeElement(text=title)
    if price is not None:
        children[selectors.price] = FakeElement(text=price)
    if location is not None:
        children[selectors.location] = FakeElement(text=location)
    if size is not None:
        children[selectors.size] = FakeElement(text=size)
    if rooms is not None:
        children[selectors.rooms] = FakeElement(text=rooms)
    if href is not None:
        children[selectors.link] = FakeElement(attrs={"href": href})
    if image:
        children[selectors.image] = FakeElement(screenshot_error=screenshot_error)
    return FakeElement(children=children)


def install_session(scraper, pages):
    """Give the scraper an already running fake session."""
    browser = FakeBrowser()
    context = FakeContext(pages)
    scraper.browser = browser
    scraper.context = context
    return browser, context
