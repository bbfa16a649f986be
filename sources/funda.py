from models import PropertySource
from sources.base import Source, SourceSelectors

FUNDA = Source(
    name=PropertySource.FUNDA,
    base_url="https://www.funda.nl",
    search_url='https://www.funda.nl/zoeken/huur?selected_area=["amsterdam"]',
    consent_text="Alles accepteren",
    selectors=SourceSelectors(
        listing="div[data-test-id='search-result-item']",
        title="h2[data-test-id='street-name-house-number']",
        price="p[data-test-id='price-rent']",
        location="div[data-test-id='postal-code-city']",
        size="ul li:nth-child(1)",
        rooms="ul li:nth-child(2)",
        link="a[data-test-id='object-image-link']",
        image="img",
    ),
    max_listings=15,
    max_listed_days=14,
)
