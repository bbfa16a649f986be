from models import PropertySource
from sources.base import Source, SourceSelectors

PARARIUS = Source(
    name=PropertySource.PARARIUS,
    base_url="https://www.pararius.com",
    search_url="https://www.pararius.com/apartments/amsterdam",
    consent_text="Accept",
    selectors=SourceSelectors(
        listing="section.listing-search-item",
        title="h2.listing-search-item__title a",
        price="div.listing-search-item__price",
        location="div.listing-search-item__sub-title",
        size="li.illustrated-features__item--surface-area",
        rooms="li.illustrated-features__item--number-of-rooms",
        link="a.listing-search-item__link--title",
        image="div.listing-search-item__depiction img",
    ),
    max_listings=20,
    max_listed_days=7,
)
