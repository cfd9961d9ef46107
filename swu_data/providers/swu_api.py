"""
Star Wars: Unlimited card API 3rd party provider

There is no official API; this is the (unofficial) API backing the
card browser at https://starwarsunlimited.com/cards
"""
import logging
from typing import Any, Dict, Iterator, Optional, Union

from .. import constants
from ..models import CardPage, validate_model
from ..swu_data_config import SwuDataConfig
from .abstract import AbstractProvider

LOGGER = logging.getLogger(__name__)


class SwuApiProvider(AbstractProvider):
    """
    SwuApiProvider container
    """

    endpoint: str
    locale: str
    page_size: int

    def __init__(
        self,
        endpoint: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> None:
        """
        Initializer
        :param endpoint: Card listing URL, defaults to the configured one
        :param page_size: Cards to request per page, defaults to the configured one
        """
        super().__init__(self._build_http_header())
        self.endpoint = endpoint or SwuDataConfig().endpoint
        self.locale = SwuDataConfig().locale
        self.page_size = page_size or SwuDataConfig().page_size

    def _build_http_header(self) -> Dict[str, str]:
        """
        Construct the HTTP header
        :return: HTTP header
        """
        return {"Accept": "application/json"}

    def download(
        self, url: str, params: Optional[Dict[str, Union[str, int]]] = None
    ) -> Any:
        """
        Download content from the card API
        :param url: Download URL
        :param params: Options for URL download
        :return: Decoded JSON response
        """
        return self.get_or_fail(url, params).json()

    def get_page_params(self, page: int) -> Dict[str, Union[str, int]]:
        """
        Query parameters to request a page of cards
        :param page: Page number, starting at 1
        :return: Query parameters
        """
        return {
            "locale": self.locale,
            "sort[0]": constants.CARD_SORT_ORDER,
            "pagination[pageSize]": self.page_size,
            "pagination[page]": page,
        }

    def download_page(self, page: int) -> CardPage:
        """
        Download a single page of cards
        :param page: Page number, starting at 1
        :return: Page of raw card records
        """
        return validate_model(
            CardPage, self.download(self.endpoint, self.get_page_params(page))
        )

    def iterate_raw_cards(self) -> Iterator[Dict[str, Any]]:
        """
        Lazily walk every page of the card listing, yielding each raw
        card record. Each page is only requested once, when needed.
        :return: Raw card records, in listing order
        """
        LOGGER.info(f"Fetching cards from {self.endpoint}")

        page = 1
        while True:
            card_page = self.download_page(page)
            page_count = card_page.meta.pagination.page_count
            LOGGER.info(
                f"Fetched page {page} of {page_count}: got {len(card_page.data)} cards"
            )

            yield from card_page.data

            if page >= page_count:
                break
            page += 1
