"""
API for how providers need to interact with other classes
"""
import abc
import logging
from typing import Any, Dict, Optional, Union

import requests
import requests_cache

from ..errors import TransportFailure
from ..swu_data_config import SwuDataConfig
from ..retryable_session import retryable_session

LOGGER = logging.getLogger(__name__)


class AbstractProvider(abc.ABC):
    """
    Abstract class to indicate what other providers should provide
    """

    session: Union[requests.Session, requests_cache.CachedSession]

    def __init__(self, headers: Dict[str, str]) -> None:
        super().__init__()
        self.session = retryable_session(self.get_class_name())
        self.session.headers.update(headers)

    # Abstract Methods
    @abc.abstractmethod
    def _build_http_header(self) -> Dict[str, str]:
        """
        Construct the HTTP header
        :return: HTTP header
        """

    @abc.abstractmethod
    def download(
        self, url: str, params: Optional[Dict[str, Union[str, int]]] = None
    ) -> Any:
        """
        Download an object from a service
        :param url: URL to download content from
        :param params: Options to give to the GET request
        """

    # Class Methods
    @classmethod
    def get_class_name(cls) -> str:
        """
        Get the name of the calling class
        :return: Calling class name
        """
        return cls.__name__

    @staticmethod
    def log_download(response: Any) -> None:
        """
        Log how the URL was acquired
        :param response: Response from Server
        """
        from_cache = (
            getattr(response, "from_cache", False)
            if SwuDataConfig().use_cache
            else False
        )
        LOGGER.debug(f"Downloaded {response.url} (Cache = {from_cache})")

    def get_or_fail(
        self, url: str, params: Optional[Dict[str, Union[str, int]]] = None
    ) -> requests.Response:
        """
        GET a URL, failing fast on anything but a 200
        :param url: URL to download content from
        :param params: Options to give to the GET request
        :return: Successful response
        """
        response = self.session.get(url, params=params)
        self.log_download(response)
        if response.status_code != 200:
            raise TransportFailure(response.url, response.reason)
        return response
