"""
Retryable Session to download content
"""
import functools
from typing import Union

import requests
import requests.adapters
import requests_cache
import urllib3

from . import constants
from .swu_data_config import SwuDataConfig


def retryable_session(
    cache_name: str = "default",
    retries: int = 3,
) -> Union[requests.Session, requests_cache.CachedSession]:
    """
    Session with requests to allow for re-attempts at downloading missing data.
    Only connection level failures are retried; any HTTP error status is left
    for the caller to fail on.
    :param cache_name: Name of the on-disk cache, when caching is enabled
    :param retries: How many retries to attempt
    :return: Session that does the downloading
    """
    session: Union[requests.Session, requests_cache.CachedSession]

    if SwuDataConfig().use_cache:
        constants.CACHE_PATH.mkdir(parents=True, exist_ok=True)
        session = requests_cache.CachedSession(
            cache_name=str(constants.CACHE_PATH.joinpath(cache_name)),
            expire_after=requests_cache.NEVER_EXPIRE,
            allowable_codes=(200,),
        )
    else:
        session = requests.Session()

    retry = urllib3.util.retry.Retry(
        total=retries,
        read=retries,
        connect=retries,
        backoff_factor=0.3,
    )

    adapter = requests.adapters.HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.request = functools.partial(session.request, timeout=30)  # type: ignore

    session.headers.update(
        {"User-Agent": f"swu_data/{SwuDataConfig().swu_data_version}"}
    )
    return session
