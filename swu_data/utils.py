"""
SWU Data simple utilities
"""

import logging
import os
import time
from typing import Any, Iterable, Mapping, Optional, Sequence, Tuple, TypeVar

from . import constants

T = TypeVar("T")


def init_logger() -> None:
    """
    Initialize the main system logger
    """
    constants.LOG_PATH.mkdir(parents=True, exist_ok=True)

    start_time = time.strftime("%Y-%m-%d_%H.%M.%S")

    logging.basicConfig(
        level=(
            logging.DEBUG
            if os.environ.get("SWU_DATA_DEBUG", "").lower() in ["true", "1"]
            else logging.INFO
        ),
        format="[%(levelname)s] %(asctime)s: %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(
                str(constants.LOG_PATH.joinpath(f"swu_data_{start_time}.log"))
            ),
        ],
    )
    logging.getLogger("urllib3").setLevel(logging.ERROR)


def first_or_none(values: Iterable[T]) -> Optional[T]:
    """
    Grab the first value of an iterable, if there is one
    :param values: Values to look through
    :return: First value or None
    """
    for value in values:
        return value
    return None


def first_present(
    mapping: Mapping[str, Any], keys: Sequence[str]
) -> Optional[Tuple[str, Any]]:
    """
    Find the first key, in order of preference, that exists in a mapping
    :param mapping: Mapping to search
    :param keys: Candidate keys, most preferred first
    :return: Tuple of (key, value) for the winner, or None if no key is present
    """
    return first_or_none((key, mapping[key]) for key in keys if key in mapping)


def get_padded_number(number: int, width: int) -> str:
    """
    Zero pad a collector number
    :param number: Collector number
    :param width: Minimum number of digits
    :return: Padded number, such as "007"
    """
    return str(number).zfill(width)
