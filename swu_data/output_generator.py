"""
SWU Data output generator to write and read back card files
"""

import json
import logging
import pathlib
from typing import List, Sequence

from pydantic import TypeAdapter, ValidationError

from .errors import MalformedInput
from .models import Card

LOGGER = logging.getLogger(__name__)

_CARDS_ADAPTER: TypeAdapter = TypeAdapter(List[Card])


def write_cards_file(
    write_file: pathlib.Path, cards: Sequence[Card], pretty_print: bool = True
) -> None:
    """
    Dump cards to a JSON array file
    :param write_file: File to dump to
    :param cards: Cards to dump, in order
    :param pretty_print: Pretty or minimal
    """
    write_file.parent.mkdir(parents=True, exist_ok=True)

    with write_file.open("w", encoding="utf-8") as file:
        json.dump(
            obj=[card.to_json() for card in cards],
            fp=file,
            indent=(2 if pretty_print else None),
            ensure_ascii=False,
        )

    LOGGER.info(f"Wrote {len(cards)} cards to {write_file}")


def load_cards_file(read_file: pathlib.Path) -> List[Card]:
    """
    Load cards back from a file written by write_cards_file()
    :param read_file: File to read from
    :return: Cards, in file order
    """
    try:
        with read_file.open(encoding="utf-8") as file:
            contents = json.load(file)
    except OSError as error:
        raise MalformedInput(read_file, f"unable to read: {error}") from error
    except json.JSONDecodeError as error:
        raise MalformedInput(read_file, f"invalid JSON: {error}") from error

    if not isinstance(contents, list):
        raise MalformedInput(read_file, "expected a JSON array of cards")

    try:
        cards: List[Card] = _CARDS_ADAPTER.validate_python(contents)
    except ValidationError as error:
        first_error = error.errors()[0]
        location = ".".join(str(part) for part in first_error["loc"])
        raise MalformedInput(read_file, f"{location}: {first_error['msg']}") from error

    LOGGER.info(f"Loaded {len(cards)} cards from {read_file}")
    return cards
