"""
Card classification constants.

Closed sets of values the upstream API uses to classify cards, and the
resolvers that map its free-text labels onto them.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Type, TypeVar

from ..errors import UnknownEnumValue

E = TypeVar("E", bound=Enum)


class CardType(Enum):
    """Card types."""
    BASE = "base"
    EVENT = "event"
    LEADER = "leader"
    UNIT = "unit"
    UPGRADE = "upgrade"


class Aspect(Enum):
    """Aspects, the card's gameplay identity icons."""
    AGGRESSION = "aggression"
    COMMAND = "command"
    CUNNING = "cunning"
    HEROISM = "heroism"
    VILLAINY = "villainy"
    VIGILANCE = "vigilance"


class Arena(Enum):
    """Arenas a unit can be deployed to."""
    GROUND = "ground"
    SPACE = "space"


class Rarity(Enum):
    """Printed rarities."""
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    LEGENDARY = "legendary"
    SPECIAL = "special"


class CardStyle(Enum):
    """Visual treatment of a single artwork."""
    STANDARD = "standard"
    HYPERSPACE = "hyperspace"
    SHOWCASE = "showcase"


def lookup(enum_type: Type[E], label: str) -> Optional[E]:
    """
    Find the member of an enumeration matching an upstream label
    :param enum_type: Enumeration to search
    :param label: Upstream label, in any case
    :return: Matching member, or None if the label is not recognized
    """
    try:
        return enum_type(label.lower())
    except ValueError:
        return None


def resolve(enum_type: Type[E], label: str) -> E:
    """
    Find the member of an enumeration matching an upstream label, failing
    loudly when upstream introduces a label we do not know about
    :param enum_type: Enumeration to search
    :param label: Upstream label, in any case
    :return: Matching member
    """
    member = lookup(enum_type, label)
    if member is None:
        raise UnknownEnumValue(enum_type.__name__, label)
    return member
