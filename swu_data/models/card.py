"""
Canonical card models, flattened out of the upstream records.

These are the entries of cards.json.
"""

from typing import ClassVar, Optional, Set, Tuple

from pydantic import Field

from ..consts import Arena, Aspect, CardStyle, CardType, Rarity
from .base import SwuDataModel


class CardArtDetails(SwuDataModel):
    """
    A single image of a card
    """

    name: str
    url: str


class CardArt(SwuDataModel):
    """
    One distinct rendition of a card; the back is only set for
    double-sided cards
    """

    style: CardStyle
    front: CardArtDetails
    back: Optional[CardArtDetails] = None
    thumbnail: CardArtDetails


class Card(SwuDataModel):
    """
    A card, identified by its set code and collector number.
    art[0] is the primary artwork, followed by any alternate arts.
    """

    _allow_if_none: ClassVar[Set[str]] = {"sub_title", "cost", "hp", "power"}

    set_code: str = Field(alias="set", min_length=1)
    number: int = Field(gt=0)
    rarity: Rarity
    type: CardType
    title: str = Field(min_length=1)
    sub_title: Optional[str] = None
    artist: str
    cost: Optional[int] = Field(default=None, ge=0)
    hp: Optional[int] = Field(default=None, ge=0)
    power: Optional[int] = Field(default=None, ge=0)
    unique: bool
    arena: Optional[Arena] = None
    aspects: Tuple[Aspect, ...] = ()
    traits: Tuple[str, ...] = ()
    horizontal: bool
    art: Tuple[CardArt, ...] = Field(min_length=1)

    def get_key(self) -> Tuple[str, int]:
        """
        Identity of the card across the whole data set
        :return: Tuple of (set code, collector number)
        """
        return self.set_code, self.number
