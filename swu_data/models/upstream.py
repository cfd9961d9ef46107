"""
Upstream API record models.

The card API wraps every related object in a {"data": {"attributes": ...}}
envelope, and lists of related objects in {"data": [...]}. These models are
the only place that shape is spelled out; the rest of the code base reads
typed attributes instead of unwrapping dictionaries by hand.
"""

from typing import Any, Dict, Generic, List, Optional, TypeVar

from .base import UpstreamModel

A = TypeVar("A")


class Entity(UpstreamModel, Generic[A]):
    """A related object: {"attributes": {...}}"""

    attributes: A


class Relation(UpstreamModel, Generic[A]):
    """A single relation: {"data": {...} | null}"""

    data: Optional[A] = None


class RelationList(UpstreamModel, Generic[A]):
    """A to-many relation: {"data": [...]}"""

    data: List[A]


class NamedAttributes(UpstreamModel):
    """Aspects, traits, arenas and rarities are all identified by name."""

    name: str


class ValueAttributes(UpstreamModel):
    """Card types are identified by value."""

    value: str


class ExpansionAttributes(UpstreamModel):
    """Expansion, aka set."""

    code: str


class ImageAttributes(UpstreamModel):
    """Uploaded image, available in several sizes keyed by format name."""

    formats: Dict[str, Any]


class ImageFormat(UpstreamModel):
    """One size of an uploaded image."""

    url: str
    name: str


class ArtFields(UpstreamModel):
    """Artwork fields shared by a card and each of its variants."""

    art_front: Relation[Entity[ImageAttributes]]
    art_back: Relation[Entity[ImageAttributes]]
    art_thumbnail: Relation[Entity[ImageAttributes]]
    showcase: bool
    hyperspace: bool


class RecordHeaderAttributes(UpstreamModel):
    """Just enough of a record to decide whether it is a standalone card."""

    variant_of: Relation[Dict[str, Any]]
    expansion: Relation[Dict[str, Any]]


class RecordHeader(UpstreamModel):
    """A record, read only as far as its skip conditions."""

    attributes: RecordHeaderAttributes


class CardAttributes(ArtFields):
    """Everything read from a standalone card record."""

    title: str
    subtitle: Optional[str] = None
    artist: str
    card_number: int
    card_count: int
    cost: Optional[int] = None
    hp: Optional[int] = None
    power: Optional[int] = None
    unique: bool
    art_front_horizontal: bool
    type: Relation[Entity[ValueAttributes]]
    rarity: Relation[Entity[NamedAttributes]]
    expansion: Relation[Entity[ExpansionAttributes]]
    aspects: RelationList[Entity[NamedAttributes]]
    aspect_duplicates: RelationList[Entity[NamedAttributes]]
    traits: RelationList[Entity[NamedAttributes]]
    arenas: RelationList[Entity[NamedAttributes]]
    variants: RelationList[Entity[ArtFields]]


class CardRecord(UpstreamModel):
    """A standalone card record."""

    attributes: CardAttributes


class Pagination(UpstreamModel):
    """Page position within the card listing."""

    page_count: int


class PageMeta(UpstreamModel):
    """Metadata accompanying each page."""

    pagination: Pagination


class CardPage(UpstreamModel):
    """One page of the paginated card listing."""

    data: List[Dict[str, Any]]
    meta: PageMeta
