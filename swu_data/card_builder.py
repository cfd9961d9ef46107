"""
Construct canonical cards from upstream API records
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

from . import constants
from .consts import Arena, Aspect, CardStyle, CardType, Rarity, resolve
from .errors import DuplicateCard, MissingRequiredField, UnknownArtFormat
from .models import (
    ArtFields,
    Card,
    CardArt,
    CardArtDetails,
    CardRecord,
    RecordHeader,
    validate_model,
)
from .models.upstream import Entity, ImageAttributes, ImageFormat, Relation
from .utils import first_or_none, first_present, get_padded_number

LOGGER = logging.getLogger(__name__)


def parse_art_details(
    image: Relation[Entity[ImageAttributes]],
) -> Optional[CardArtDetails]:
    """
    Pick the preferred size of an uploaded image
    :param image: Image relation from upstream
    :return: Image details, or None if no image was uploaded
    """
    if image.data is None:
        return None

    formats = image.data.attributes.formats
    preferred = first_present(formats, constants.ART_FORMAT_PREFERENCE)
    if preferred is None:
        raise UnknownArtFormat(formats.keys())

    format_name, format_fields = preferred
    image_format = validate_model(ImageFormat, format_fields)
    LOGGER.debug(f"Using {format_name} format for {image_format.name}")

    return CardArtDetails(name=image_format.name, url=image_format.url)


def get_card_style(art_fields: ArtFields) -> CardStyle:
    """
    Determine the art style; showcase takes precedence over hyperspace
    :param art_fields: Artwork fields of a card or variant
    :return: Card style
    """
    if art_fields.showcase:
        return CardStyle.SHOWCASE
    if art_fields.hyperspace:
        return CardStyle.HYPERSPACE
    return CardStyle.STANDARD


def parse_art(art_fields: ArtFields) -> CardArt:
    """
    Build the artwork for a card, or one of its variants
    :param art_fields: Artwork fields of a card or variant
    :return: Card artwork
    """
    front = parse_art_details(art_fields.art_front)
    if front is None:
        raise MissingRequiredField("artFront.data", "front art is required")

    thumbnail = parse_art_details(art_fields.art_thumbnail)
    if thumbnail is None:
        raise MissingRequiredField("artThumbnail.data", "thumbnail is required")

    return CardArt(
        style=get_card_style(art_fields),
        front=front,
        back=parse_art_details(art_fields.art_back),
        thumbnail=thumbnail,
    )


def is_standalone_card(raw_card: Dict[str, Any]) -> bool:
    """
    Variants live inside their parent's art list, and records without
    an expansion are unreleased drafts. Neither become cards.
    :param raw_card: Raw record from upstream
    :return: If the record should become a card
    """
    header = validate_model(RecordHeader, raw_card).attributes
    return header.variant_of.data is None and header.expansion.data is not None


def build_card(raw_card: Dict[str, Any]) -> Optional[Card]:
    """
    Normalize a single upstream record into a card
    :param raw_card: Raw record from upstream
    :return: Card, or None if the record is not a standalone card
    """
    if not is_standalone_card(raw_card):
        return None

    attributes = validate_model(CardRecord, raw_card).attributes

    # is_standalone_card() already established these are present
    expansion = attributes.expansion.data
    if expansion is None:
        raise MissingRequiredField("expansion.data")
    if attributes.type.data is None:
        raise MissingRequiredField("type.data")
    if attributes.rarity.data is None:
        raise MissingRequiredField("rarity.data")

    set_code = expansion.attributes.code.lower()
    number = get_padded_number(
        attributes.card_number, len(str(attributes.card_count))
    )
    LOGGER.info(f"{set_code} #{number}/{attributes.card_count}: {attributes.title}")

    aspects = [
        resolve(Aspect, aspect.attributes.name)
        for aspect in attributes.aspects.data + attributes.aspect_duplicates.data
    ]

    arena_entity = first_or_none(attributes.arenas.data)
    arena = (
        resolve(Arena, arena_entity.attributes.name) if arena_entity else None
    )

    art = [parse_art(attributes)]
    art.extend(parse_art(variant.attributes) for variant in attributes.variants.data)

    return validate_model(
        Card,
        {
            "set": set_code,
            "number": attributes.card_number,
            "rarity": resolve(Rarity, attributes.rarity.data.attributes.name),
            "type": resolve(CardType, attributes.type.data.attributes.value),
            "title": attributes.title,
            "sub_title": attributes.subtitle,
            "artist": attributes.artist,
            "cost": attributes.cost,
            "hp": attributes.hp,
            "power": attributes.power,
            "unique": attributes.unique,
            "arena": arena,
            "aspects": aspects,
            "traits": [trait.attributes.name.lower() for trait in attributes.traits.data],
            "horizontal": attributes.art_front_horizontal,
            "art": art,
        },
    )


def build_cards(raw_cards: Iterable[Dict[str, Any]]) -> List[Card]:
    """
    Normalize every upstream record, in the order given
    :param raw_cards: Raw records from upstream, consumed once
    :return: Cards, one per standalone record
    """
    cards: List[Card] = []
    seen_keys: Set[Tuple[str, int]] = set()
    skipped = 0

    for raw_card in raw_cards:
        card = build_card(raw_card)
        if card is None:
            skipped += 1
            continue

        if card.get_key() in seen_keys:
            raise DuplicateCard(*card.get_key())
        seen_keys.add(card.get_key())
        cards.append(card)

    LOGGER.info(
        f"Built {len(cards)} cards ({skipped} variant or unreleased records skipped)"
    )
    return cards
