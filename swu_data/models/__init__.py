"""
SWU Data models: upstream API records and the canonical card schema.
"""

from .base import SwuDataModel, UpstreamModel, validate_model
from .card import Card, CardArt, CardArtDetails
from .upstream import ArtFields, CardPage, CardRecord, RecordHeader

__all__ = [
    "ArtFields",
    "Card",
    "CardArt",
    "CardArtDetails",
    "CardPage",
    "CardRecord",
    "RecordHeader",
    "SwuDataModel",
    "UpstreamModel",
    "validate_model",
]
