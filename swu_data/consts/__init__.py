"""
SWU Data Constants Module.

Usage:
    from swu_data.consts import Aspect, resolve
"""

from __future__ import annotations

from swu_data.consts.enums import (
	Arena,
	Aspect,
	CardStyle,
	CardType,
	Rarity,
	lookup,
	resolve,
)

__all__ = [
	"Arena",
	"Aspect",
	"CardStyle",
	"CardType",
	"Rarity",
	"lookup",
	"resolve",
]
