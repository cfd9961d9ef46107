"""
Upstream data providers
"""

from .abstract import AbstractProvider
from .swu_api import SwuApiProvider

__all__ = [
    "AbstractProvider",
    "SwuApiProvider",
]
