"""Pytest configuration and fixtures for SWU Data tests."""

import copy
import json
from pathlib import Path
from typing import Any, Callable, Dict, Generator, List, Optional

import pytest
import requests_cache

from swu_data.swu_data_config import SwuDataConfig

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "swu"


def load_fixture(name: str) -> Dict[str, Any]:
    """Load a JSON fixture file and return parsed data."""
    return json.loads((FIXTURES_DIR / f"{name}.json").read_text())


@pytest.fixture(autouse=True)
def no_cache(monkeypatch: pytest.MonkeyPatch) -> None:
    """Never read or write the on-disk response cache unless a test asks to."""
    monkeypatch.setattr(SwuDataConfig(), "use_cache", False)


@pytest.fixture
def disable_cache() -> Generator[None, None, None]:
    """Disable any globally installed requests-cache."""
    with requests_cache.disabled():
        yield


@pytest.fixture
def boba_fett() -> Dict[str, Any]:
    """A plain unit with one artwork and no back."""
    return load_fixture("boba_fett")


@pytest.fixture
def darth_vader() -> Dict[str, Any]:
    """A double-sided leader with hyperspace and showcase variants."""
    return load_fixture("darth_vader_leader")


@pytest.fixture
def make_raw_card(boba_fett: Dict[str, Any]) -> Callable[..., Dict[str, Any]]:
    """Factory for raw records, derived from the Boba Fett fixture."""

    def _make(
        number: int = 1,
        code: Optional[str] = "SOR",
        variant_of: Optional[Dict[str, Any]] = None,
        **attributes: Any,
    ) -> Dict[str, Any]:
        raw_card = copy.deepcopy(boba_fett)
        raw_card["attributes"]["cardNumber"] = number
        raw_card["attributes"]["variantOf"] = {"data": variant_of}
        raw_card["attributes"]["expansion"] = {
            "data": None if code is None else {"attributes": {"code": code}}
        }
        raw_card["attributes"].update(attributes)
        return raw_card

    return _make


@pytest.fixture
def make_page() -> Callable[[List[Dict[str, Any]], int], Dict[str, Any]]:
    """Factory for a page of the card listing."""

    def _make(cards: List[Dict[str, Any]], page_count: int) -> Dict[str, Any]:
        return {
            "data": cards,
            "meta": {
                "pagination": {
                    "page": 1,
                    "pageSize": 50,
                    "pageCount": page_count,
                    "total": len(cards),
                }
            },
        }

    return _make
