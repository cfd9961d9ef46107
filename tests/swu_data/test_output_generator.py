"""
Tests for writing and reading back cards.json
"""

import json
import pathlib

import pytest

from swu_data.card_builder import build_cards
from swu_data.errors import MalformedInput
from swu_data.output_generator import load_cards_file, write_cards_file


@pytest.fixture
def cards(boba_fett, darth_vader):
    return build_cards([boba_fett, darth_vader])


def test_write_creates_parent_directories(tmp_path: pathlib.Path, cards):
    write_file = tmp_path / "nested" / "dir" / "cards.json"

    write_cards_file(write_file, cards)

    assert write_file.is_file()
    contents = json.loads(write_file.read_text(encoding="utf-8"))
    assert isinstance(contents, list)
    assert [card["title"] for card in contents] == ["Boba Fett", "Darth Vader"]


def test_pretty_print_uses_two_space_indent(tmp_path: pathlib.Path, cards):
    write_file = tmp_path / "cards.json"

    write_cards_file(write_file, cards, pretty_print=True)

    assert write_file.read_text(encoding="utf-8").startswith('[\n  {\n    "set": "sor"')


def test_compact_output_is_one_line(tmp_path: pathlib.Path, cards):
    write_file = tmp_path / "cards.json"

    write_cards_file(write_file, cards, pretty_print=False)

    assert "\n" not in write_file.read_text(encoding="utf-8")


def test_round_trip(tmp_path: pathlib.Path, cards):
    write_file = tmp_path / "cards.json"

    write_cards_file(write_file, cards)

    assert load_cards_file(write_file) == cards


def test_empty_list(tmp_path: pathlib.Path):
    write_file = tmp_path / "cards.json"

    write_cards_file(write_file, [])

    assert load_cards_file(write_file) == []


class TestMalformedInput:
    def test_missing_file(self, tmp_path: pathlib.Path):
        with pytest.raises(MalformedInput):
            load_cards_file(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: pathlib.Path):
        read_file = tmp_path / "cards.json"
        read_file.write_text("[{", encoding="utf-8")

        with pytest.raises(MalformedInput) as excinfo:
            load_cards_file(read_file)

        assert excinfo.value.path == str(read_file)

    def test_not_an_array(self, tmp_path: pathlib.Path):
        read_file = tmp_path / "cards.json"
        read_file.write_text('{"data": []}', encoding="utf-8")

        with pytest.raises(MalformedInput):
            load_cards_file(read_file)

    def test_invalid_card(self, tmp_path: pathlib.Path, cards):
        read_file = tmp_path / "cards.json"
        contents = [card.to_json() for card in cards]
        del contents[1]["art"]
        read_file.write_text(json.dumps(contents), encoding="utf-8")

        with pytest.raises(MalformedInput) as excinfo:
            load_cards_file(read_file)

        assert "1.art" in excinfo.value.detail
