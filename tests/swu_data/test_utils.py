"""
Tests for swu_data.utils helpers
"""

from swu_data.utils import first_or_none, first_present, get_padded_number


class TestFirstPresent:
    def test_prefers_earlier_key(self):
        formats = {"xxsmall": 1, "card": 2}
        assert first_present(formats, ("card", "xxsmall")) == ("card", 2)

    def test_falls_back_to_later_key(self):
        formats = {"xxsmall": 1, "thumbnail": 3}
        assert first_present(formats, ("card", "xxsmall")) == ("xxsmall", 1)

    def test_no_key_present(self):
        assert first_present({"large": 1}, ("card", "xxsmall")) is None

    def test_present_key_with_falsey_value_still_wins(self):
        assert first_present({"card": {}}, ("card", "xxsmall")) == ("card", {})


class TestFirstOrNone:
    def test_first_of_many(self):
        assert first_or_none(["ground", "space"]) == "ground"

    def test_empty(self):
        assert first_or_none([]) is None

    def test_consumes_generators_lazily(self):
        consumed = []

        def values():
            for value in range(3):
                consumed.append(value)
                yield value

        assert first_or_none(values()) == 0
        assert consumed == [0]


def test_get_padded_number():
    assert get_padded_number(7, 3) == "007"
    assert get_padded_number(252, 3) == "252"
    assert get_padded_number(1000, 3) == "1000"
