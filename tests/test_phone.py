import re

import pytest

from barberapp.phone import format_phone, is_valid_phone, normalize_phone


@pytest.mark.phone
class TestPhone:
    """Phone normalization, masking and validation."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("", ""),
            ("1", "1"),
            ("11", "11"),
            ("119", "(11) 9"),
            ("1198765", "(11) 98765"),
            ("11987654", "(11) 98765-4"),
            ("11987654321", "(11) 98765-4321"),
        ],
    )
    def test_progressive_mask(self, raw, expected):
        assert format_phone(raw) == expected

    def test_non_digits_are_dropped(self):
        assert normalize_phone("(11) 98765-4321") == "11987654321"
        assert normalize_phone("abc") == ""
        assert format_phone("tel: 11 9 8765 4321") == "(11) 98765-4321"

    def test_extra_digits_are_truncated(self):
        assert normalize_phone("1198765432199999") == "11987654321"
        assert format_phone("1198765432199999") == "(11) 98765-4321"

    def test_reformatting_is_stable(self):
        masked = format_phone("11987654321")
        assert format_phone(masked) == masked

    @pytest.mark.parametrize(
        "raw", ["", "x", "12", "(11) 9", "1198765432", "11 98765 4321", "+55 (11) 98765-4321", "!!!"]
    )
    def test_mask_only_holds_grouped_digits(self, raw):
        formatted = format_phone(raw)
        assert re.fullmatch(r"\d{0,2}|\(\d{2}\) \d{1,5}|\(\d{2}\) \d{5}-\d{1,4}", formatted)
        assert len(re.sub(r"\D", "", formatted)) <= 11

    @pytest.mark.parametrize(
        "raw, valid",
        [
            ("11987654321", True),
            ("(11) 98765-4321", True),
            ("1198765432", False),
            ("", False),
            # 13 digits truncate to 11 before the check
            ("5511987654321", True),
        ],
    )
    def test_validity_is_exactly_eleven_digits(self, raw, valid):
        assert is_valid_phone(normalize_phone(raw)) is valid
        assert (len(normalize_phone(raw)) == 11) is valid
