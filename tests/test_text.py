"""Tests for Arabic digit conversion and hadith-number extraction."""

import pytest

from src.ingestion.text import arabic_to_western, extract_hadith_number, normalize_arabic


class TestArabicToWestern:
    """Test Arabic-Indic digit conversion."""

    def test_zero(self) -> None:
        assert arabic_to_western("٠") == 0

    def test_multi_digit(self) -> None:
        assert arabic_to_western("٧٥٦٣") == 7563

    @pytest.mark.parametrize("digits", ["١", "٤٩", "١٢٣٤٥٦٧٨٩٠", "٠٠٧"])
    def test_matches_digit_by_digit_mapping(self, digits: str) -> None:
        expected = int("".join(str("٠١٢٣٤٥٦٧٨٩".index(d)) for d in digits))
        assert arabic_to_western(digits) == expected

    @pytest.mark.parametrize("bad", ["", "١a", "باب", "١ -"])
    def test_rejects_non_digits(self, bad: str) -> None:
        with pytest.raises(ValueError):
            arabic_to_western(bad)


class TestExtractHadithNumber:
    """Test reading the leading hadith number."""

    def test_first_hadith(self) -> None:
        assert extract_hadith_number("١ - حَدَّثَنَا الْحُمَيْدِيُّ") == 1

    def test_two_digits(self) -> None:
        assert extract_hadith_number("٤٩ - أَخْبَرَنَا قُتَيْبَةُ") == 49

    def test_no_space_before_dash(self) -> None:
        assert extract_hadith_number("٧٥٦٣- حَدَّثَنِي") == 7563

    def test_chapter_title_has_none(self) -> None:
        assert extract_hadith_number("بَابُ سُؤَالِ جِبْرِيلَ") is None

    def test_prose_has_none(self) -> None:
        assert extract_hadith_number("مقدمة الكتاب") is None

    def test_number_not_at_start_has_none(self) -> None:
        assert extract_hadith_number("حَدَّثَنَا ١ - فلان") is None

    def test_number_without_dash_has_none(self) -> None:
        assert extract_hadith_number("١٢ حَدَّثَنَا") is None


class TestNormalizeArabic:
    """Test Arabic text normalization for search."""

    def test_strips_tashkeel(self) -> None:
        assert normalize_arabic("حَدَّثَنَا") == "حدثنا"

    def test_removes_symbols_and_collapses_spaces(self) -> None:
        assert normalize_arabic("  رسول الله ﷺ   قال، ") == "رسول الله قال،"

    def test_removes_latin(self) -> None:
        assert normalize_arabic("Chapter باب") == "باب"
