"""Arabic text helpers: digit conversion and citation-number extraction."""

import re

ARABIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"
_TO_WESTERN = str.maketrans(ARABIC_DIGITS, "0123456789")

# A hadith opens with its number in Arabic-Indic digits and a dash: "٤٩ - ..."
HADITH_NUMBER_PATTERN = re.compile(r"^([٠-٩]+)\s*-")

_TASHKEEL = re.compile(r"[\u064B-\u065F\u0670]")
_NON_ARABIC = re.compile(r"[^\u0600-\u06FF\s]")
_WHITESPACE = re.compile(r"\s+")


def arabic_to_western(arabic_num: str) -> int:
    """Convert a string of Arabic-Indic digits to an integer.

    Args:
        arabic_num: Digits in U+0660–U+0669 (ASCII digits are accepted too).

    Returns:
        The base-10 value.

    Raises:
        ValueError: If anything other than digits remains after conversion.
    """
    western = arabic_num.translate(_TO_WESTERN)
    if not western or not (western.isascii() and western.isdigit()):
        raise ValueError(f"Not an Arabic-Indic number: {arabic_num!r}")
    return int(western, 10)


def extract_hadith_number(nass: str) -> int | None:
    """Return the leading hadith number of an Arabic text, if any.

    Only the "digits, optional spaces, dash" prefix is recognised. Chapter
    titles and prose return None.
    """
    match = HADITH_NUMBER_PATTERN.match(nass)
    return arabic_to_western(match.group(1)) if match else None


def normalize_arabic(text: str) -> str:
    """Normalize Arabic text for matching.

    Removes tashkeel, drops symbols and punctuation outside the Arabic
    block (such as ﷺ), and collapses whitespace.
    """
    text = _TASHKEEL.sub("", text)
    text = _NON_ARABIC.sub("", text)
    return _WHITESPACE.sub(" ", text).strip()
