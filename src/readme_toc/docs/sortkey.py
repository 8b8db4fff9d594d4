"""Sort keys derived from numbering prefixes in file and directory names.

A sort key is a tuple of ints (``"1.2-intro.md"`` -> ``(1, 2)``) or None when
the name carries no recognisable numbering. Arabic numerals win over Chinese
numerals, which win over Roman numerals.
"""

from __future__ import annotations

import re


__all__ = [
    "SortKey",
    "chinese_to_number",
    "compare_sort_keys",
    "extract_arabic_number",
    "extract_chinese_number",
    "extract_roman_number",
    "extract_sort_key",
    "normalize_fullwidth",
    "roman_to_number",
]

SortKey = tuple[int, ...] | None

CHINESE_DIGITS: dict[str, int] = {
    "零": 0,
    "〇": 0,
    "一": 1,
    "二": 2,
    "两": 2,
    "三": 3,
    "四": 4,
    "五": 5,
    "六": 6,
    "七": 7,
    "八": 8,
    "九": 9,
}
CHINESE_UNITS: dict[str, int] = {"十": 10, "百": 100, "千": 1000, "万": 10000}
ROMAN_VALUES: dict[str, int] = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}

_DIGITS = "0123456789"
_CN_CHARS = "".join(CHINESE_DIGITS) + "".join(CHINESE_UNITS)
_CN_PATTERNS = (
    re.compile(rf"^第([{_CN_CHARS}]+)(?:章|节|部分|篇|卷|集|回)?"),
    re.compile(rf"^[(【〔\[]([{_CN_CHARS}]+)[)】〕\]]"),
    re.compile(rf"^([{_CN_CHARS}]+)、"),
    re.compile(rf"^([{_CN_CHARS}]+)(?:[^{_CN_CHARS}]|$)"),
)
_ROMAN_PREFIX_RE = re.compile(r"^[IVXLCDM]+", re.IGNORECASE)
_STRICT_ROMAN_RE = re.compile(r"^M*(CM|CD|D?C{0,3})(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})$", re.IGNORECASE)
_ROMAN_SEPARATOR_RE = re.compile(r"^[.\-_\s]")


def normalize_fullwidth(text: str) -> str:
    """Map full-width ASCII variants (and the ideographic space) to ASCII."""
    out: list[str] = []
    for char in text:
        code = ord(char)
        if code == 0x3000:
            out.append(" ")
        elif 0xFF01 <= code <= 0xFF5E:
            out.append(chr(code - 0xFEE0))
        else:
            out.append(char)
    return "".join(out)


def extract_arabic_number(name: str) -> SortKey:
    """Leading multi-level Arabic number: ``01.02-3_x`` -> ``(1, 2, 3)``."""
    normalized = normalize_fullwidth(name)
    if not normalized or normalized[0] not in _DIGITS:
        return None

    numbers: list[int] = []
    current = ""
    i = 0
    while i < len(normalized):
        char = normalized[i]
        if char in _DIGITS:
            current += char
        elif char in ".-" and current and i + 1 < len(normalized) and normalized[i + 1] in _DIGITS:
            numbers.append(int(current))
            current = ""
        else:
            break
        i += 1

    if current:
        numbers.append(int(current))
    return tuple(numbers) or None


def chinese_to_number(text: str) -> int | None:
    """Convert Chinese numerals such as ``二十三`` or ``三百零五``."""
    if not text or any(c not in CHINESE_DIGITS and c not in CHINESE_UNITS for c in text):
        return None

    result = 0
    section = 0
    digit = 0
    for char in text:
        if char in CHINESE_DIGITS:
            digit = CHINESE_DIGITS[char]
            continue
        unit = CHINESE_UNITS[char]
        if unit == 10000:
            result += (section + digit) * unit
            section = 0
        else:
            # A bare unit such as the leading 十 in 十一 means one of it.
            section += (digit or 1) * unit
        digit = 0
    return result + section + digit


def extract_chinese_number(name: str) -> SortKey:
    normalized = normalize_fullwidth(name)
    for pattern in _CN_PATTERNS:
        match = pattern.match(normalized)
        if not match:
            continue
        number = chinese_to_number(match.group(1))
        if number:
            return (number,)
    return None


def roman_to_number(roman: str) -> int | None:
    """Convert a Roman numeral, honouring subtractive pairs (IV, XC, ...)."""
    upper = roman.upper()
    if not upper or any(c not in ROMAN_VALUES for c in upper):
        return None

    total = 0
    previous = 0
    for char in reversed(upper):
        value = ROMAN_VALUES[char]
        if value < previous:
            total -= value
        else:
            total += value
        previous = value
    return total if total > 0 else None


def extract_roman_number(name: str) -> SortKey:
    """Leading Roman numeral followed by a separator or nothing.

    ``Introduction`` and ``mixin`` are words, not numerals, so a letter right
    after the numeral run rejects the match.
    """
    normalized = normalize_fullwidth(name)
    match = _ROMAN_PREFIX_RE.match(normalized)
    if not match:
        return None

    roman = match.group(0)
    rest = normalized[match.end() :]
    if rest and not _ROMAN_SEPARATOR_RE.match(rest) and rest[0].isascii() and rest[0].isalpha():
        return None
    if not _STRICT_ROMAN_RE.match(roman):
        return None

    number = roman_to_number(roman)
    return (number,) if number else None


def extract_sort_key(name: str) -> SortKey:
    if not name:
        return None
    return extract_arabic_number(name) or extract_chinese_number(name) or extract_roman_number(name)


def compare_sort_keys(a: SortKey, b: SortKey) -> int:
    """cmp-style comparison; None sorts after every key, shorter prefixes first."""
    if a is None and b is None:
        return 0
    if a is None:
        return 1
    if b is None:
        return -1
    if a == b:
        return 0
    return -1 if a < b else 1
