import re
from typing import Optional

_UNSIGNED_RE = re.compile(r"[0-9]+")


def numeric_text(text: str) -> str:
    """Strip thousands separators: "1,234" -> "1234"."""
    return text.replace(",", "")


def parse_unsigned(text: str) -> Optional[int]:
    """Parse cell text as an unsigned integer, None if it is not one."""
    digits = numeric_text(text)
    if not _UNSIGNED_RE.fullmatch(digits):
        return None
    return int(digits)
