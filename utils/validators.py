# utils/validators.py
# Turn raw menu input into typed values. The cart core only ever sees
# the parsed numbers, never the text the user typed.
import math
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class ParseResult:
    value: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_price(text: str, name: str = "Price") -> ParseResult:
    try:
        value = float(text.strip())
    except (ValueError, AttributeError):
        return ParseResult(error=f"{name} must be a number.")
    # float() also takes "nan" and "inf"
    if not math.isfinite(value):
        return ParseResult(error=f"{name} must be a number.")
    return ParseResult(value=value)


def parse_int(text: str, name: str = "value") -> ParseResult:
    try:
        return ParseResult(value=int(text.strip()))
    except (ValueError, AttributeError):
        return ParseResult(error=f"{name} must be a whole number.")
