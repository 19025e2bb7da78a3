"""date-fns style pattern formatting for datetimes.

Supported tokens:

    yyyy yy y       year (yy = last two digits)
    MMMMM MMMM MMM MM M
                    month (narrow, full name, short name, padded, plain)
    dd d            day of month
    EEEEEE EEEEE EEEE EEE
                    weekday (2-letter, narrow, full, short; E-EEE are short)
    HH H            hour 0-23
    hh h            hour 1-12
    mm m            minute
    ss s            second
    S...            fraction of second, one digit per letter
    a aaaa aaaaa    AM/PM marker (AM, a.m., a)

Text inside single quotes is copied literally; two single quotes produce
one quote. Any other unquoted ASCII letter raises ValueError.
"""

from datetime import datetime
from typing import Callable

# Fixed English names; the process locale is never consulted.
MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]
MONTH_ABBR = [name[:3] for name in MONTH_NAMES]
WEEKDAY_NAMES = [
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
]
WEEKDAY_ABBR = [name[:3] for name in WEEKDAY_NAMES]


def _pad(number: int, width: int) -> str:
    return str(number).zfill(width)


def _year(dt: datetime, width: int) -> str:
    if width == 2:
        return _pad(dt.year % 100, 2)
    return _pad(dt.year, width)


def _month(dt: datetime, width: int) -> str:
    if width <= 2:
        return _pad(dt.month, width)
    if width == 3:
        return MONTH_ABBR[dt.month - 1]
    if width == 4:
        return MONTH_NAMES[dt.month - 1]
    if width == 5:
        return MONTH_NAMES[dt.month - 1][0]
    raise ValueError(f"Unsupported month token of length {width}")


def _weekday(dt: datetime, width: int) -> str:
    name = WEEKDAY_NAMES[dt.weekday()]
    if width <= 3:
        return WEEKDAY_ABBR[dt.weekday()]
    if width == 4:
        return name
    if width == 5:
        return name[0]
    if width == 6:
        return name[:2]
    raise ValueError(f"Unsupported weekday token of length {width}")


def _hour12(dt: datetime, width: int) -> str:
    return _pad(dt.hour % 12 or 12, width)


def _fraction(dt: datetime, width: int) -> str:
    digits = _pad(dt.microsecond, 6)
    return digits[:width].ljust(width, "0")


def _day_period(dt: datetime, width: int) -> str:
    is_pm = dt.hour >= 12
    if width <= 3:
        return "PM" if is_pm else "AM"
    if width == 4:
        return "p.m." if is_pm else "a.m."
    if width == 5:
        return "p" if is_pm else "a"
    raise ValueError(f"Unsupported day period token of length {width}")


TOKEN_FORMATTERS: dict[str, Callable[[datetime, int], str]] = {
    "y": _year,
    "M": _month,
    "d": lambda dt, width: _pad(dt.day, width),
    "E": _weekday,
    "H": lambda dt, width: _pad(dt.hour, width),
    "h": _hour12,
    "m": lambda dt, width: _pad(dt.minute, width),
    "s": lambda dt, width: _pad(dt.second, width),
    "S": _fraction,
    "a": _day_period,
}


def _is_ascii_letter(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z")


def _read_quoted(pattern: str, start: int) -> tuple[str, int]:
    """Read a quoted literal starting at pattern[start] == "'".

    Returns the literal text and the index just past it. An unterminated
    quote runs to the end of the pattern.
    """
    if pattern.startswith("''", start):
        return "'", start + 2

    chars = []
    i = start + 1
    while i < len(pattern):
        if pattern[i] == "'":
            if pattern.startswith("''", i):
                chars.append("'")
                i += 2
                continue
            return "".join(chars), i + 1
        chars.append(pattern[i])
        i += 1
    return "".join(chars), i


def format_datetime(dt: datetime, pattern: str) -> str:
    """Format a datetime with a date-fns style pattern.

    Raises:
        ValueError: If the pattern contains an unsupported token.
    """
    if not isinstance(pattern, str):
        raise ValueError(f"Date format must be a string, got {type(pattern).__name__}")

    out = []
    i = 0
    while i < len(pattern):
        char = pattern[i]

        if char == "'":
            literal, i = _read_quoted(pattern, i)
            out.append(literal)
            continue

        if _is_ascii_letter(char):
            end = i
            while end < len(pattern) and pattern[end] == char:
                end += 1
            formatter = TOKEN_FORMATTERS.get(char)
            if formatter is None:
                raise ValueError(
                    f"Format string contains an unescaped latin alphabet character '{char}'"
                )
            out.append(formatter(dt, end - i))
            i = end
            continue

        out.append(char)
        i += 1

    return "".join(out)
