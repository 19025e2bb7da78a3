"""Date renderer — formats dates, ISO 8601 strings and epoch timestamps.

Default format: dd/MM/yyyy HH:mm. Aware datetimes and epoch timestamps
are shown in the reference timezone (RENDER_TIMEZONE, UTC by default);
naive datetimes are shown as they are.
"""

import logging
import math
import os
import re
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from numbers import Real
from typing import Any, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..schemas import FieldDescriptor, FieldKind, FieldOption, RendererVariant
from .date_format import format_datetime

logger = logging.getLogger(__name__)

RENDER_TIMEZONE = os.environ.get("RENDER_TIMEZONE", "UTC")

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Reduced-precision ISO 8601 dates: YYYY and YYYY-MM
REDUCED_ISO_DATE = re.compile(r"^(\d{4})(?:-(\d{2}))?$")

DEFAULT_DATE_CONFIG: dict[str, Any] = {
    "format": "dd/MM/yyyy HH:mm",
    "invalidText": "-",
    "emptyText": "-",
}

COMMON_DATE_FORMATS = [
    FieldOption(value="dd/MM/yyyy HH:mm", label="31/12/2023 23:59"),
    FieldOption(value="dd/MM/yyyy", label="31/12/2023"),
    FieldOption(value="dd/MM/yy", label="31/12/23"),
    FieldOption(value="yyyy-MM-dd", label="2023-12-31"),
    FieldOption(value="MM/dd/yyyy", label="12/31/2023"),
    FieldOption(value="HH:mm:ss", label="23:59:59"),
    FieldOption(value="HH:mm", label="23:59"),
    FieldOption(value="dd 'de' MMMM 'de' yyyy", label="31 de December de 2023"),
    FieldOption(
        value="EEEE, dd 'de' MMMM 'de' yyyy",
        label="Sunday, 31 de December de 2023",
    ),
]

DATE_FIELDS = [
    FieldDescriptor(
        name="format",
        label="Formato da Data",
        kind=FieldKind.SELECT,
        placeholder="dd/MM/yyyy HH:mm",
        default_value="dd/MM/yyyy HH:mm",
        options=COMMON_DATE_FORMATS,
        allow_custom=True,
        help_text="Utilize os padrões de date-fns. Ex: dd/MM/yyyy HH:mm",
    ),
    FieldDescriptor(
        name="invalidText",
        label="Texto para Datas Inválidas",
        kind=FieldKind.TEXT,
        placeholder="-",
        default_value="-",
    ),
    FieldDescriptor(
        name="emptyText",
        label="Texto para Valores Vazios",
        kind=FieldKind.TEXT,
        placeholder="-",
        default_value="-",
    ),
]


_unknown_timezones: set[str] = set()


def reference_timezone(name: Optional[str] = None) -> tzinfo:
    """Resolve the timezone dates are displayed in.

    An unknown zone is reported once with a warning and then re-raised on
    every call, so each render falls back to invalidText.
    """
    name = name or RENDER_TIMEZONE
    if name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        if name not in _unknown_timezones:
            _unknown_timezones.add(name)
            logger.warning(
                f"Unknown render timezone '{name}', dates will show the invalid text"
            )
        raise


def _expand_reduced_iso(text: str) -> str:
    """Expand YYYY and YYYY-MM to the first day of the year or month."""
    match = REDUCED_ISO_DATE.match(text)
    if match is None:
        return text
    year, month = match.groups()
    return f"{year}-{month or '01'}-01"


def parse_date(value: Any, tz: Optional[tzinfo] = None) -> Optional[datetime]:
    """Parse a date-like value into a datetime.

    Returns None for unsupported types and non-finite numbers.

    Raises:
        ValueError: If a string is not ISO 8601.
        OverflowError: If a timestamp is out of the supported range.
    """
    tz = tz or reference_timezone()

    if isinstance(value, datetime):
        return value.astimezone(tz) if value.tzinfo is not None else value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, str):
        parsed = datetime.fromisoformat(_expand_reduced_iso(value.strip()))
        return parsed.astimezone(tz) if parsed.tzinfo is not None else parsed
    if isinstance(value, Real) and not isinstance(value, bool):
        if not math.isfinite(value):
            return None
        return (EPOCH + timedelta(milliseconds=float(value))).astimezone(tz)
    return None


def render_date(
    value: Any, config: Optional[dict[str, Any]] = None, record: Optional[Any] = None
) -> str:
    """Render a date value with the configured pattern.

    Empty values (None, "") give emptyText; unparseable values and
    unsupported patterns give invalidText.
    """
    final_config = {**DEFAULT_DATE_CONFIG, **(config or {})}

    if value is None or value == "":
        return final_config["emptyText"]

    try:
        parsed = parse_date(value)
        if parsed is None:
            return final_config["invalidText"]
        return format_datetime(parsed, final_config["format"])
    except (
        ValueError,
        TypeError,
        OverflowError,
        OSError,
        ZoneInfoNotFoundError,
    ) as e:
        logger.debug(f"Could not format date {value!r}: {e}")
        return final_config["invalidText"]


DATE_RENDERER = RendererVariant(
    label="Data",
    description="formata datas ISO 8601",
    render=render_date,
    fields=DATE_FIELDS,
    default_config=DEFAULT_DATE_CONFIG,
)
