"""
Abucoins timestamp normalization.

Abucoins emits ISO-8601 timestamps with inconsistent fractional-second
precision and an optional trailing ``Z``, for example::

    2021-05-04T12:00:00Z
    2021-05-04T12:00:00.1Z
    2021-05-04T12:00:00.12
    2021-05-04T12:00:00.123456Z

Rather than guessing formats, every variant is padded or truncated to the
fixed 23-character form ``yyyy-MM-ddTHH:mm:ss.SSS`` and then parsed strictly
as UTC. Parse failures are reported as a result value, not an exception, so
each caller decides whether a missing timestamp is fatal.
"""

import logging
import re
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict

from src.xchange.exceptions import TimestampParseError

logger = logging.getLogger(__name__)

CANONICAL_LENGTH = 23
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%f"

# strptime's %f accepts 1-6 digits, the exchange format requires exactly 3
_CANONICAL_PATTERN = re.compile(
    r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}\.[0-9]{3}"
)

# length -> (characters kept, suffix appended)
_ZULU_PADDING: dict[int, tuple[int, str]] = {
    20: (19, ".000"),
    22: (21, "00"),
    23: (22, "0"),
}
_PLAIN_PADDING: dict[int, str] = {
    19: ".000",
    21: "00",
    22: "0",
}


class TimestampParseResult(BaseModel):
    """
    Outcome of parsing one raw timestamp.

    Exactly one of ``value`` and ``reason`` is set.
    """

    raw: str
    normalized: str
    value: datetime | None = None
    reason: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> bool:
        """Check if the timestamp parsed."""
        return self.value is not None

    def unwrap(self) -> datetime:
        """
        Get the parsed instant.

        Raises:
            TimestampParseError: If parsing failed

        """
        if self.value is None:
            raise TimestampParseError(
                self.raw, self.normalized, self.reason or "unknown error"
            )
        return self.value


def normalize_timestamp(raw: str) -> str:
    """
    Pad or truncate a raw timestamp to the canonical 23-character form.

    Strings longer than 23 characters are cut to 23, dropping sub-millisecond
    digits and zone suffixes. Shorter strings are padded according to their
    length and whether they end in ``Z``; lengths without a rule pass
    through unchanged and will fail to parse.

    Args:
        raw: Timestamp as received from the exchange

    Returns:
        The padded string, not yet validated

    """
    length = len(raw)
    if length > CANONICAL_LENGTH:
        return raw[:CANONICAL_LENGTH]

    if raw.endswith("Z"):
        if length not in _ZULU_PADDING:
            return raw
        keep, suffix = _ZULU_PADDING[length]
        return raw[:keep] + suffix

    return raw + _PLAIN_PADDING.get(length, "")


def parse_timestamp(
    raw: str, log: logging.Logger | None = None
) -> TimestampParseResult:
    """
    Normalize and parse a raw exchange timestamp as UTC.

    Args:
        raw: Timestamp as received from the exchange
        log: Where to report parse failures, defaults to this module's logger

    Returns:
        A result holding either the instant or the failure reason

    """
    log = log or logger
    normalized = normalize_timestamp(raw)

    if _CANONICAL_PATTERN.fullmatch(normalized):
        try:
            value = datetime.strptime(normalized, TIMESTAMP_FORMAT)
            return TimestampParseResult(
                raw=raw, normalized=normalized, value=value.replace(tzinfo=UTC)
            )
        except ValueError as e:
            reason = str(e)
    else:
        reason = "does not match yyyy-MM-ddTHH:mm:ss.SSS"

    log.warning(f"unable to parse rawDate={raw} modified={normalized}: {reason}")
    return TimestampParseResult(raw=raw, normalized=normalized, reason=reason)


def parse_date(raw: str, log: logging.Logger | None = None) -> datetime | None:
    """Parse a raw exchange timestamp, returning None if it is unparseable."""
    return parse_timestamp(raw, log).value
