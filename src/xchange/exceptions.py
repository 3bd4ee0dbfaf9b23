"""
Exceptions raised by exchange adapters and services.

Capability errors are static: an exchange that does not offer withdrawals
will never offer them on retry.
"""


class ExchangeError(Exception):
    """Base class for all adapter and service errors."""


class NotAvailableFromExchangeError(ExchangeError):
    """The exchange does not provide this capability."""

    def __init__(
        self, message: str = "Requested functionality is not available from exchange"
    ) -> None:
        """Initialize with a default message."""
        super().__init__(message)


class NotYetImplementedForExchangeError(ExchangeError, NotImplementedError):
    """The capability exists on the exchange but is not wired up yet."""

    def __init__(
        self, message: str = "Requested functionality is not yet implemented"
    ) -> None:
        """Initialize with a default message."""
        super().__init__(message)


class MissingTimestampError(ExchangeError, ValueError):
    """A record that requires a timestamp was built without a usable one."""


class TimestampParseError(ExchangeError, ValueError):
    """A raw exchange timestamp could not be parsed."""

    def __init__(self, raw: str, normalized: str, reason: str) -> None:
        """Keep both the original and the padded string for diagnostics."""
        self.raw = raw
        self.normalized = normalized
        self.reason = reason
        super().__init__(
            f"Unable to parse timestamp raw={raw!r} modified={normalized!r}: {reason}"
        )
