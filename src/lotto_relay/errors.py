"""
Exceptions raised at the edges of lotto-relay (delivery, maintenance).

The translation core never raises; these cover the I/O around it.
"""


class LottoRelayError(Exception):
    """Base class for lotto-relay errors.

    Carries a user-facing message explaining what went wrong
    and, where possible, how to fix it.
    """


class WebhookError(LottoRelayError):
    """Raised when a message cannot be delivered to the Discord webhook."""


class CleanupError(LottoRelayError):
    """Raised when a dictionary file cannot be deduplicated."""
