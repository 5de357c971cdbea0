"""
Exception hierarchy for the Bot API client.

  BotError
  ├── BotConfigError   — the client cannot be built (bad token)
  └── BotApiError      — the server answered ``ok: false``

Network and decoding failures are NOT wrapped: ``requests.RequestException``
and ``ValueError`` from JSON parsing reach the caller as raised by requests.
"""

from typing import Optional


class BotError(Exception):
    """Base for all errors raised by this package."""


class BotConfigError(BotError, ValueError):
    """Raised synchronously from the constructor."""


class BotApiError(BotError):
    """
    The Bot API rejected a call.

    ``str(exc)`` is the server's description, verbatim.  ``error_code`` and
    ``parameters`` are copied from the envelope when the server sends them.
    """

    def __init__(
        self,
        description: str,
        *,
        method: Optional[str] = None,
        error_code: Optional[int] = None,
        parameters: Optional[dict] = None,
    ) -> None:
        super().__init__(description)
        self.description = description
        self.method = method
        self.error_code = error_code
        self.parameters = parameters or {}

    @property
    def retry_after(self) -> Optional[int]:
        return self.parameters.get("retry_after")
