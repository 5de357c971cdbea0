"""
The ``{ok, result, description}`` wrapper around every Bot API response.
"""

import logging
from typing import Any, Optional

from pydantic import BaseModel

from telegram_bot.casing import transform_result
from telegram_bot.errors import BotApiError

logger = logging.getLogger(__name__)


class ApiResponse(BaseModel):
    ok: bool
    result: Any = None
    description: Optional[str] = None
    # Sent by the live API alongside ok=false; absent from most responses.
    error_code: Optional[int] = None
    parameters: Optional[dict] = None

    def unwrap(self, method: str) -> Any:
        """
        Return the camelCased result, or raise BotApiError carrying the
        server's description.
        """
        if self.ok:
            return transform_result(self.result)

        description = self.description or ""
        logger.warning("Bot API rejected %s: %s", method, description)
        raise BotApiError(
            description,
            method=method,
            error_code=self.error_code,
            parameters=self.parameters,
        )
