"""
Request dispatch: URL building, the two POST modes, envelope handling.

Every Bot API call goes through one of two primitives:

  request(method, params)       JSON body       (most methods)
  file_request(method, params)  multipart body  (methods that may upload)

Both transcode the caller's camelCase bag to snake_case in place, submit
the POST to a thread pool and return a ``concurrent.futures.Future``
immediately.  The future resolves to the camelCased ``result`` of the
envelope, or raises:

  BotApiError               the server answered ok=false
  requests.RequestException connection / timeout / HTTP-level failure
  ValueError                the body was not JSON
  BotError                  the client was already closed

Nothing is retried.  Callers that need retries or rate limiting wrap the
future themselves.  Inside asyncio, ``asyncio.wrap_future(bot.get_me())``
turns the future into an awaitable.
"""

import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Any, Optional

import requests

from telegram_bot.casing import transform_params
from telegram_bot.envelope import ApiResponse
from telegram_bot.errors import BotConfigError, BotError
from telegram_bot.settings import BotSettings, get_settings
from telegram_bot.uploads import build_multipart

logger = logging.getLogger(__name__)


class RequestDispatcher:
    """
    ``session`` is optional.  Without one, every call goes through
    ``requests.post``, which opens a fresh session per request, so worker
    threads share no connection state.  An injected session is used from
    every worker thread at once; pass one only if it tolerates concurrent
    use.  The caller keeps ownership of it: ``close()`` leaves it open.
    """

    def __init__(
        self,
        token: str,
        settings: Optional[BotSettings] = None,
        session: Optional[requests.Session] = None,
        executor: Optional[Executor] = None,
    ) -> None:
        if not token:
            raise BotConfigError("token is null or empty.")

        self._token = token
        self._settings = settings or get_settings()
        self._http = session if session is not None else requests
        self._closed = False
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=self._settings.max_workers,
            thread_name_prefix="tgbot",
        )

    @property
    def settings(self) -> BotSettings:
        return self._settings

    def get_url(self, method: str) -> str:
        return f"{self._settings.api_root}/bot{self._token}/{method}"

    # ------------------------------------------------------------------ #
    # Public primitives                                                    #
    # ------------------------------------------------------------------ #

    def request(self, method: str, params: Optional[dict] = None) -> Future:
        """POST ``params`` as a JSON body."""
        if self._closed:
            return self._closed_future(method)
        body = self._prepare(params)
        logger.debug("Dispatching %s (json) with keys %s", method, sorted(body))
        return self._executor.submit(self._post_json, method, body)

    def file_request(self, method: str, params: Optional[dict] = None) -> Future:
        """POST ``params`` as multipart/form-data, file values as file parts."""
        if self._closed:
            return self._closed_future(method)
        body = self._prepare(params)
        logger.debug("Dispatching %s (multipart) with keys %s", method, sorted(body))
        return self._executor.submit(self._post_multipart, method, body)

    def close(self) -> None:
        self._closed = True
        if self._owns_executor:
            self._executor.shutdown(wait=True)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ------------------------------------------------------------------ #
    # Private                                                              #
    # ------------------------------------------------------------------ #

    @staticmethod
    def _closed_future(method: str) -> Future:
        # The caller's bag is left untouched.
        future: Future = Future()
        future.set_exception(BotError(f"cannot call {method}: client is closed"))
        return future

    @staticmethod
    def _prepare(params: Optional[dict]) -> dict:
        """
        Transcode the bag in place, then drop top-level None values so an
        omitted optional argument is absent from the body rather than null.
        """
        if params is None:
            params = {}
        transform_params(params)
        return {key: value for key, value in params.items() if value is not None}

    def _post_json(self, method: str, body: dict) -> Any:
        response = self._http.post(
            self.get_url(method),
            json=body,
            timeout=self._settings.timeout,
        )
        return self._parse_response(method, response)

    def _post_multipart(self, method: str, body: dict) -> Any:
        # An empty bag posts with no body at all.
        response = self._http.post(
            self.get_url(method),
            files=build_multipart(body) or None,
            timeout=self._settings.timeout,
        )
        return self._parse_response(method, response)

    @staticmethod
    def _parse_response(method: str, response: requests.Response) -> Any:
        # The Bot API sends the envelope with 4xx/5xx statuses too, so the
        # body is parsed regardless of status.
        envelope = ApiResponse.model_validate(response.json())
        return envelope.unwrap(method)
