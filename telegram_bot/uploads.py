"""
multipart/form-data bodies for methods that can carry files.

A file parameter accepts three kinds of value:

  - a file id or HTTP URL (``str``)   -> sent as an ordinary form field
  - raw ``bytes`` / an open binary file -> sent as a file part
  - an ``InputFile``                   -> a file part with explicit name/type

Everything else in the bag becomes a plain form field.  Nested objects and lists
(``replyMarkup``, ``media``, ``permissions``) are JSON-encoded because a form
field can only hold a string.
"""

import json
import os
from dataclasses import dataclass
from typing import IO, Any, Optional, Union

from telegram_bot.casing import is_object, is_string

FileContent = Union[bytes, bytearray, IO[bytes]]


@dataclass
class InputFile:
    content: FileContent
    filename: Optional[str] = None
    content_type: Optional[str] = None

    def as_requests_file(self, field_name: str) -> tuple:
        filename = self.filename or _guess_filename(self.content) or field_name
        if self.content_type:
            return (filename, self.content, self.content_type)
        return (filename, self.content)


def _guess_filename(content: Any) -> Optional[str]:
    name = getattr(content, "name", None)
    if is_string(name) and not name.startswith("<"):
        return os.path.basename(name)
    return None


def is_file_payload(value: Any) -> bool:
    if isinstance(value, (InputFile, bytes, bytearray)):
        return True
    return callable(getattr(value, "read", None))


def has_file_string(obj: dict, *keys: str) -> bool:
    """True when any of ``keys`` holds a file id / URL rather than file data."""
    return any(is_string(obj.get(key)) for key in keys)


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_object(value) or isinstance(value, (list, tuple)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def build_multipart(params: dict) -> dict[str, tuple]:
    """
    Turn a snake_cased parameter bag into the ``files=`` argument of requests.

    Plain fields become ``(None, value)`` parts, which requests encodes as
    ordinary form fields; file payloads become named file parts.  Sending
    everything through ``files=`` keeps the body multipart even when no
    binary part is present (a file id string, say).  None values are
    dropped.
    """
    parts: dict[str, tuple] = {}

    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, InputFile):
            parts[key] = value.as_requests_file(key)
        elif is_file_payload(value):
            parts[key] = InputFile(value).as_requests_file(key)
        else:
            parts[key] = (None, _form_value(value))

    return parts
