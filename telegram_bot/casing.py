"""
camelCase <-> snake_case key transcoding for Bot API payloads.

Application code builds parameter bags with camelCase keys (``chatId``,
``replyMarkup``) and reads results back the same way.  The Bot API speaks
snake_case on the wire.  Every request bag passes through
``transform_params`` on the way out and every successful result passes
through ``transform_object`` on the way back.

Both transforms mutate in place and walk arbitrarily nested structures:
dicts inside dicts, dicts inside lists.

The outbound walk leaves a fixed set of keys alone.  Their values are file
uploads (bytes, open files, file ids, URLs), not structured data, so the
entry is neither renamed nor descended into.  The inbound walk has no such
exceptions: responses never carry raw upload payloads.
"""

import re
from typing import Any

# Keys whose values are file uploads.  Checked against the snake_cased key.
OPAQUE_PAYLOAD_KEYS: frozenset[str] = frozenset(
    {"photo", "audio", "document", "video", "animation", "voice", "video_note"}
)

_UPPER = re.compile(r"([A-Z])")
_UNDERSCORE_LOWER = re.compile(r"_([a-z])")


# --------------------------------------------------------------------------- #
# Single keys                                                                  #
# --------------------------------------------------------------------------- #


def to_wire_key(key: str) -> str:
    """
    'fooBar'   -> 'foo_bar'
    'foo_bar'  -> 'foo_bar'
    'foo bar'  -> 'foo bar'
    """
    return _UPPER.sub(lambda m: "_" + m.group(1).lower(), key)


def to_app_key(key: str) -> str:
    """
    'foo_bar'  -> 'fooBar'
    'fooBar'   -> 'fooBar'
    'foo_ bar' -> 'foo_ bar'
    """
    return _UNDERSCORE_LOWER.sub(lambda m: m.group(1).upper(), key)


def is_object(value: Any) -> bool:
    return isinstance(value, dict)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


# --------------------------------------------------------------------------- #
# Whole structures                                                             #
# --------------------------------------------------------------------------- #


def transform_params(params: Any) -> None:
    """
    Rewrite every key of an outbound parameter bag to snake_case, in place.

    Entries whose snake_cased key is in OPAQUE_PAYLOAD_KEYS are skipped
    entirely.  Anything that is not a dict is ignored.
    """
    if not is_object(params):
        return

    # list() snapshots the keys; the loop body renames entries.
    for key in list(params):
        wire_key = to_wire_key(key)

        if wire_key in OPAQUE_PAYLOAD_KEYS:
            continue

        if wire_key != key:
            params[wire_key] = params.pop(key)

        value = params[wire_key]
        if isinstance(value, list):
            for item in value:
                transform_params(item)
        elif is_object(value):
            transform_params(value)


def transform_object(obj: Any) -> None:
    """Rewrite every key of an inbound result to camelCase, in place."""
    if not is_object(obj):
        return

    for key in list(obj):
        app_key = to_app_key(key)

        if app_key != key:
            obj[app_key] = obj.pop(key)

        value = obj[app_key]
        if isinstance(value, list):
            for item in value:
                transform_object(item)
        elif is_object(value):
            transform_object(value)


def transform_result(result: Any) -> Any:
    """
    Normalise a ``result`` payload of any shape and return it.

    getUpdates and getChatAdministrators return lists of objects, most
    methods return a single object, and a few return ``True``, a string
    or a number.  Lists are walked element by element; scalars come back
    untouched.
    """
    if isinstance(result, list):
        for item in result:
            transform_object(item)
    else:
        transform_object(result)
    return result
