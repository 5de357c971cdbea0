"""
Tests for the key transcoder.

Covers the single-key rules, the in-place deep walks in both directions,
the upload-key skip list, and result normalisation for every result shape
the Bot API returns (object, list of objects, scalar).
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from telegram_bot.casing import (
    OPAQUE_PAYLOAD_KEYS,
    is_object,
    is_string,
    to_app_key,
    to_wire_key,
    transform_object,
    transform_params,
    transform_result,
)


# --------------------------------------------------------------------------- #
# 1. Type checks                                                               #
# --------------------------------------------------------------------------- #


class TestTypeChecks:
    def test_is_object(self):
        assert is_object({}) is True
        assert is_object([]) is False
        assert is_object(True) is False
        assert is_object([None]) is False
        assert is_object(b"") is False
        assert is_object(None) is False

    def test_is_string(self):
        assert is_string("") is True
        assert is_string("foo") is True
        assert is_string(None) is False
        assert is_string({}) is False
        assert is_string([]) is False
        assert is_string(b"foo") is False


# --------------------------------------------------------------------------- #
# 2. Single keys                                                               #
# --------------------------------------------------------------------------- #


class TestToWireKey:
    def test_empty(self):
        assert to_wire_key("") == ""

    def test_camel_case(self):
        assert to_wire_key("fooBar") == "foo_bar"

    def test_space_untouched(self):
        assert to_wire_key("foo bar") == "foo bar"

    def test_already_snake_case(self):
        assert to_wire_key("foo_bar") == "foo_bar"

    def test_every_capital_gets_its_own_underscore(self):
        assert to_wire_key("disableWebPagePreview") == "disable_web_page_preview"
        assert to_wire_key("HTTPS") == "_h_t_t_p_s"

    def test_digits_are_not_boundaries(self):
        assert to_wire_key("file2Id") == "file2_id"


class TestToAppKey:
    def test_empty(self):
        assert to_app_key("") == ""

    def test_snake_case(self):
        assert to_app_key("foo_bar") == "fooBar"

    def test_space_untouched(self):
        assert to_app_key("foo bar") == "foo bar"

    def test_already_camel_case(self):
        assert to_app_key("fooBar") == "fooBar"

    def test_underscore_before_non_lowercase_is_kept(self):
        assert to_app_key("foo_ bar") == "foo_ bar"
        assert to_app_key("foo_1") == "foo_1"
        assert to_app_key("foo_Bar") == "foo_Bar"

    def test_multiple_segments(self):
        assert to_app_key("can_send_media_messages") == "canSendMediaMessages"


class TestRoundTrips:
    @pytest.mark.parametrize(
        "wire_key",
        ["chat_id", "reply_to_message_id", "video_note", "message", "a1_b2_c3", "file_unique_id"],
    )
    def test_wire_key_survives_round_trip(self, wire_key):
        assert to_wire_key(to_app_key(wire_key)) == wire_key

    @pytest.mark.parametrize(
        "app_key",
        ["chatId", "replyToMessageId", "videoNote", "message", "fileUniqueId"],
    )
    def test_app_key_survives_round_trip(self, app_key):
        assert to_app_key(to_wire_key(app_key)) == app_key


# --------------------------------------------------------------------------- #
# 3. Outbound deep walk                                                        #
# --------------------------------------------------------------------------- #


class TestTransformParams:
    def test_non_object_is_a_no_op(self):
        assert transform_params("") is None
        assert transform_params(None) is None
        items = [{"fooBar": 1}]
        transform_params(items)
        assert items == [{"fooBar": 1}]

    def test_nested_structure_is_rewritten_in_place(self):
        obj = {"fooBar": "baz", "banBax": {"badBaf": 23}, "quix": [{"fooFlax": 3}]}

        transform_params(obj)

        assert obj == {"foo_bar": "baz", "ban_bax": {"bad_baf": 23}, "quix": [{"foo_flax": 3}]}
        assert "fooBar" not in obj

    def test_upload_keys_are_left_alone(self):
        obj = {"chatId": 1, "photo": "some-file-id"}

        transform_params(obj)

        assert obj == {"chat_id": 1, "photo": "some-file-id"}

    def test_upload_value_is_not_descended_into(self):
        obj = {"document": {"innerKey": 1}, "video_note": [{"innerKey": 2}]}

        transform_params(obj)

        assert obj == {"document": {"innerKey": 1}, "video_note": [{"innerKey": 2}]}

    def test_camel_upload_key_is_skipped_too(self):
        obj = {"videoNote": b"\x00\x01"}

        transform_params(obj)

        assert obj == {"videoNote": b"\x00\x01"}

    def test_skip_list_is_the_seven_media_keys(self):
        assert OPAQUE_PAYLOAD_KEYS == {
            "photo", "audio", "document", "video", "animation", "voice", "video_note",
        }

    def test_scalars_inside_lists_are_ignored(self):
        obj = {"allowedUpdates": ["message", "callback_query"]}

        transform_params(obj)

        assert obj == {"allowed_updates": ["message", "callback_query"]}

    def test_reply_markup_keyboard_rows(self):
        obj = {
            "replyMarkup": {
                "inlineKeyboard": [[{"text": "go", "callbackData": "x"}]],
            }
        }

        transform_params(obj)

        # Only one level of list is walked; rows of buttons keep their keys.
        assert obj == {
            "reply_markup": {"inline_keyboard": [[{"text": "go", "callbackData": "x"}]]}
        }

    def test_no_camel_case_keys_remain(self):
        obj = {"aB": {"cD": [{"eF": {"gH": 1}}]}}

        transform_params(obj)

        assert obj == {"a_b": {"c_d": [{"e_f": {"g_h": 1}}]}}


# --------------------------------------------------------------------------- #
# 4. Inbound deep walk                                                         #
# --------------------------------------------------------------------------- #


class TestTransformObject:
    def test_non_object_is_a_no_op(self):
        assert transform_object("") is None
        assert transform_object(True) is None

    def test_nested_structure_is_rewritten_in_place(self):
        obj = {"foo_bar": "baz", "ban_bax": {"bad_baf": 23}, "quix": [{"foo_flax": 3}]}

        transform_object(obj)

        assert obj == {"fooBar": "baz", "banBax": {"badBaf": 23}, "quix": [{"fooFlax": 3}]}
        assert "foo_bar" not in obj

    def test_upload_keys_are_not_exempt_inbound(self):
        obj = {"video_note": {"file_id": "abc"}, "photo": [{"file_unique_id": "u"}]}

        transform_object(obj)

        assert obj == {"videoNote": {"fileId": "abc"}, "photo": [{"fileUniqueId": "u"}]}

    def test_values_are_never_rewritten(self):
        obj = {"chat_type": "super_group"}

        transform_object(obj)

        assert obj == {"chatType": "super_group"}


class TestTransformResult:
    def test_single_object(self):
        result = transform_result({"message_id": 7, "from": {"first_name": "Ann"}})
        assert result == {"messageId": 7, "from": {"firstName": "Ann"}}

    def test_list_of_objects(self):
        result = transform_result([{"update_id": 1}, {"update_id": 2}])
        assert result == [{"updateId": 1}, {"updateId": 2}]

    @pytest.mark.parametrize("scalar", [True, "https://t.me/joinchat/abc", 12, None])
    def test_scalars_pass_through(self, scalar):
        assert transform_result(scalar) == scalar

    def test_returns_the_same_object(self):
        payload = {"ok_key": 1}
        assert transform_result(payload) is payload
