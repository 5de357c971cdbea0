"""
Telegram Bot API client: one method per remote operation.

Every method returns a ``concurrent.futures.Future`` whose result is the
camelCased ``result`` of the response.  Methods that take a parameter bag
expect camelCase keys, as the results use:

    with Bot(token) as bot:
        message = bot.send_message({"chatId": 42, "text": "hi"}).result()
        message["messageId"]

File-capable methods post multipart/form-data.  Their file fields accept a
file id or URL string, raw bytes, an open binary file, or an ``InputFile``.
"""

from concurrent.futures import Future
from enum import Enum
from typing import Any, Optional, Union

from telegram_bot.dispatcher import RequestDispatcher

ChatId = Union[int, str]


class ChatAction(str, Enum):
    TYPING            = "typing"
    UPLOAD_PHOTO      = "upload_photo"
    RECORD_VIDEO      = "record_video"
    UPLOAD_VIDEO      = "upload_video"
    RECORD_AUDIO      = "record_audio"
    UPLOAD_AUDIO      = "upload_audio"
    UPLOAD_DOCUMENT   = "upload_document"
    FIND_LOCATION     = "find_location"
    RECORD_VIDEO_NOTE = "record_video_note"
    UPLOAD_VIDEO_NOTE = "upload_video_note"


class Bot(RequestDispatcher):

    # ------------------------------------------------------------------ #
    # Updates                                                              #
    # ------------------------------------------------------------------ #

    def get_updates(self, params: Optional[dict] = None) -> Future:
        """Long-poll for updates. Resolves to a list of Update objects."""
        return self.request("getUpdates", params)

    def set_webhook(self, params: Optional[dict] = None) -> Future:
        """
        Register a webhook URL.

        Uploading a self-signed ``certificate`` needs multipart; without one
        the call is a plain JSON post.
        """
        if params and params.get("certificate") is not None:
            return self.file_request("setWebhook", params)
        return self.request("setWebhook", params)

    def delete_webhook(self) -> Future:
        return self.request("deleteWebhook")

    def get_webhook_info(self) -> Future:
        return self.request("getWebhookInfo")

    def get_me(self) -> Future:
        """Resolves to the bot's own User object."""
        return self.request("getMe")

    # ------------------------------------------------------------------ #
    # Sending messages                                                     #
    # ------------------------------------------------------------------ #

    def send_message(self, params: Optional[dict] = None) -> Future:
        return self.request("sendMessage", params)

    def forward_message(self, params: Optional[dict] = None) -> Future:
        return self.request("forwardMessage", params)

    def send_photo(self, params: Optional[dict] = None) -> Future:
        return self.file_request("sendPhoto", params)

    def send_audio(self, params: Optional[dict] = None) -> Future:
        return self.file_request("sendAudio", params)

    def send_document(self, params: Optional[dict] = None) -> Future:
        return self.file_request("sendDocument", params)

    def send_video(self, params: Optional[dict] = None) -> Future:
        return self.file_request("sendVideo", params)

    def send_animation(self, params: Optional[dict] = None) -> Future:
        """GIF or H.264/MPEG-4 AVC video without sound."""
        return self.file_request("sendAnimation", params)

    def send_voice(self, params: Optional[dict] = None) -> Future:
        return self.file_request("sendVoice", params)

    def send_video_note(self, params: Optional[dict] = None) -> Future:
        # Pass the file as "video_note".  A "videoNote" key is skipped by the
        # transcoder like any upload key and would reach the wire unrenamed.
        return self.file_request("sendVideoNote", params)

    def send_media_group(self, params: Optional[dict] = None) -> Future:
        """Resolves to the list of sent Messages."""
        return self.file_request("sendMediaGroup", params)

    def send_location(self, params: Optional[dict] = None) -> Future:
        return self.file_request("sendLocation", params)

    def edit_message_live_location(self, params: Optional[dict] = None) -> Future:
        return self.file_request("editMessageLiveLocation", params)

    def stop_message_live_location(self, params: Optional[dict] = None) -> Future:
        return self.file_request("stopMessageLiveLocation", params)

    def send_venue(self, params: Optional[dict] = None) -> Future:
        return self.file_request("sendVenue", params)

    def send_contact(self, params: Optional[dict] = None) -> Future:
        return self.file_request("sendContact", params)

    def send_poll(self, params: Optional[dict] = None) -> Future:
        return self.file_request("sendPoll", params)

    def send_chat_action(self, chat_id: ChatId, action: Union[ChatAction, str]) -> Future:
        """Show a status such as "typing…" for up to five seconds."""
        if isinstance(action, ChatAction):
            action = action.value
        return self.request("sendChatAction", {"chatId": chat_id, "action": action})

    def get_user_profile_photos(
        self, user_id: int, offset: Optional[int] = None, limit: int = 100
    ) -> Future:
        return self.request(
            "getUserProfilePhotos", {"userId": user_id, "offset": offset, "limit": limit}
        )

    def get_file(self, file_id: str) -> Future:
        """
        Resolves to a File object.  Download it from
        ``<api_root>/file/bot<token>/<filePath>``; the link is valid for at
        least an hour.
        """
        return self.request("getFile", {"fileId": file_id})

    # ------------------------------------------------------------------ #
    # Chat administration                                                  #
    # ------------------------------------------------------------------ #

    def kick_chat_member(
        self, chat_id: ChatId, user_id: int, until_date: Optional[int] = None
    ) -> Future:
        return self.request(
            "kickChatMember", {"chatId": chat_id, "userId": user_id, "untilDate": until_date}
        )

    def unban_chat_member(self, chat_id: ChatId, user_id: int) -> Future:
        return self.request("unbanChatMember", {"chatId": chat_id, "userId": user_id})

    def restrict_chat_member(self, params: Optional[dict] = None) -> Future:
        return self.request("restrictChatMember", params)

    def promote_chat_member(self, params: Optional[dict] = None) -> Future:
        return self.request("promoteChatMember", params)

    def set_chat_administrator_custom_title(
        self, chat_id: ChatId, user_id: int, custom_title: str
    ) -> Future:
        return self.request(
            "setChatAdministratorCustomTitle",
            {"chatId": chat_id, "userId": user_id, "customTitle": custom_title},
        )

    def set_chat_permissions(self, chat_id: ChatId, permissions: dict) -> Future:
        return self.request("setChatPermissions", {"chatId": chat_id, "permissions": permissions})

    def export_chat_invite_link(self, chat_id: ChatId) -> Future:
        """Resolves to the new invite link as a string."""
        return self.request("exportChatInviteLink", {"chatId": chat_id})

    def set_chat_photo(self, chat_id: ChatId, photo: Any) -> Future:
        return self.file_request("setChatPhoto", {"chatId": chat_id, "photo": photo})

    def delete_chat_photo(self, chat_id: ChatId) -> Future:
        return self.request("deleteChatPhoto", {"chatId": chat_id})

    def set_chat_title(self, chat_id: ChatId, title: str) -> Future:
        return self.request("setChatTitle", {"chatId": chat_id, "title": title})

    def set_chat_description(self, chat_id: ChatId, description: str) -> Future:
        return self.request("setChatDescription", {"chatId": chat_id, "description": description})

    def pin_chat_message(
        self, chat_id: ChatId, message_id: int, disable_notification: Optional[bool] = None
    ) -> Future:
        return self.request(
            "pinChatMessage",
            {
                "chatId": chat_id,
                "messageId": message_id,
                "disableNotification": disable_notification,
            },
        )

    def unpin_chat_message(self, chat_id: ChatId) -> Future:
        return self.request("unpinChatMessage", {"chatId": chat_id})

    def leave_chat(self, chat_id: ChatId) -> Future:
        return self.request("leaveChat", {"chatId": chat_id})

    def get_chat(self, chat_id: ChatId) -> Future:
        return self.request("getChat", {"chatId": chat_id})

    def get_chat_administrators(self, chat_id: ChatId) -> Future:
        """Resolves to a list of ChatMember objects (bots excluded)."""
        return self.request("getChatAdministrators", {"chatId": chat_id})

    def get_chat_members_count(self, chat_id: ChatId) -> Future:
        return self.request("getChatMembersCount", {"chatId": chat_id})

    def get_chat_member(self, chat_id: ChatId, user_id: int) -> Future:
        return self.request("getChatMember", {"chatId": chat_id, "userId": user_id})

    def set_chat_sticker_set(self, chat_id: ChatId, sticker_set_name: str) -> Future:
        return self.request(
            "setChatStickerSet", {"chatId": chat_id, "stickerSetName": sticker_set_name}
        )

    def delete_chat_sticker_set(self, chat_id: ChatId) -> Future:
        return self.request("deleteChatStickerSet", {"chatId": chat_id})

    def answer_callback_query(self, params: Optional[dict] = None) -> Future:
        return self.request("answerCallbackQuery", params)

    # ------------------------------------------------------------------ #
    # Updating messages                                                    #
    # ------------------------------------------------------------------ #

    def edit_message_text(self, params: Optional[dict] = None) -> Future:
        """Resolves to the edited Message, or True for inline messages."""
        return self.request("editMessageText", params)

    def edit_message_caption(self, params: Optional[dict] = None) -> Future:
        return self.request("editMessageCaption", params)

    def edit_message_media(self, params: Optional[dict] = None) -> Future:
        return self.request("editMessageMedia", params)

    def edit_message_reply_markup(self, params: Optional[dict] = None) -> Future:
        return self.request("editMessageReplyMarkup", params)

    def stop_poll(
        self, chat_id: ChatId, message_id: int, reply_markup: Optional[dict] = None
    ) -> Future:
        return self.request(
            "stopPoll", {"chatId": chat_id, "messageId": message_id, "replyMarkup": reply_markup}
        )

    def delete_message(self, chat_id: ChatId, message_id: int) -> Future:
        return self.request("deleteMessage", {"chatId": chat_id, "messageId": message_id})

    # ------------------------------------------------------------------ #
    # Stickers                                                             #
    # ------------------------------------------------------------------ #

    def send_sticker(self, params: Optional[dict] = None) -> Future:
        return self.file_request("sendSticker", params)

    def get_sticker_set(self, name: str) -> Future:
        return self.request("getStickerSet", {"name": name})

    def upload_sticker_file(self, user_id: int, png_sticker: Any) -> Future:
        """Upload a .PNG once to reuse it in several sticker set calls."""
        return self.file_request("uploadStickerFile", {"userId": user_id, "pngSticker": png_sticker})

    def create_new_sticker_set(self, params: Optional[dict] = None) -> Future:
        return self.file_request("createNewStickerSet", params)

    def add_sticker_to_set(self, params: Optional[dict] = None) -> Future:
        return self.file_request("addStickerToSet", params)

    def set_sticker_position_in_set(self, sticker: str, position: int) -> Future:
        return self.request("setStickerPositionInSet", {"sticker": sticker, "position": position})

    def delete_sticker_from_set(self, sticker: str) -> Future:
        return self.request("deleteStickerFromSet", {"sticker": sticker})

    # ------------------------------------------------------------------ #
    # Inline mode, payments, passport, games                               #
    # ------------------------------------------------------------------ #

    def answer_inline_query(self, params: Optional[dict] = None) -> Future:
        return self.request("answerInlineQuery", params)

    def send_invoice(self, params: Optional[dict] = None) -> Future:
        return self.request("sendInvoice", params)

    def answer_shipping_query(self, params: Optional[dict] = None) -> Future:
        return self.request("answerShippingQuery", params)

    def answer_pre_checkout_query(
        self, pre_checkout_query_id: str, ok: bool, error_message: Optional[str] = None
    ) -> Future:
        return self.request(
            "answerPreCheckoutQuery",
            {
                "preCheckoutQueryId": pre_checkout_query_id,
                "ok": ok,
                "errorMessage": error_message,
            },
        )

    def set_passport_data_errors(self, user_id: int, errors: list) -> Future:
        return self.request("setPassportDataErrors", {"userId": user_id, "errors": errors})

    def send_game(self, params: Optional[dict] = None) -> Future:
        return self.request("sendGame", params)

    def set_game_score(self, params: Optional[dict] = None) -> Future:
        return self.request("setGameScore", params)

    def get_game_high_scores(self, params: Optional[dict] = None) -> Future:
        """Resolves to a list of GameHighScore objects."""
        return self.request("getGameHighScores", params)
