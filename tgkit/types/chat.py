"""Chat-level objects: permissions, commands, polls, webhooks, queries and updates."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from tgkit.types.media import Location


@dataclass
class ChatPermissions:
    """Actions that a non-administrator user is allowed to take in a chat."""

    can_send_messages: bool = False
    can_send_media_messages: bool = False
    can_send_polls: bool = False
    can_send_other_messages: bool = False
    can_add_web_page_previews: bool = False
    can_change_info: bool = False
    can_invite_users: bool = False
    can_pin_messages: bool = False


@dataclass
class BotCommand:
    """A bot command and its description."""

    command: str = ""
    description: str = ""


@dataclass
class PollOption:
    """One answer option of a poll."""

    text: str = ""
    voter_count: int = 0


@dataclass
class ResponseParameters:
    """Why a request was unsuccessful."""

    migrate_to_chat_id: int = 0
    retry_after: int = 0


@dataclass
class WebhookInfo:
    """The current status of a webhook."""

    url: str = ""
    has_custom_certificate: bool = False
    pending_update_count: int = 0
    last_error_date: int = 0
    last_error_message: str = ""
    max_connections: int = 0
    allowed_updates: list[str] = field(default_factory=list)


@dataclass
class GameHighScore:
    """One row of the high scores table for a game."""

    position: str = ""
    user: Any = None
    score: int = 0


@dataclass
class InlineQuery:
    """An incoming inline query; ``from_user`` is the sender."""

    id: str = ""
    from_user: Any = None
    location: Location | None = None
    query: str = ""
    offset: str = ""


@dataclass
class CallbackQuery:
    """An incoming callback query from a button in an inline keyboard."""

    id: str = ""
    from_user: Any = None
    message: Any = None
    inline_message_id: str = ""
    chat_instance: str = ""
    data: str = ""
    game_short_name: str = ""


@dataclass
class Update:
    """An incoming update; at most one of the optional parts is set."""

    update_id: int = 0
    message: Any = None
    edited_message: Any = None
    channel_post: Any = None
    edited_channel_post: Any = None
    inline_query: InlineQuery | None = None
    chosen_inline_result: Any = None
    callback_query: CallbackQuery | None = None
    shipping_query: Any = None
    pre_checkout_query: Any = None