"""Results that answer an inline query."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar


@dataclass
class InlineQueryResult:
    """Base of all inline query results; ``type`` is fixed by the subclass."""

    TYPE: ClassVar[str] = ""

    type: str = field(init=False, default="")

    def __post_init__(self) -> None:
        self.type = type(self).TYPE


@dataclass
class InlineQueryResultArticle(InlineQueryResult):
    """A link to an article or web page."""

    TYPE: ClassVar[str] = "article"

    url: str = ""
    hide_url: bool = False
    description: str = ""
    thumb_url: str = ""
    thumb_width: int = 0
    thumb_height: int = 0


@dataclass
class InlineQueryResultCachedDocument(InlineQueryResult):
    """A link to a file stored on the servers."""

    TYPE: ClassVar[str] = "document"

    document_file_id: str = ""
    description: str = ""


@dataclass
class InlineQueryResultCachedPhoto(InlineQueryResult):
    """A link to a photo stored on the servers."""

    TYPE: ClassVar[str] = "photo"

    photo_file_id: str = ""
    description: str = ""


@dataclass
class InlineQueryResultCachedVoice(InlineQueryResult):
    """A link to a voice message stored on the servers."""

    TYPE: ClassVar[str] = "voice"

    voice_file_id: str = ""


@dataclass
class InlineQueryResultGame(InlineQueryResult):
    """A game."""

    TYPE: ClassVar[str] = "game"

    game_short_name: str = ""


@dataclass
class InlineQueryResultGif(InlineQueryResult):
    """A link to an animated GIF file."""

    TYPE: ClassVar[str] = "gif"

    gif_url: str = ""
    gif_width: int = 0
    gif_height: int = 0
    gif_duration: int = 0
    thumb_url: str = ""


@dataclass
class InlineQueryResultPhoto(InlineQueryResult):
    """A link to a photo."""

    TYPE: ClassVar[str] = "photo"

    photo_url: str = ""
    thumb_url: str = ""
    photo_width: int = 0
    photo_height: int = 0
    description: str = ""


@dataclass
class InlineQueryResultVoice(InlineQueryResult):
    """A link to a voice recording."""

    TYPE: ClassVar[str] = "voice"

    voice_url: str = ""
    voice_duration: int = 0