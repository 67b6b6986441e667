"""Media objects: photos, audio, stickers, files and content to upload."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

from tgkit.tools.files import read_file
from tgkit.tools.strings import split


@dataclass
class PhotoSize:
    """One size of a photo or a file or sticker thumbnail."""

    file_id: str = ""
    width: int = 0
    height: int = 0
    file_size: int = 0


@dataclass
class Animation:
    """An animation file shown in a message that contains a game."""

    file_id: str = ""
    thumb: PhotoSize | None = None
    file_name: str = ""
    mime_type: str = ""
    file_size: int = 0


@dataclass
class Audio:
    """An audio file."""

    file_id: str = ""
    duration: int = 0
    performer: str = ""
    title: str = ""
    mime_type: str = ""
    file_size: int = 0
    thumb: PhotoSize | None = None


@dataclass
class Voice:
    """A voice note."""

    file_id: str = ""
    duration: int = 0
    mime_type: str = ""
    file_size: int = 0


@dataclass
class MaskPosition:
    """Where on a face a mask should be placed by default."""

    point: str = ""
    x_shift: float = 0.0
    y_shift: float = 0.0
    scale: float = 0.0


@dataclass
class Sticker:
    """A sticker."""

    file_id: str = ""
    width: int = 0
    height: int = 0
    is_animated: bool = False
    thumb: PhotoSize | None = None
    emoji: str = ""
    set_name: str = ""
    mask_position: MaskPosition | None = None
    file_size: int = 0


@dataclass
class File:
    """A file ready to be downloaded."""

    file_id: str = ""
    file_size: int = 0
    file_path: str = ""


@dataclass
class Location:
    """A point on the map."""

    longitude: float = 0.0
    latitude: float = 0.0


@dataclass
class Contact:
    """A phone contact."""

    phone_number: str = ""
    first_name: str = ""
    last_name: str = ""
    user_id: str = ""
    vcard: str = ""


@dataclass
class InputFile:
    """The contents of a file to be uploaded."""

    data: bytes = b""
    mime_type: str = ""
    file_name: str = ""

    @classmethod
    def from_file(cls, file_path: str | os.PathLike[str], mime_type: str) -> InputFile:
        """Read ``file_path`` into a new InputFile named after its last path part.

        Raises OSError if the file cannot be read.
        """
        path = os.fspath(file_path)
        data = read_file(path)
        pieces = split(path, "/")
        return cls(data=data, mime_type=mime_type, file_name=pieces[-1] if pieces else "")


class InputMediaType(Enum):
    """Kinds of media that can be sent."""

    PHOTO = "photo"
    VIDEO = "video"
    ANIMATION = "animation"
    DOCUMENT = "document"
    AUDIO = "audio"


@dataclass
class InputMedia:
    """The content of a media message to be sent."""

    type: InputMediaType
    media: str = ""
    thumb: str = ""
    caption: str = ""
    parse_mode: str = ""
    width: int = 0
    height: int = 0
    duration: int = 0
    performer: int = 0
    title: int = 0
    supports_streaming: bool = False