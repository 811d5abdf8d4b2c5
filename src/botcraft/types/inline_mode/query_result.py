from __future__ import annotations

from typing import TypeAlias, TypeVar, Union

from botcraft.types.builder import Builder, CaptionParams, InlineMarkupParams, PayloadBuilder
from botcraft.types.inline_mode.message_content import InputMessageContent

_B = TypeVar("_B", bound=Builder)


class _ContentParams(InlineMarkupParams):
    __slots__ = ()

    def input_message_content(self: _B, value: InputMessageContent) -> _B:
        """Message sent instead of the result itself."""
        return self._with("input_message_content", value)


class _ThumbParams(Builder):
    __slots__ = ()

    def thumb_url(self: _B, value: str) -> _B:
        return self._with("thumb_url", value)

    def thumb_width(self: _B, value: int) -> _B:
        return self._with("thumb_width", value)

    def thumb_height(self: _B, value: int) -> _B:
        return self._with("thumb_height", value)


class InlineQueryResultArticle(_ThumbParams, _ContentParams, PayloadBuilder):
    __slots__ = ()

    JSON_TYPE = "article"

    def __init__(self, id: str, title: str, input_message_content: InputMessageContent) -> None:
        super().__init__(id=id, title=title, input_message_content=input_message_content)

    def url(self, value: str) -> InlineQueryResultArticle:
        return self._with("url", value)

    def hide_url(self, value: bool) -> InlineQueryResultArticle:
        return self._with("hide_url", value)

    def description(self, value: str) -> InlineQueryResultArticle:
        return self._with("description", value)


class InlineQueryResultPhoto(CaptionParams, _ContentParams, PayloadBuilder):
    """Photo by URL (JPEG, up to 5MB), or a cached photo via `cached`."""

    __slots__ = ()

    JSON_TYPE = "photo"

    def __init__(self, id: str, photo_url: str, thumb_url: str) -> None:
        super().__init__(id=id, photo_url=photo_url, thumb_url=thumb_url)

    @classmethod
    def cached(cls, id: str, photo_file_id: str) -> InlineQueryResultPhoto:
        out = cls.__new__(cls)
        PayloadBuilder.__init__(out, id=id, photo_file_id=photo_file_id)
        return out

    def photo_width(self, value: int) -> InlineQueryResultPhoto:
        return self._with("photo_width", value)

    def photo_height(self, value: int) -> InlineQueryResultPhoto:
        return self._with("photo_height", value)

    def title(self, value: str) -> InlineQueryResultPhoto:
        return self._with("title", value)

    def description(self, value: str) -> InlineQueryResultPhoto:
        return self._with("description", value)


class InlineQueryResultGif(CaptionParams, _ContentParams, PayloadBuilder):
    __slots__ = ()

    JSON_TYPE = "gif"

    def __init__(self, id: str, gif_url: str, thumb_url: str) -> None:
        super().__init__(id=id, gif_url=gif_url, thumb_url=thumb_url)

    @classmethod
    def cached(cls, id: str, gif_file_id: str) -> InlineQueryResultGif:
        out = cls.__new__(cls)
        PayloadBuilder.__init__(out, id=id, gif_file_id=gif_file_id)
        return out

    def gif_width(self, value: int) -> InlineQueryResultGif:
        return self._with("gif_width", value)

    def gif_height(self, value: int) -> InlineQueryResultGif:
        return self._with("gif_height", value)

    def gif_duration(self, value: int) -> InlineQueryResultGif:
        return self._with("gif_duration", value)

    def thumb_mime_type(self, value: str) -> InlineQueryResultGif:
        """One of image/jpeg, image/gif or video/mp4."""
        return self._with("thumb_mime_type", value)

    def title(self, value: str) -> InlineQueryResultGif:
        return self._with("title", value)


class InlineQueryResultDocument(CaptionParams, _ThumbParams, _ContentParams, PayloadBuilder):
    __slots__ = ()

    JSON_TYPE = "document"

    def __init__(self, id: str, title: str, document_url: str, mime_type: str) -> None:
        super().__init__(id=id, title=title, document_url=document_url, mime_type=mime_type)

    @classmethod
    def cached(cls, id: str, title: str, document_file_id: str) -> InlineQueryResultDocument:
        out = cls.__new__(cls)
        PayloadBuilder.__init__(out, id=id, title=title, document_file_id=document_file_id)
        return out

    def description(self, value: str) -> InlineQueryResultDocument:
        return self._with("description", value)


class InlineQueryResultVoice(CaptionParams, _ContentParams, PayloadBuilder):
    __slots__ = ()

    JSON_TYPE = "voice"

    def __init__(self, id: str, voice_url: str, title: str) -> None:
        super().__init__(id=id, voice_url=voice_url, title=title)

    @classmethod
    def cached(cls, id: str, voice_file_id: str, title: str) -> InlineQueryResultVoice:
        out = cls.__new__(cls)
        PayloadBuilder.__init__(out, id=id, voice_file_id=voice_file_id, title=title)
        return out

    def voice_duration(self, value: int) -> InlineQueryResultVoice:
        return self._with("voice_duration", value)


class InlineQueryResultLocation(_ThumbParams, _ContentParams, PayloadBuilder):
    __slots__ = ()

    JSON_TYPE = "location"

    def __init__(self, id: str, latitude: float, longitude: float, title: str) -> None:
        super().__init__(id=id, latitude=latitude, longitude=longitude, title=title)

    def horizontal_accuracy(self, value: float) -> InlineQueryResultLocation:
        """Radius of uncertainty in meters, 0-1500."""
        return self._with("horizontal_accuracy", value)

    def live_period(self, value: int) -> InlineQueryResultLocation:
        return self._with("live_period", value)

    def heading(self, value: int) -> InlineQueryResultLocation:
        return self._with("heading", value)

    def proximity_alert_radius(self, value: int) -> InlineQueryResultLocation:
        return self._with("proximity_alert_radius", value)


class InlineQueryResultVenue(_ThumbParams, _ContentParams, PayloadBuilder):
    __slots__ = ()

    JSON_TYPE = "venue"

    def __init__(self, id: str, latitude: float, longitude: float, title: str, address: str) -> None:
        super().__init__(id=id, latitude=latitude, longitude=longitude, title=title, address=address)

    def foursquare_id(self, value: str) -> InlineQueryResultVenue:
        return self._with("foursquare_id", value)

    def foursquare_type(self, value: str) -> InlineQueryResultVenue:
        return self._with("foursquare_type", value)

    def google_place_id(self, value: str) -> InlineQueryResultVenue:
        return self._with("google_place_id", value)

    def google_place_type(self, value: str) -> InlineQueryResultVenue:
        return self._with("google_place_type", value)


class InlineQueryResultContact(_ThumbParams, _ContentParams, PayloadBuilder):
    __slots__ = ()

    JSON_TYPE = "contact"

    def __init__(self, id: str, phone_number: str, first_name: str) -> None:
        super().__init__(id=id, phone_number=phone_number, first_name=first_name)

    def last_name(self, value: str) -> InlineQueryResultContact:
        return self._with("last_name", value)

    def vcard(self, value: str) -> InlineQueryResultContact:
        return self._with("vcard", value)


class InlineQueryResultGame(InlineMarkupParams, PayloadBuilder):
    __slots__ = ()

    JSON_TYPE = "game"

    def __init__(self, id: str, game_short_name: str) -> None:
        super().__init__(id=id, game_short_name=game_short_name)


InlineQueryResult: TypeAlias = Union[
    InlineQueryResultArticle,
    InlineQueryResultPhoto,
    InlineQueryResultGif,
    InlineQueryResultDocument,
    InlineQueryResultVoice,
    InlineQueryResultLocation,
    InlineQueryResultVenue,
    InlineQueryResultContact,
    InlineQueryResultGame,
]
