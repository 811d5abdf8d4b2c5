from __future__ import annotations

from collections.abc import Iterable
from typing import TypeAlias, Union

from botcraft.types.builder import PayloadBuilder
from botcraft.types.parse_mode import ParseMode
from botcraft.types.text import TextEntity, check_text_entities


class InputMessageContentContact(PayloadBuilder):
    __slots__ = ()

    def __init__(self, phone_number: str, first_name: str) -> None:
        super().__init__(phone_number=phone_number, first_name=first_name)

    def last_name(self, value: str) -> InputMessageContentContact:
        return self._with("last_name", value)

    def vcard(self, value: str) -> InputMessageContentContact:
        """Additional data about the contact as a vCard, 0-2048 bytes."""
        return self._with("vcard", value)


class InputMessageContentLocation(PayloadBuilder):
    __slots__ = ()

    def __init__(self, latitude: float, longitude: float) -> None:
        super().__init__(latitude=latitude, longitude=longitude)

    def horizontal_accuracy(self, value: float) -> InputMessageContentLocation:
        return self._with("horizontal_accuracy", value)

    def live_period(self, value: int) -> InputMessageContentLocation:
        return self._with("live_period", value)

    def heading(self, value: int) -> InputMessageContentLocation:
        return self._with("heading", value)

    def proximity_alert_radius(self, value: int) -> InputMessageContentLocation:
        return self._with("proximity_alert_radius", value)


class InputMessageContentText(PayloadBuilder):
    __slots__ = ()

    def __init__(self, message_text: str) -> None:
        super().__init__(message_text=message_text)

    def entities(self, entities: Iterable[TextEntity]) -> InputMessageContentText:
        return self._with("entities", check_text_entities(entities), clear=("parse_mode",))

    def parse_mode(self, value: ParseMode) -> InputMessageContentText:
        return self._with("parse_mode", ParseMode(value), clear=("entities",))

    def disable_web_page_preview(self, value: bool) -> InputMessageContentText:
        return self._with("disable_web_page_preview", value)


class InputMessageContentVenue(PayloadBuilder):
    __slots__ = ()

    def __init__(self, latitude: float, longitude: float, title: str, address: str) -> None:
        super().__init__(latitude=latitude, longitude=longitude, title=title, address=address)

    def foursquare_id(self, value: str) -> InputMessageContentVenue:
        return self._with("foursquare_id", value)

    def foursquare_type(self, value: str) -> InputMessageContentVenue:
        return self._with("foursquare_type", value)

    def google_place_id(self, value: str) -> InputMessageContentVenue:
        return self._with("google_place_id", value)

    def google_place_type(self, value: str) -> InputMessageContentVenue:
        return self._with("google_place_type", value)


# Untagged on the wire: the variant is implied by its fields.
InputMessageContent: TypeAlias = Union[
    InputMessageContentContact,
    InputMessageContentLocation,
    InputMessageContentText,
    InputMessageContentVenue,
]
