"""Custom exceptions for giftplan."""

from __future__ import annotations


class GiftplanError(Exception):
    """Base exception for giftplan."""


class ConfigError(GiftplanError):
    """Invalid configuration file, preset or locale."""


class InvalidInputError(GiftplanError, ValueError):
    """A projection input field is outside its documented domain.

    Attributes:
        field: Dotted path of the offending field, e.g. ``second_gift.at_year``.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message
