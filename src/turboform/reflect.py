"""Attribute reflection descriptors.

Element properties backed by content attributes. Reads interpret the stored
text; writes store the given value verbatim so invalid values are tolerated in
storage and only resolved at read time.
"""

from __future__ import annotations

from collections.abc import Collection

_ASCII_UPPER_TO_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")


def ascii_lower(value: str) -> str:
    """Lowercase ASCII letters only, leaving every other character untouched."""
    return value.translate(_ASCII_UPPER_TO_LOWER)


class ReflectedAttribute:
    """A plain string attribute; missing reads as the empty string."""

    __slots__ = ("attribute",)

    def __init__(self, attribute: str) -> None:
        self.attribute = attribute

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        value = instance.get_attribute(self.attribute)
        return "" if value is None else value

    def __set__(self, instance, value) -> None:
        instance.set_attribute(self.attribute, value)


class ReflectedBooleanAttribute:
    """Presence of the attribute means True."""

    __slots__ = ("attribute",)

    def __init__(self, attribute: str) -> None:
        self.attribute = attribute

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return instance.has_attribute(self.attribute)

    def __set__(self, instance, value) -> None:
        if value:
            instance.set_attribute(self.attribute, "")
        else:
            instance.remove_attribute(self.attribute)


class EnumeratedAttribute:
    """An attribute limited to a closed set of keywords with a fallback default.

    The getter lowercases the stored value and returns it when it is one of the
    allowed keywords; a missing or unknown value reads as ``default``.
    """

    __slots__ = ("allowed", "attribute", "default")

    def __init__(self, attribute: str, allowed: Collection[str], default: str) -> None:
        self.attribute = attribute
        self.allowed = frozenset(allowed)
        self.default = default

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        value = instance.get_attribute(self.attribute)
        if value is not None:
            value = ascii_lower(value)
        if value in self.allowed:
            return value
        return self.default

    def __set__(self, instance, value) -> None:
        instance.set_attribute(self.attribute, value)
