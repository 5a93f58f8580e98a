"""Optional capabilities a form-associated element may implement.

The form element queries these with ``isinstance`` before calling; an element
that does not implement a capability is skipped for that operation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .form import HTMLFormElement


@runtime_checkable
class FormOwnerListener(Protocol):
    def form_owner_changed(self, form: HTMLFormElement | None) -> None: ...


@runtime_checkable
class Validatable(Protocol):
    def check_validity(self) -> bool: ...


@runtime_checkable
class Resettable(Protocol):
    def form_reset(self) -> None: ...
