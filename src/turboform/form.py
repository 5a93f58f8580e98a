"""The form element.

A form owns no controls directly. Ownership follows tree containment: whenever
a subtree is inserted below a form or removed from it, the form walks that
subtree and tells every form-associated element who its owner is now. The
listed controls are recomputed from the tree on every access.

Validation runs in two phases. The static phase asks every submittable control
whether it is valid and fires a cancelable "invalid" event at each one that is
not. The interactive phase runs the static phase and then, for an invalid form,
focuses the first control whose "invalid" event went unhandled.
"""

from __future__ import annotations

from dataclasses import dataclass

from . import flags
from .collection import HTMLFormControlsCollection
from .constants import (
    DEFAULT_FORM_ENCTYPE,
    DEFAULT_FORM_METHOD,
    FORM_ENCTYPES,
    FORM_METHODS,
    LISTED_ELEMENTS,
    SUBMITTABLE_ELEMENTS,
)
from .events import Event
from .interfaces import FormOwnerListener, Resettable, Validatable
from .node import Element, iter_tree
from .reflect import EnumeratedAttribute, ReflectedAttribute, ReflectedBooleanAttribute, ascii_lower


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of a validation pass.

    ``unhandled_invalid_controls`` is only set when ``valid`` is False.
    """

    valid: bool
    unhandled_invalid_controls: tuple[Element, ...] | None = None


def is_listed_element(node) -> bool:
    if node.tag_name not in LISTED_ELEMENTS:
        return False
    if flags.EXCLUDE_IMAGE_BUTTONS and node.tag_name == "input":
        return ascii_lower(node.attributes.get("type", "")) != "image"
    return True


def listed_elements_of(root) -> HTMLFormControlsCollection:
    """Live collection of listed elements below ``root`` from the same document."""
    document = root.owner_document

    def predicate(node):
        return node.owner_document is document and is_listed_element(node)

    return HTMLFormControlsCollection(root, predicate)


def nearest_form(node) -> HTMLFormElement | None:
    """Return the closest form strictly above ``node``."""
    ancestor = node.parent
    while ancestor is not None:
        if isinstance(ancestor, HTMLFormElement):
            return ancestor
        ancestor = ancestor.parent
    return None


class HTMLFormElement(Element):
    __slots__ = ()

    method = EnumeratedAttribute("method", FORM_METHODS, DEFAULT_FORM_METHOD)
    enctype = EnumeratedAttribute("enctype", FORM_ENCTYPES, DEFAULT_FORM_ENCTYPE)
    encoding = enctype
    name = ReflectedAttribute("name")
    target = ReflectedAttribute("target")
    no_validate = ReflectedBooleanAttribute("novalidate")

    def __init__(self, tag_name="form", attributes=None, owner_document=None):
        super().__init__(tag_name, attributes, owner_document=owner_document)

    # Tree membership

    def _descendant_added(self, parent, child):
        for node in iter_tree(child):
            # A form nested below this one owns its own descendants
            if isinstance(node, FormOwnerListener) and nearest_form(node) is self:
                node.form_owner_changed(self)
        super()._descendant_added(parent, child)

    def _descendant_removed(self, parent, child):
        # Only the form closest to the removal point walks the subtree
        if parent.find_ancestor(lambda node: isinstance(node, HTMLFormElement)) is self:
            for node in iter_tree(child):
                if isinstance(node, FormOwnerListener):
                    # None unless the removed subtree carries its own form
                    node.form_owner_changed(nearest_form(node))
        super()._descendant_removed(parent, child)

    # Listed controls

    @property
    def elements(self):
        return listed_elements_of(self)

    @property
    def length(self):
        return len(self.elements)

    def _submittable_controls(self):
        return [node for node in self.elements if node.tag_name in SUBMITTABLE_ELEMENTS]

    # Validation

    def _static_validate(self):
        controls = self._submittable_controls()
        invalid_controls = [
            control for control in controls if isinstance(control, Validatable) and not control.check_validity()
        ]

        if not invalid_controls:
            self.debug(f"static validation passed for {len(controls)} controls")
            return ValidationResult(valid=True)

        unhandled_invalid_controls = []
        for control in invalid_controls:
            event = Event("invalid", bubbles=False, cancelable=True)
            not_canceled = control.dispatch_event(event)
            if not_canceled or flags.KEEP_CANCELED_INVALID_CONTROLS:
                unhandled_invalid_controls.append(control)
            else:
                self.debug(f"'invalid' event on <{control.tag_name}> was handled by a listener")

        self.debug(f"static validation failed: {len(invalid_controls)} invalid controls")
        return ValidationResult(valid=False, unhandled_invalid_controls=tuple(unhandled_invalid_controls))

    def _interactive_validate(self):
        result = self._static_validate()
        if result.valid:
            return result

        if not flags.INTERACTIVE_VALIDATION_REPORTS:
            return None

        if result.unhandled_invalid_controls:
            first = result.unhandled_invalid_controls[0]
            first.focus()
            for control in result.unhandled_invalid_controls:
                message = getattr(control, "validation_message", "")
                self.debug(f"invalid <{control.tag_name}>: {message}")
        return result

    def check_validity(self):
        return self._static_validate()

    def report_validity(self):
        return self._interactive_validate()

    # Submission

    @property
    def action(self):
        document = self.owner_document
        value = self.get_attribute("action")
        if value is None or value == "":
            return document.url if document is not None else ""
        if document is None:
            return value
        return document.loader.resolve_url(document, value)

    @action.setter
    def action(self, value):
        self.set_attribute("action", value)

    def _dispatch_submit_event(self):
        """Fire "submit" at the form and submit unless a listener cancels it."""
        document = self.owner_document
        event = document.create_event("HTMLEvents") if document is not None else Event()
        event.init_event("submit", True, True)
        if self.dispatch_event(event):
            self.submit()
            return True
        self.debug("submit event was cancelled")
        return False

    def request_submit(self):
        """Validate interactively (unless novalidate is set), then fire "submit"."""
        if not self.no_validate:
            result = self._interactive_validate()
            if result is None or not result.valid:
                return False
        return self._dispatch_submit_event()

    def submit(self):
        document = self.owner_document
        if document is None:
            return
        document.loader.submit_form(self)

    def reset(self):
        for element in list(self.elements):
            if isinstance(element, Resettable):
                element.form_reset()
