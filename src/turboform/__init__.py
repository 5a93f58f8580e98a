from .collection import HTMLFormControlsCollection
from .controls import (
    FormAssociatedElement,
    HTMLButtonElement,
    HTMLFieldSetElement,
    HTMLInputElement,
    HTMLKeygenElement,
    HTMLObjectElement,
    HTMLOptionElement,
    HTMLOutputElement,
    HTMLSelectElement,
    HTMLTextAreaElement,
)
from .document import Document
from .errors import DOMError, DOMException, InvalidStateError, NotSupportedError, StrictModeError
from .events import Event, EventTarget
from .form import HTMLFormElement, ValidationResult
from .loader import RecordingLoader, ResourceLoader
from .node import Element, Node, iter_tree

__all__ = [
    "DOMError",
    "DOMException",
    "Document",
    "Element",
    "Event",
    "EventTarget",
    "FormAssociatedElement",
    "HTMLButtonElement",
    "HTMLFieldSetElement",
    "HTMLFormControlsCollection",
    "HTMLFormElement",
    "HTMLInputElement",
    "HTMLKeygenElement",
    "HTMLObjectElement",
    "HTMLOptionElement",
    "HTMLOutputElement",
    "HTMLSelectElement",
    "HTMLTextAreaElement",
    "InvalidStateError",
    "Node",
    "NotSupportedError",
    "RecordingLoader",
    "ResourceLoader",
    "StrictModeError",
    "ValidationResult",
    "iter_tree",
]
