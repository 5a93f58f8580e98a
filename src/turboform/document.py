from .controls import (
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
from .errors import DOMError, NotSupportedError, StrictModeError
from .events import Event
from .form import HTMLFormElement
from .loader import ResourceLoader
from .node import Element, Node, iter_tree
from .reflect import ascii_lower

ELEMENT_CLASSES = {
    "button": HTMLButtonElement,
    "fieldset": HTMLFieldSetElement,
    "form": HTMLFormElement,
    "input": HTMLInputElement,
    "keygen": HTMLKeygenElement,
    "object": HTMLObjectElement,
    "option": HTMLOptionElement,
    "output": HTMLOutputElement,
    "select": HTMLSelectElement,
    "textarea": HTMLTextAreaElement,
}

EVENT_INTERFACES = frozenset(["event", "events", "htmlevents"])


class Document(Node):
    """Root of a node tree; creates nodes and events and collects errors.

    Args:
        url: The document's current URL, returned by ``form.action`` when no
            action attribute is set.
        base_url: URL that relative URLs resolve against (defaults to ``url``).
        loader: ResourceLoader used for URL resolution and form submission.
        collect_errors: Append reported DOMErrors to ``errors``.
        strict: Raise StrictModeError on the first reported error.
        debug: Print debug tracing to stdout.
    """

    __slots__ = (
        "_base_url",
        "active_element",
        "collect_errors",
        "env_debug",
        "errors",
        "loader",
        "mutation_count",
        "strict",
        "url",
    )

    def __init__(
        self,
        url="about:blank",
        *,
        base_url=None,
        loader=None,
        collect_errors=False,
        strict=False,
        debug=False,
    ):
        super().__init__("#document")
        self.url = url
        self._base_url = base_url
        self.loader = loader or ResourceLoader()
        self.strict = bool(strict)
        # Strict mode needs errors to raise on
        self.collect_errors = bool(collect_errors) or self.strict
        self.env_debug = bool(debug)
        self.errors = []
        self.active_element = None
        self.mutation_count = 0

    @property
    def base_url(self):
        return self._base_url or self.url

    @base_url.setter
    def base_url(self, value):
        self._base_url = value

    def _node_document(self):
        return self

    def _descendant_added(self, parent, child):
        self.mutation_count += 1
        self.debug(f"inserted {child!r} into {parent!r}")

    def _descendant_removed(self, parent, child):
        self.mutation_count += 1
        if self.active_element is not None and self.active_element.find_ancestor(lambda n: n is child):
            self.active_element = None
        self.debug(f"removed {child!r} from {parent!r}")

    def write_debug(self, message, indent=4):
        print(f"{' ' * indent}{message}")

    def report_error(self, error: DOMError):
        if self.strict:
            raise StrictModeError(error)
        if self.collect_errors:
            self.errors.append(error)
        self.debug(f"error: {error}")

    # Factories

    def create_element(self, tag_name, attributes=None):
        tag_name = ascii_lower(tag_name)
        element_class = ELEMENT_CLASSES.get(tag_name, Element)
        return element_class(tag_name, attributes, owner_document=self)

    def create_text_node(self, data):
        return Node("#text", owner_document=self, text_content=data)

    def create_event(self, interface):
        """Return an uninitialized Event; call ``init_event`` before dispatching it."""
        if ascii_lower(interface) not in EVENT_INTERFACES:
            msg = f"Unsupported event interface: {interface!r}"
            raise NotSupportedError(msg)
        return Event()

    def adopt_node(self, node):
        """Move ``node`` and its subtree into this document."""
        if node is self:
            msg = "A document cannot adopt itself"
            raise NotSupportedError(msg)
        if node.parent is not None:
            node.parent.remove_child(node)
        for descendant in iter_tree(node):
            descendant.owner_document = self
        return node

    def __repr__(self):
        return f"Document({self.url!r}, children={len(self.children)})"
