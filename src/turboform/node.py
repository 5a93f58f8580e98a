from .events import EventTarget
from .reflect import ascii_lower


def iter_tree(root):
    """Yield ``root`` and all of its descendants in tree order (pre-order)."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        if node.children:
            stack.extend(reversed(node.children))


class Node(EventTarget):
    """Represents a DOM-like node.
    - tag_name: e.g., 'div', 'form', etc. Use '#text' for text nodes.
    - attributes: dict of attributes (names lowercased)
    - children: list of child Nodes
    - parent: reference to parent Node (or None for root)
    - next_sibling/previous_sibling: references to adjacent nodes in the tree.
    - owner_document: the Document that created the node (None for a Document).

    Every insertion calls ``_descendant_added(parent, child)`` on the new parent and
    every removal calls ``_descendant_removed(parent, child)`` on the old parent. The
    base hooks forward the call up the ancestor chain, so subclasses that override
    them must chain to ``super()``.
    """

    __slots__ = (
        "_listeners",
        "attributes",
        "children",
        "next_sibling",
        "owner_document",
        "parent",
        "previous_sibling",
        "tag_name",
        "text_content",
    )

    def __init__(self, tag_name, attributes=None, owner_document=None, text_content=None):
        if tag_name is None or tag_name == "":
            msg = "Empty tag_name passed to Node constructor"
            raise ValueError(msg)

        self.tag_name = tag_name
        if attributes:
            # Lowercase attribute names deterministically; keep first occurrence
            lowered = {}
            for k, v in attributes.items():
                lk = ascii_lower(k)
                # None means absent; other values are stored as text like set_attribute
                if v is not None and lk not in lowered:
                    lowered[lk] = str(v)
            self.attributes = lowered
        else:
            self.attributes = {}
        self.children = []
        self.parent = None
        self.owner_document = owner_document
        # For text and comment nodes store inline text; for element nodes this is unused
        self.text_content = text_content if text_content is not None else ""
        self.next_sibling = None
        self.previous_sibling = None
        self._listeners = None

    # Mutation hooks

    def _descendant_added(self, parent, child):
        if self.parent is not None:
            self.parent._descendant_added(parent, child)

    def _descendant_removed(self, parent, child):
        if self.parent is not None:
            self.parent._descendant_removed(parent, child)

    def _node_document(self):
        return self.owner_document

    def debug(self, message, indent=4):
        # Only format through the document if debugging is on
        document = self._node_document()
        if document is not None and document.env_debug:
            document.write_debug(f"{self.__class__.__name__}: {message}", indent=indent)

    @property
    def is_connected(self):
        """True when the node's root is its document."""
        root = self
        while root.parent is not None:
            root = root.parent
        return root._node_document() is root

    def _unlink(self, child):
        """Detach ``child`` from its current parent and notify that parent."""
        old_parent = child.parent
        if old_parent is None:
            return
        if child.previous_sibling:
            child.previous_sibling.next_sibling = child.next_sibling
        if child.next_sibling:
            child.next_sibling.previous_sibling = child.previous_sibling
        old_parent.children.remove(child)
        child.parent = None
        child.next_sibling = None
        child.previous_sibling = None
        old_parent._descendant_removed(old_parent, child)

    def append_child(self, child):
        if self._would_create_circular_reference(child):
            msg = f"Adding {child.tag_name} as child of {self.tag_name} would create circular reference"
            raise ValueError(msg)

        self._unlink(child)

        # Update sibling links in new location
        if self.children:
            self.children[-1].next_sibling = child
            child.previous_sibling = self.children[-1]
        else:
            child.previous_sibling = None

        child.parent = self
        child.next_sibling = None
        self.children.append(child)
        self._descendant_added(self, child)
        return child

    def _would_create_circular_reference(self, child):
        """Check if adding child would create a circular reference."""
        current = self
        while current is not None:
            if current is child:
                return True  # Self is child or a descendant of child
            current = current.parent
        return False

    def insert_child_at(self, index, child):
        """Insert a child at the specified index."""
        if self._would_create_circular_reference(child):
            msg = f"Adding {child.tag_name} as child of {self.tag_name} would create circular reference"
            raise ValueError(msg)

        self._unlink(child)

        # Append at end if index is out of bounds
        if index < 0 or index >= len(self.children):
            return self.append_child(child)

        child.parent = self
        self.children.insert(index, child)

        if index == 0:
            child.previous_sibling = None
        else:
            child.previous_sibling = self.children[index - 1]
            self.children[index - 1].next_sibling = child
        child.next_sibling = self.children[index + 1]
        self.children[index + 1].previous_sibling = child

        self._descendant_added(self, child)
        return child

    def insert_before(self, new_node, reference_node):
        if reference_node is None:
            return self.append_child(new_node)
        if reference_node not in self.children:
            msg = f"{reference_node!r} is not a child of {self!r}"
            raise ValueError(msg)
        if new_node is reference_node:
            return new_node
        if self._would_create_circular_reference(new_node):
            msg = f"Adding {new_node.tag_name} as child of {self.tag_name} would create circular reference"
            raise ValueError(msg)

        self._unlink(new_node)

        idx = self.children.index(reference_node)
        new_node.parent = self
        self.children.insert(idx, new_node)

        # Update sibling pointers
        new_node.next_sibling = reference_node
        new_node.previous_sibling = reference_node.previous_sibling
        reference_node.previous_sibling = new_node
        if new_node.previous_sibling:
            new_node.previous_sibling.next_sibling = new_node

        self._descendant_added(self, new_node)
        return new_node

    def remove_child(self, child):
        """Remove a child node, updating all sibling links.

        Args:
            child: The Node to remove

        """
        if child.parent is not self:
            msg = f"{child!r} is not a child of {self!r}"
            raise ValueError(msg)
        self._unlink(child)
        return child

    def remove(self):
        """Remove this node from its parent, if it has one."""
        if self.parent is not None:
            self.parent.remove_child(self)

    def find_ancestor(self, tag_name_or_predicate):
        """Find the nearest ancestor matching the given tag name or predicate.
        Includes the current node in the search.

        Args:
            tag_name_or_predicate: Tag name or callable that takes a Node and returns bool

        Returns:
            The matching ancestor Node or None if not found

        """
        if callable(tag_name_or_predicate):
            predicate = tag_name_or_predicate
        else:
            def predicate(node):
                return node.tag_name == tag_name_or_predicate

        current = self
        while current is not None:
            if predicate(current):
                return current
            current = current.parent
        return None

    def __repr__(self):
        if self.tag_name == "#text":
            return f"Node(#text='{self.text_content[:30]}')"
        return f"{self.__class__.__name__}(<{self.tag_name}>, children={len(self.children)})"


class Element(Node):
    """An element node with attribute access and focus support."""

    __slots__ = ()

    def get_attribute(self, name):
        return self.attributes.get(ascii_lower(name))

    def set_attribute(self, name, value):
        self.attributes[ascii_lower(name)] = str(value)

    def has_attribute(self, name):
        return ascii_lower(name) in self.attributes

    def remove_attribute(self, name):
        self.attributes.pop(ascii_lower(name), None)

    @property
    def id(self):
        return self.attributes.get("id", "")

    @property
    def text(self):
        """Concatenated data of all descendant text nodes."""
        return "".join(node.text_content for node in iter_tree(self) if node.tag_name == "#text")

    def _is_focusable(self):
        return False

    def focus(self):
        """Make this element the document's active element, if it can take focus."""
        document = self.owner_document
        if document is None or not self.is_connected or not self._is_focusable():
            return False
        document.active_element = self
        self.debug(f"focused <{self.tag_name}>")
        return True

    def blur(self):
        document = self.owner_document
        if document is not None and document.active_element is self:
            document.active_element = None
