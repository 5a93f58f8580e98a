"""Form-associated elements.

Each control keeps a back-reference to its owning form, updated by the form
when the control is inserted into or removed from it. Constraint rules are
deliberately small: a control is invalid when it is required and has no value,
or when a custom validity message is set. ``check_validity()`` here is a pure
check; the owning form dispatches the "invalid" events.
"""

from .constants import BARRED_INPUT_TYPES, BUTTON_TYPES, CHECKABLE_INPUT_TYPES, INPUT_TYPES
from .form import listed_elements_of
from .node import Element, Node, iter_tree
from .reflect import ReflectedAttribute, ReflectedBooleanAttribute, ascii_lower


class FormAssociatedElement(Element):
    __slots__ = ("_custom_validity", "_form")

    name = ReflectedAttribute("name")
    disabled = ReflectedBooleanAttribute("disabled")

    def __init__(self, tag_name, attributes=None, owner_document=None):
        super().__init__(tag_name, attributes, owner_document=owner_document)
        self._form = None
        self._custom_validity = ""

    @property
    def form(self):
        """The owning form, or None when not inside one."""
        return self._form

    def form_owner_changed(self, form):
        if form is self._form:
            return
        self._form = form
        self.debug(f"<{self.tag_name}> form owner is now {form!r}")

    def _is_disabled(self):
        if self.has_attribute("disabled"):
            return True
        ancestor = self.parent
        while ancestor is not None:
            if ancestor.tag_name == "fieldset" and "disabled" in ancestor.attributes:
                return True
            ancestor = ancestor.parent
        return False

    def _is_focusable(self):
        return not self._is_disabled()

    # Constraint validation

    def _is_barred(self):
        return self._is_disabled()

    @property
    def will_validate(self):
        return not self._is_barred()

    def _value_missing(self):
        return False

    def set_custom_validity(self, message):
        self._custom_validity = str(message)

    @property
    def validation_message(self):
        if not self.will_validate:
            return ""
        if self._custom_validity:
            return self._custom_validity
        if self._value_missing():
            return "Please fill out this field."
        return ""

    def check_validity(self):
        if not self.will_validate:
            return True
        return not self._custom_validity and not self._value_missing()


class HTMLInputElement(FormAssociatedElement):
    __slots__ = ("_checked", "_dirty_checkedness", "_dirty_value", "_value")

    default_value = ReflectedAttribute("value")
    default_checked = ReflectedBooleanAttribute("checked")
    required = ReflectedBooleanAttribute("required")
    read_only = ReflectedBooleanAttribute("readonly")

    def __init__(self, tag_name="input", attributes=None, owner_document=None):
        super().__init__(tag_name, attributes, owner_document=owner_document)
        self._value = ""
        self._dirty_value = False
        self._checked = False
        self._dirty_checkedness = False

    @property
    def type(self):
        value = ascii_lower(self.get_attribute("type") or "")
        return value if value in INPUT_TYPES else "text"

    @type.setter
    def type(self, value):
        self.set_attribute("type", value)

    @property
    def value(self):
        if self._dirty_value:
            return self._value
        default = self.get_attribute("value")
        if default is None:
            return "on" if self.type in CHECKABLE_INPUT_TYPES else ""
        return default

    @value.setter
    def value(self, value):
        self._value = str(value)
        self._dirty_value = True

    @property
    def checked(self):
        if self._dirty_checkedness:
            return self._checked
        return self.has_attribute("checked")

    @checked.setter
    def checked(self, value):
        self._checked = bool(value)
        self._dirty_checkedness = True

    def _is_focusable(self):
        return self.type != "hidden" and super()._is_focusable()

    def _is_barred(self):
        return self.type in BARRED_INPUT_TYPES or self.read_only or super()._is_barred()

    def _value_missing(self):
        if not self.required:
            return False
        if self.type in CHECKABLE_INPUT_TYPES:
            return not self.checked
        return self.value == ""

    def form_reset(self):
        self._dirty_value = False
        self._value = ""
        self._dirty_checkedness = False
        self._checked = False


class HTMLButtonElement(FormAssociatedElement):
    __slots__ = ()

    @property
    def type(self):
        value = ascii_lower(self.get_attribute("type") or "")
        return value if value in BUTTON_TYPES else "submit"

    @type.setter
    def type(self, value):
        self.set_attribute("type", value)

    def _is_barred(self):
        # Buttons never take part in constraint validation
        return True

    def activate(self):
        """Run the button's activation behavior against its form.

        Returns True when a submission or reset took place.
        """
        form = self.form
        if form is None or self._is_disabled():
            return False
        if self.type == "submit":
            return form.request_submit()
        if self.type == "reset":
            form.reset()
            return True
        return False


class HTMLTextAreaElement(FormAssociatedElement):
    __slots__ = ("_dirty_value", "_value")

    required = ReflectedBooleanAttribute("required")
    read_only = ReflectedBooleanAttribute("readonly")

    def __init__(self, tag_name="textarea", attributes=None, owner_document=None):
        super().__init__(tag_name, attributes, owner_document=owner_document)
        self._value = ""
        self._dirty_value = False

    @property
    def default_value(self):
        return self.text

    @property
    def value(self):
        if self._dirty_value:
            return self._value
        return self.default_value

    @value.setter
    def value(self, value):
        self._value = str(value)
        self._dirty_value = True

    def _is_barred(self):
        return self.read_only or super()._is_barred()

    def _value_missing(self):
        return self.required and self.value == ""

    def form_reset(self):
        self._dirty_value = False
        self._value = ""


class HTMLOptionElement(Element):
    __slots__ = ("_dirty_selectedness", "_selectedness")

    default_selected = ReflectedBooleanAttribute("selected")

    def __init__(self, tag_name="option", attributes=None, owner_document=None):
        super().__init__(tag_name, attributes, owner_document=owner_document)
        self._selectedness = False
        self._dirty_selectedness = False

    @property
    def selected(self):
        if self._dirty_selectedness:
            return self._selectedness
        return self.has_attribute("selected")

    @selected.setter
    def selected(self, value):
        self._selectedness = bool(value)
        self._dirty_selectedness = True

    @property
    def value(self):
        value = self.get_attribute("value")
        return self.text if value is None else value


class HTMLSelectElement(FormAssociatedElement):
    __slots__ = ()

    required = ReflectedBooleanAttribute("required")
    multiple = ReflectedBooleanAttribute("multiple")

    @property
    def options(self):
        return [node for node in iter_tree(self) if node.tag_name == "option"]

    @property
    def selected_index(self):
        options = self.options
        for index, option in enumerate(options):
            if option.selected:
                return index
        # A single-choice select displays its first option when none is selected
        if options and not self.multiple:
            return 0
        return -1

    @property
    def value(self):
        index = self.selected_index
        return self.options[index].value if index >= 0 else ""

    def _value_missing(self):
        return self.required and self.value == ""

    def form_reset(self):
        for option in self.options:
            option._dirty_selectedness = False
            option._selectedness = False


class HTMLFieldSetElement(FormAssociatedElement):
    __slots__ = ()

    def _is_barred(self):
        return True

    @property
    def elements(self):
        return listed_elements_of(self)


class HTMLOutputElement(FormAssociatedElement):
    __slots__ = ("_default_value_override",)

    def __init__(self, tag_name="output", attributes=None, owner_document=None):
        super().__init__(tag_name, attributes, owner_document=owner_document)
        self._default_value_override = None

    @property
    def default_value(self):
        if self._default_value_override is not None:
            return self._default_value_override
        return self.text

    @property
    def value(self):
        return self.text

    @value.setter
    def value(self, value):
        if self._default_value_override is None:
            self._default_value_override = self.text
        for child in list(self.children):
            self.remove_child(child)
        if value:
            self.append_child(Node("#text", owner_document=self.owner_document, text_content=str(value)))

    def _is_barred(self):
        return True

    def form_reset(self):
        default = self.default_value
        self._default_value_override = None
        for child in list(self.children):
            self.remove_child(child)
        if default:
            self.append_child(Node("#text", owner_document=self.owner_document, text_content=default))


class HTMLObjectElement(FormAssociatedElement):
    __slots__ = ()

    def _is_barred(self):
        return True


class HTMLKeygenElement(FormAssociatedElement):
    __slots__ = ()

    def _is_barred(self):
        return True
