"""Constraint rules and defaults of the individual form controls."""

import unittest

from turboform import (
    Document,
    HTMLButtonElement,
    HTMLFieldSetElement,
    HTMLInputElement,
    HTMLOutputElement,
    HTMLSelectElement,
    HTMLTextAreaElement,
)
from turboform.interfaces import FormOwnerListener, Resettable, Validatable


class TestElementClasses(unittest.TestCase):
    def test_create_element_picks_control_classes(self):
        doc = Document()
        assert isinstance(doc.create_element("INPUT"), HTMLInputElement)
        assert isinstance(doc.create_element("button"), HTMLButtonElement)
        assert isinstance(doc.create_element("select"), HTMLSelectElement)
        assert isinstance(doc.create_element("textarea"), HTMLTextAreaElement)
        assert isinstance(doc.create_element("fieldset"), HTMLFieldSetElement)
        assert isinstance(doc.create_element("output"), HTMLOutputElement)

    def test_capabilities(self):
        doc = Document()
        field = doc.create_element("input")
        assert isinstance(field, FormOwnerListener)
        assert isinstance(field, Validatable)
        assert isinstance(field, Resettable)

        div = doc.create_element("div")
        assert not isinstance(div, FormOwnerListener)
        assert not isinstance(div, Resettable)
        assert not isinstance(doc.create_element("button"), Resettable)


class TestInput(unittest.TestCase):
    def setUp(self):
        self.doc = Document()

    def test_type_defaults_to_text(self):
        assert self.doc.create_element("input").type == "text"
        assert self.doc.create_element("input", {"type": "Email"}).type == "email"
        assert self.doc.create_element("input", {"type": "bogus"}).type == "text"

    def test_value_and_default_value(self):
        field = self.doc.create_element("input", {"value": "start"})
        assert field.value == "start"
        field.value = "typed"
        assert field.value == "typed"
        assert field.default_value == "start"

    def test_checkbox_value_defaults_to_on(self):
        assert self.doc.create_element("input", {"type": "checkbox"}).value == "on"

    def test_required_text(self):
        field = self.doc.create_element("input", {"required": ""})
        assert field.check_validity() is False
        assert field.validation_message == "Please fill out this field."
        field.value = "x"
        assert field.check_validity() is True
        assert field.validation_message == ""

    def test_required_checkbox(self):
        box = self.doc.create_element("input", {"type": "checkbox", "required": ""})
        assert box.check_validity() is False
        box.checked = True
        assert box.check_validity() is True

    def test_check_validity_fires_no_events(self):
        field = self.doc.create_element("input", {"required": ""})
        events = []
        field.add_event_listener("invalid", events.append)
        field.check_validity()
        assert events == []

    def test_will_validate(self):
        assert self.doc.create_element("input").will_validate is True
        assert self.doc.create_element("input", {"type": "submit"}).will_validate is False
        assert self.doc.create_element("input", {"disabled": ""}).will_validate is False


class TestButton(unittest.TestCase):
    def test_type(self):
        doc = Document()
        assert doc.create_element("button").type == "submit"
        assert doc.create_element("button", {"type": "RESET"}).type == "reset"
        assert doc.create_element("button", {"type": "other"}).type == "submit"

    def test_never_validates(self):
        button = Document().create_element("button")
        button.set_custom_validity("ignored")
        assert button.will_validate is False
        assert button.check_validity() is True


class TestTextArea(unittest.TestCase):
    def test_default_value_is_text_content(self):
        doc = Document()
        area = doc.create_element("textarea", {"required": ""})
        assert area.check_validity() is False
        area.append_child(doc.create_text_node("hello"))
        assert area.value == "hello"
        assert area.check_validity() is True


class TestSelect(unittest.TestCase):
    def setUp(self):
        self.doc = Document()
        self.select = self.doc.create_element("select", {"required": ""})

    def add_option(self, value, **attributes):
        attributes["value"] = value
        return self.select.append_child(self.doc.create_element("option", attributes))

    def test_first_option_is_selected_by_default(self):
        self.add_option("a")
        self.add_option("b")
        assert self.select.selected_index == 0
        assert self.select.value == "a"

    def test_selected_attribute_wins(self):
        self.add_option("a")
        self.add_option("b", selected="")
        assert self.select.value == "b"

    def test_required_with_placeholder(self):
        self.add_option("")
        self.add_option("b")
        assert self.select.check_validity() is False
        self.select.options[1].selected = True
        assert self.select.check_validity() is True

    def test_empty_select(self):
        assert self.select.selected_index == -1
        assert self.select.value == ""
        assert self.select.check_validity() is False

    def test_multiple_select_without_selection(self):
        self.select.multiple = True
        self.add_option("a")
        self.add_option("b")
        assert self.select.selected_index == -1
        assert self.select.value == ""

    def test_default_selected_reflects_selected_attribute(self):
        plain = self.add_option("a")
        chosen = self.add_option("b", selected="")
        assert plain.default_selected is False
        assert chosen.default_selected is True

        plain.default_selected = True
        assert plain.has_attribute("selected")
        assert plain.selected is True

    def test_option_value_falls_back_to_text(self):
        option = self.select.append_child(self.doc.create_element("option"))
        option.append_child(self.doc.create_text_node("Label"))
        assert option.value == "Label"


class TestOutput(unittest.TestCase):
    def test_reset_restores_text(self):
        doc = Document()
        output = doc.create_element("output")
        output.append_child(doc.create_text_node("42"))
        output.value = "7"
        assert output.value == "7"
        assert output.default_value == "42"

        output.form_reset()

        assert output.value == "42"
        assert output.check_validity() is True


class TestFocus(unittest.TestCase):
    def test_focus_requires_connection(self):
        doc = Document()
        field = doc.create_element("input")
        assert field.focus() is False
        doc.append_child(field)
        assert field.focus() is True
        assert doc.active_element is field
        field.blur()
        assert doc.active_element is None

    def test_hidden_and_disabled_inputs_cannot_focus(self):
        doc = Document()
        hidden = doc.append_child(doc.create_element("input", {"type": "hidden"}))
        disabled = doc.append_child(doc.create_element("input", {"disabled": ""}))
        assert hidden.focus() is False
        assert disabled.focus() is False

    def test_removing_the_active_element_clears_focus(self):
        doc = Document()
        div = doc.append_child(doc.create_element("div"))
        field = div.append_child(doc.create_element("input"))
        field.focus()
        doc.remove_child(div)
        assert doc.active_element is None


if __name__ == "__main__":
    unittest.main()
