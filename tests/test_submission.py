"""submit, reset, request_submit and the submit event."""

import unittest

from turboform import DOMError, Document, Element, RecordingLoader, StrictModeError


class ResettableControl(Element):
    __slots__ = ("log",)

    def __init__(self, tag_name, log, attributes=None, owner_document=None):
        super().__init__(tag_name, attributes, owner_document=owner_document)
        self.log = log

    def form_reset(self):
        self.log.append(self.id)


class SubmissionTestCase(unittest.TestCase):
    def setUp(self):
        self.loader = RecordingLoader()
        self.doc = Document("http://h/page", loader=self.loader, collect_errors=True)
        self.form = self.doc.append_child(self.doc.create_element("form"))


class TestSubmitEvent(SubmissionTestCase):
    def test_uncancelled_event_submits(self):
        events = []
        self.form.add_event_listener("submit", events.append)

        assert self.form._dispatch_submit_event() is True

        assert len(events) == 1
        event = events[0]
        assert event.type == "submit"
        assert event.bubbles is True
        assert event.cancelable is True
        assert event.target is self.form
        assert self.loader.submissions == [self.form]

    def test_cancelled_event_does_not_submit(self):
        self.form.add_event_listener("submit", lambda event: event.prevent_default())

        assert self.form._dispatch_submit_event() is False
        assert self.loader.submissions == []

    def test_event_bubbles_to_the_document(self):
        seen = []
        self.doc.add_event_listener("submit", lambda event: seen.append((event.target, event.current_target)))

        self.form._dispatch_submit_event()

        assert seen == [(self.form, self.doc)]

    def test_document_listener_can_cancel(self):
        self.doc.add_event_listener("submit", lambda event: event.prevent_default())
        self.form._dispatch_submit_event()
        assert self.loader.submissions == []


class TestSubmit(SubmissionTestCase):
    def test_submit_skips_validation_and_events(self):
        self.form.append_child(self.doc.create_element("input", {"required": ""}))
        events = []
        self.form.add_event_listener("submit", events.append)
        self.form.add_event_listener("invalid", events.append)

        self.form.submit()

        assert events == []
        assert self.loader.submissions == [self.form]

    def test_default_loader_reports_not_implemented(self):
        doc = Document(collect_errors=True)
        form = doc.append_child(doc.create_element("form"))

        form.submit()

        assert doc.errors == [DOMError("not-implemented", message="Not implemented: HTMLFormElement.prototype.submit")]

    def test_default_loader_in_strict_mode_raises(self):
        doc = Document(strict=True)
        form = doc.create_element("form")
        with self.assertRaises(StrictModeError) as ctx:
            form.submit()
        assert ctx.exception.error.code == "not-implemented"


class TestRequestSubmit(SubmissionTestCase):
    def test_valid_form_is_submitted(self):
        self.form.append_child(self.doc.create_element("input", {"value": "filled", "required": ""}))
        assert self.form.request_submit() is True
        assert self.loader.submissions == [self.form]

    def test_invalid_form_is_not_submitted(self):
        field = self.form.append_child(self.doc.create_element("input", {"required": ""}))
        events = []
        self.form.add_event_listener("submit", events.append)

        assert self.form.request_submit() is False

        assert events == []
        assert self.loader.submissions == []
        assert self.doc.active_element is field

    def test_novalidate_skips_validation(self):
        self.form.no_validate = True
        self.form.append_child(self.doc.create_element("input", {"required": ""}))
        assert self.form.request_submit() is True
        assert self.loader.submissions == [self.form]

    def test_submit_button_activation(self):
        field = self.form.append_child(self.doc.create_element("input", {"required": ""}))
        button = self.form.append_child(self.doc.create_element("button"))

        assert button.activate() is False
        field.value = "now filled"
        assert button.activate() is True
        assert self.loader.submissions == [self.form]

    def test_disabled_or_formless_button_does_nothing(self):
        disabled = self.form.append_child(self.doc.create_element("button", {"disabled": ""}))
        loose = self.doc.create_element("button")
        assert disabled.activate() is False
        assert loose.activate() is False
        assert self.loader.submissions == []


class TestReset(SubmissionTestCase):
    def test_reset_visits_each_control_once_in_order(self):
        log = []
        div = self.form.append_child(self.doc.create_element("div"))
        div.append_child(ResettableControl("select", log, {"id": "first"}, owner_document=self.doc))
        self.form.append_child(ResettableControl("input", log, {"id": "second"}, owner_document=self.doc))
        self.form.append_child(Element("textarea", owner_document=self.doc))

        self.form.reset()

        assert log == ["first", "second"]

    def test_reset_fires_no_events(self):
        events = []
        self.form.add_event_listener("reset", events.append)
        self.form.reset()
        assert events == []

    def test_reset_restores_control_defaults(self):
        text = self.form.append_child(self.doc.create_element("input", {"value": "default"}))
        box = self.form.append_child(self.doc.create_element("input", {"type": "checkbox", "checked": ""}))
        area = self.form.append_child(self.doc.create_element("textarea"))
        area.append_child(self.doc.create_text_node("hello"))
        select = self.form.append_child(self.doc.create_element("select"))
        first = select.append_child(self.doc.create_element("option", {"value": "a"}))
        second = select.append_child(self.doc.create_element("option", {"value": "b", "selected": ""}))

        text.value = "typed"
        box.checked = False
        area.value = "edited"
        first.selected = True
        second.selected = False
        assert select.value == "a"

        self.form.reset()

        assert text.value == "default"
        assert box.checked is True
        assert area.value == "hello"
        assert select.value == "b"

    def test_reset_button_activation(self):
        field = self.form.append_child(self.doc.create_element("input", {"value": "x"}))
        button = self.form.append_child(self.doc.create_element("button", {"type": "reset"}))
        field.value = "changed"

        assert button.activate() is True
        assert field.value == "x"


if __name__ == "__main__":
    unittest.main()
