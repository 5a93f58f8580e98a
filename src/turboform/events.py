"""Events and synchronous dispatch.

Dispatch runs every listener to completion before returning. The propagation
path is computed before the first listener runs, so listeners may mutate the
tree without affecting who receives the current event.
"""

from .errors import DOMError, InvalidStateError


class Event:
    __slots__ = (
        "_dispatching",
        "_initialized",
        "_stop_immediate",
        "_stop_propagation",
        "bubbles",
        "cancelable",
        "current_target",
        "default_prevented",
        "event_phase",
        "target",
        "type_",
    )

    NONE = 0
    AT_TARGET = 2
    BUBBLING_PHASE = 3

    def __init__(self, type_=None, *, bubbles=False, cancelable=False):
        self.type_ = ""
        self.bubbles = False
        self.cancelable = False
        self.default_prevented = False
        self.target = None
        self.current_target = None
        self.event_phase = Event.NONE
        self._initialized = False
        self._dispatching = False
        self._stop_propagation = False
        self._stop_immediate = False
        if type_ is not None:
            self.init_event(type_, bubbles, cancelable)

    @property
    def type(self):
        return self.type_

    def init_event(self, type_, bubbles=False, cancelable=False):
        """Initialize an event created by ``Document.create_event``."""
        if self._dispatching:
            return
        self._initialized = True
        self.type_ = str(type_)
        self.bubbles = bool(bubbles)
        self.cancelable = bool(cancelable)
        self.default_prevented = False
        self.target = None
        self._stop_propagation = False
        self._stop_immediate = False

    def prevent_default(self):
        if self.cancelable:
            self.default_prevented = True

    def stop_propagation(self):
        self._stop_propagation = True

    def stop_immediate_propagation(self):
        self._stop_propagation = True
        self._stop_immediate = True

    def __repr__(self):
        return f"Event({self.type_!r}, bubbles={self.bubbles}, cancelable={self.cancelable})"


class EventTarget:
    """Listener registry and dispatch, mixed into Node."""

    __slots__ = ()

    def add_event_listener(self, type_, callback, *, once=False):
        if callback is None:
            return
        if self._listeners is None:
            self._listeners = {}
        listeners = self._listeners.setdefault(type_, [])
        for entry in listeners:
            if entry[0] is callback:
                return
        listeners.append([callback, once])

    def remove_event_listener(self, type_, callback):
        if not self._listeners or type_ not in self._listeners:
            return
        self._listeners[type_] = [entry for entry in self._listeners[type_] if entry[0] is not callback]

    def dispatch_event(self, event):
        """Dispatch ``event`` to this target; return False if a listener cancelled it."""
        if event._dispatching or not event._initialized:
            msg = f"Cannot dispatch {event!r}: it is being dispatched or was not initialized"
            raise InvalidStateError(msg)

        event._dispatching = True
        event.target = self
        path = [self]
        if event.bubbles:
            ancestor = self.parent
            while ancestor is not None:
                path.append(ancestor)
                ancestor = ancestor.parent

        self.debug(f"dispatching '{event.type_}' on <{self.tag_name}>")
        try:
            for node in path:
                event.event_phase = Event.AT_TARGET if node is self else Event.BUBBLING_PHASE
                event.current_target = node
                node._invoke_listeners(event)
                if event._stop_propagation:
                    break
        finally:
            event._dispatching = False
            event.current_target = None
            event.event_phase = Event.NONE
            event._stop_propagation = False
            event._stop_immediate = False

        return not event.default_prevented

    def _invoke_listeners(self, event):
        if not self._listeners:
            return
        entries = self._listeners.get(event.type_)
        if not entries:
            return
        # Listeners added during dispatch do not run for this event
        for entry in list(entries):
            # Identity check: a listener removed and re-added is a new entry
            if not any(current is entry for current in self._listeners.get(event.type_, ())):
                continue
            callback, once = entry
            if once:
                self.remove_event_listener(event.type_, callback)
            try:
                callback(event)
            except Exception as exc:  # noqa: BLE001 - listener errors are reported, not propagated
                self._report_listener_error(event, exc)
            if event._stop_immediate:
                break

    def _report_listener_error(self, event, exc):
        document = self._node_document()
        if document is None:
            raise exc
        document.report_error(
            DOMError("listener-error", message=f"'{event.type_}' listener raised {exc.__class__.__name__}: {exc}")
        )
