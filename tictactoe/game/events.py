"""
events.py - Named-event publish/subscribe used by the Board

Handlers are called synchronously, most recently registered first. One
Event object is shared by every handler of a single emission, so a handler
that calls prevent_default() is visible to the handlers called after it.
"""

from typing import Any, Callable, Dict, List, Optional

from tictactoe.debug import debug
from tictactoe.utils import BoardEvent, EventNames, split_event_names

Handler = Callable[..., Any]


class Event:
    """Context object passed as the first argument to every handler."""

    def __init__(self, name: str):
        self.name = name
        self._default_prevented = False

    def prevent_default(self):
        self._default_prevented = True

    def is_default_prevented(self) -> bool:
        return self._default_prevented

    def __repr__(self):
        return f"Event({self.name!r}, default_prevented={self._default_prevented})"


class EventEmitter:
    """
    Mixin holding a handler table keyed by event name.

    Event names are plain strings; BoardEvent members are accepted wherever
    a name is expected.
    """

    def __init__(self):
        self._handlers: Dict[str, List[Handler]] = {}

    def on(self, events: EventNames, handler: Handler) -> 'EventEmitter':
        """
        Register a handler for one or more events.

        Args:
            events: An event name, a whitespace-separated string of names,
                a BoardEvent, or a sequence of these
            handler: Callable invoked as handler(event, *payload)

        Returns:
            self, for chaining

        Raises:
            TypeError: if handler is not callable
        """
        if not callable(handler):
            raise TypeError(f"Event handler must be callable, got {handler!r}")

        for name in split_event_names(events):
            handlers = self._handlers.setdefault(name, [])
            if handler not in handlers:
                handlers.append(handler)
                debug.trace(f"Registered handler {handler!r} for '{name}'", "events")
        return self

    def off(self, events: EventNames, *handlers: Handler) -> 'EventEmitter':
        """
        Unregister handlers.

        With no handlers given, every handler of the named events is removed.

        Returns:
            self, for chaining
        """
        for name in split_event_names(events):
            if not handlers:
                self._handlers.pop(name, None)
                debug.trace(f"Removed all handlers for '{name}'", "events")
                continue

            registered = self._handlers.get(name)
            if not registered:
                continue
            for handler in handlers:
                if handler in registered:
                    registered.remove(handler)
                    debug.trace(f"Removed handler {handler!r} for '{name}'", "events")

        return self

    def handlers(self, name) -> List[Handler]:
        """Copy of the handlers registered for an event, in registration order."""
        if isinstance(name, BoardEvent):
            name = name.value
        return list(self._handlers.get(name, ()))

    def _emit(self, name, *args) -> Optional[Event]:
        """
        Dispatch an event to its handlers in reverse registration order.

        Returns:
            The shared Event object, or None if the event was never
            registered or was cleared with off(name)
        """
        if isinstance(name, BoardEvent):
            name = name.value

        handlers = self._handlers.get(name)
        if handlers is None:
            return None

        event = Event(name)
        debug.trace(f"Emitting '{name}' to {len(handlers)} handler(s)", "events")

        # Snapshot so handlers can call on()/off() while we dispatch
        for handler in reversed(list(handlers)):
            handler(event, *args)

        return event
