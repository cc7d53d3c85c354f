"""
Observable value holders used to keep views in sync with externally owned state.

A Bindable wraps a single value. Views register a callback with on_change()
and get back a Subscription handle; closing the handle (or leaving its
``with`` block) stops further notifications. Two bindables can be linked with
bind_to() so that a view follows a value owned by someone else.

Everything here runs synchronously on the caller's thread: callbacks have
fired by the time the setter returns.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, TypeVar

T = TypeVar('T')


@dataclass(frozen=True)
class ValueChangedEvent(Generic[T]):
    """Old and new value delivered to change callbacks."""
    old_value: Optional[T]
    new_value: Optional[T]


class Subscription:
    """Handle for a registered change callback."""

    def __init__(self, bindable: 'Bindable', callback: Callable[[ValueChangedEvent], Any]):
        self._bindable = bindable
        self.callback = callback

    @property
    def active(self) -> bool:
        return self._bindable is not None

    def close(self):
        """Stop delivering notifications. Safe to call more than once."""
        if self._bindable is None:
            return
        self._bindable._remove_subscription(self)
        self._bindable = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


class Bindable(Generic[T]):
    """A value that notifies subscribers and linked bindables when it changes."""

    def __init__(self, default: Optional[T] = None):
        self.default = default
        self._value = default
        self._subscriptions: List[Subscription] = []
        self._bindings: List['Bindable[T]'] = []

    @property
    def value(self) -> Optional[T]:
        return self._value

    @value.setter
    def value(self, new_value: Optional[T]):
        self._set(new_value, source=None)

    def on_change(self, callback: Callable[[ValueChangedEvent], Any],
                  run_once_immediately: bool = False) -> Subscription:
        """
        Register a callback fired after every change of value.

        Args:
            callback: Receives a ValueChangedEvent
            run_once_immediately: Also invoke the callback right away with the
                current value as both old and new value

        Returns:
            Subscription that deregisters the callback when closed
        """
        subscription = Subscription(self, callback)
        self._subscriptions.append(subscription)
        if run_once_immediately:
            callback(ValueChangedEvent(self._value, self._value))
        return subscription

    def trigger_change(self):
        """Notify subscribers with the current value even though it did not change."""
        self._notify(ValueChangedEvent(self._value, self._value))

    def bind_to(self, other: 'Bindable[T]'):
        """Link to another bindable; adopts its value and mirrors changes both ways."""
        if other is self:
            raise ValueError("A bindable cannot be bound to itself")
        if other in self._bindings:
            return
        self.value = other.value
        self._bindings.append(other)
        other._bindings.append(self)

    def unbind_from(self, other: 'Bindable[T]'):
        if other in self._bindings:
            self._bindings.remove(other)
        if self in other._bindings:
            other._bindings.remove(self)

    def unbind_all(self):
        """Drop every subscription and every link to other bindables."""
        for other in list(self._bindings):
            self.unbind_from(other)
        for subscription in list(self._subscriptions):
            subscription.close()

    def _set(self, new_value: Optional[T], source: Optional['Bindable[T]']):
        if new_value == self._value:
            return
        old_value = self._value
        self._value = new_value

        for bound in list(self._bindings):
            if bound is not source:
                bound._set(new_value, source=self)

        self._notify(ValueChangedEvent(old_value, new_value))

    def _notify(self, event: ValueChangedEvent):
        # Copy so callbacks may close their own subscription while being called
        for subscription in list(self._subscriptions):
            if subscription.active:
                subscription.callback(event)

    def _remove_subscription(self, subscription: Subscription):
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)

    def __repr__(self):
        return f"<Bindable(value={self._value!r})>"
