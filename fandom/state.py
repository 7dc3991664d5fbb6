"""
In-memory holder for the current screen state, with change subscriptions.
"""
from typing import Callable, Generic, List, TypeVar

import structlog

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class _Subscription:
    def __init__(self, callback: Callable):
        self.callback = callback


class State(Generic[T]):
    """Holds exactly one value and notifies subscribers when it is replaced."""

    def __init__(self, initial: T):
        self._value = initial
        self._subscriptions: List[_Subscription] = []

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        """Replace the value, then call every subscriber with it in subscription order."""
        self._value = value
        for subscription in list(self._subscriptions):
            subscription.callback(value)

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Register a callback; returns a function that removes it again."""
        subscription = _Subscription(callback)
        self._subscriptions.append(subscription)
        logger.debug("state_subscribed", subscribers=len(self._subscriptions))

        def unsubscribe() -> None:
            # identity check, the same callback may be subscribed more than once
            for index, existing in enumerate(self._subscriptions):
                if existing is subscription:
                    del self._subscriptions[index]
                    logger.debug("state_unsubscribed", subscribers=len(self._subscriptions))
                    return

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)
