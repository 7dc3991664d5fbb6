"""
Dispatcher: applies a reducer to the current state and publishes the result.
"""
import threading
from typing import Callable, Generic, TypeVar

import structlog

from .state import State

logger = structlog.get_logger(__name__)

M = TypeVar("M")
S = TypeVar("S")


class Update(Generic[M, S]):
    def __init__(self, state: State[S], handler: Callable[[M, S], S]):
        self.state = state
        self.handler = handler
        # sends run one at a time; re-entrant so a subscriber may send again
        self._lock = threading.RLock()

    def send(self, message: M) -> S:
        """Run the handler against the current state and store its result.

        Blocks until the handler returns, including any network fetch it makes.
        """
        with self._lock:
            new_state = self.handler(message, self.state.get())
            self.state.set(new_state)
        logger.debug("message_dispatched", message=type(message).__name__)
        return new_state
