import threading

import pytest

from fandom.state import State
from fandom.update import Update


def add(message, state):
    return state + message


def test_send_applies_handler_and_stores_result():
    state = State(1)
    update = Update(state, add)

    result = update.send(2)

    assert result == 3
    assert state.get() == 3


def test_send_notifies_subscribers():
    state = State(0)
    update = Update(state, add)
    seen = []
    state.subscribe(seen.append)

    update.send(4)
    update.send(1)

    assert seen == [4, 5]


def test_handler_error_leaves_state_untouched():
    def broken(message, state):
        raise TypeError("nope")

    state = State(7)
    update = Update(state, broken)

    with pytest.raises(TypeError):
        update.send(1)
    assert state.get() == 7


def test_subscriber_may_send_again():
    state = State(0)
    update = Update(state, add)

    def bump_once(value):
        if value == 1:
            update.send(10)

    state.subscribe(bump_once)
    update.send(1)

    assert state.get() == 11


def test_concurrent_sends_are_serialized():
    state = State(0)
    update = Update(state, add)

    def worker():
        for _ in range(200):
            update.send(1)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert state.get() == 800
