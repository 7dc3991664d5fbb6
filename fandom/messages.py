"""
Messages the wiki screen can emit. The set is closed: the reducer in
app.py handles each of these and rejects anything else.
"""
from dataclasses import dataclass


class Message:
    """Base for screen messages."""

    @property
    def name(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class OnInit(Message):
    pass


@dataclass(frozen=True)
class OnNextPage(Message):
    pass

