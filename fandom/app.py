"""
FandomApp: the wiki list screen's business logic.

Every collaborator is a constructor parameter with a working default, so tests
can swap the network call for a plain function instead of mocking.
"""
from typing import Callable, Optional, Sequence

import structlog

from .fetcher import HTTPFetcher
from .messages import Message, OnInit, OnNextPage
from .models import FandomState, Wiki
from .state import State
from .update import Update

logger = structlog.get_logger(__name__)

DEFAULT_PER_PAGE = 25
DEFAULT_API_URL = "http://www.wikia.com/api/v1/Wikis/List?expand=1&limit=%d&batch=%d"

Download = Callable[[str], Sequence[Wiki]]


class FandomApp:
    def __init__(
        self,
        per_page: int = DEFAULT_PER_PAGE,
        api_url: str = DEFAULT_API_URL,
        init_state: Optional[FandomState] = None,
        download: Optional[Download] = None,
    ):
        self.per_page = per_page
        self.api_url = api_url
        self.init_state = init_state if init_state is not None else FandomState()
        self.download = download if download is not None else HTTPFetcher()

        self.state: State[FandomState] = State(self.init_state)
        self.update: Update[Message, FandomState] = Update(self.state, self.handler)

        self.update.send(OnInit())

    def build_url(self, batch: int) -> str:
        return self.api_url % (self.per_page, batch)

    def handler(self, msg: Message, state: FandomState) -> FandomState:
        if isinstance(msg, OnInit):
            wikis = self.download(self.build_url(1))
            # replaces whatever was loaded before, unlike OnNextPage
            new_state = state.evolve(wikis=tuple(wikis))
        elif isinstance(msg, OnNextPage):
            batch = state.page + 1
            wikis = self.download(self.build_url(batch))
            new_state = state.evolve(wikis=state.wikis + tuple(wikis), page=batch)
        else:
            raise TypeError(f"Unhandled message: {msg!r}")

        logger.debug("state_reduced", message=msg.name, page=new_state.page, wikis=len(new_state.wikis))
        return new_state

    def next_page(self) -> FandomState:
        return self.update.send(OnNextPage())
