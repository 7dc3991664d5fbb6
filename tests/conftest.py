import pytest

from fandom.models import Wiki, WikiStats


def make_wiki(wiki_id, title=None, articles=10, image=None):
    return Wiki(id=wiki_id, title=title or f"Wiki {wiki_id}", stats=WikiStats(articles=articles), image=image)


class RecordingDownload:
    """Stands in for the HTTP fetcher: returns canned pages and remembers the URLs asked for."""

    def __init__(self, pages=None):
        self.pages = pages or {}
        self.urls = []

    def __call__(self, url):
        self.urls.append(url)
        batch = int(url.rsplit("batch=", 1)[1])
        return list(self.pages.get(batch, []))


@pytest.fixture
def wiki_a():
    return make_wiki("a", "Alpha")


@pytest.fixture
def wiki_b():
    return make_wiki("b", "Beta")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "FANDOM_API_URL", "FANDOM_PER_PAGE", "FETCHER_USER_AGENT", "FETCHER_TIMEOUT",
        "FETCHER_MAX_REDIRECTS", "LOG_LEVEL", "LOG_RENDERER",
    ):
        monkeypatch.delenv(name, raising=False)
