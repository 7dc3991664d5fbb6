import io

import pytest
import structlog

from fandom.app import FandomApp
from fandom.container import Container
from fandom.models import FandomState

from conftest import RecordingDownload, make_wiki

import main


def test_render_lists_wikis():
    state = FandomState(
        wikis=(make_wiki("a", "Alpha", articles=2500, image="http://img"), make_wiki("b", "Beta", articles=7)),
        page=2,
    )
    out = io.StringIO()

    main.render(state, out)

    text = out.getvalue()
    assert "page 2, 2 wikis" in text
    assert "* Alpha (2K articles)" in text
    assert "  Beta (7 articles)" in text


def test_run_pages_until_quit():
    download = RecordingDownload({1: [make_wiki("a")], 2: [make_wiki("b")]})
    container = Container(FandomApp(download=download))
    out = io.StringIO()

    main.run(container, lines=io.StringIO("\nn\nq\n\n"), out=out)

    assert container.state.get().page == 3
    assert len(download.urls) == 3
    assert container.state.subscriber_count == 0
    assert "page 3, 2 wikis" in out.getvalue()


def test_run_ignores_unknown_commands():
    container = Container(FandomApp(download=RecordingDownload()))

    main.run(container, lines=io.StringIO("what\n"), out=io.StringIO())

    assert container.state.get().page == 1


@pytest.fixture
def reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.mark.parametrize("name, value", [
    ("FANDOM_PER_PAGE", "abc"),
    ("FANDOM_API_URL", "http://api.test/list"),
])
def test_bad_configuration_exits_nonzero(monkeypatch, reset_structlog, name, value):
    monkeypatch.setenv(name, value)
    monkeypatch.setattr(main, "load_dotenv", lambda: None)

    with pytest.raises(SystemExit) as exc_info:
        main.main()

    assert exc_info.value.code == 1
