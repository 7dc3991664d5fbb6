"""
Entrypoint: load config, set up logging, build the app and run the wiki list screen.
Enter (or "n") loads the next page, "q" quits.
"""

import sys

import structlog
from dotenv import load_dotenv

from fandom.config import Config
from fandom.container import create_container
from fandom.logs import configure_logging
from fandom.models import FandomState


def render(state: FandomState, out=sys.stdout):
    """Print the whole list, the way a screen redraws on every state change."""
    out.write(f"\n--- page {state.page}, {len(state.wikis)} wikis ---\n")
    for index, wiki in enumerate(state.wikis, start=1):
        marker = "*" if wiki.image else " "
        out.write(f"{index:4d} {marker} {wiki.title} ({wiki.stats.articles_string()})\n")
    out.flush()


def run(container, lines=sys.stdin, out=sys.stdout):
    """Read commands until "q" or end of input."""
    render(container.state.get(), out)
    unsubscribe = container.state.subscribe(lambda state: render(state, out))
    try:
        out.write("[Enter] next page, [q] quit > ")
        out.flush()
        for line in lines:
            command = line.strip().lower()
            if command == "q":
                break
            if command in ("", "n"):
                container.app.next_page()
            out.write("[Enter] next page, [q] quit > ")
            out.flush()
    finally:
        unsubscribe()


def main():
    """Initialize dependencies and start the screen"""
    load_dotenv()

    try:
        config = Config()
    except (FileNotFoundError, ValueError) as e:
        print(f"Fatal error during startup: {e}", file=sys.stderr)
        sys.exit(1)

    configure_logging(
        level=config.logging.get('level', 'INFO'),
        renderer=config.logging.get('renderer', 'console'),
    )
    logger = structlog.get_logger(__name__)

    try:
        container = create_container(config)
    except ValueError as e:
        logger.error("startup_failed", error=str(e))
        sys.exit(1)

    try:
        run(container)
    except KeyboardInterrupt:
        logger.info("stopped_by_user")
    finally:
        container.close()


if __name__ == "__main__":
    main()
