"""Per-run log returned alongside each publish result."""

import logging

logger = logging.getLogger(__name__)


class RunLog:
    """Collects the operator-facing messages of a single run.

    Each message is also forwarded to the module logger at INFO, so the run
    log and regular logging never disagree.
    """

    def __init__(self, title: str) -> None:
        self._title = title
        self._lines: list[str] = []

    @property
    def title(self) -> str:
        return self._title

    def log(self, message: str) -> None:
        self._lines.append(message)
        logger.info(message)

    def lines(self) -> list[str]:
        return list(self._lines)

    def render(self) -> str:
        """Render as markdown: a heading followed by one line per message."""
        body = "".join(f"{line}\n" for line in self._lines)
        return f"# {self._title}\n\n{body}"
