"""Route transition sink."""

import logging

logger = logging.getLogger(__name__)


class Navigator:
    """Records route transitions requested by a page."""

    def __init__(self) -> None:
        self.history: list[str] = []

    @property
    def location(self) -> str | None:
        """The most recently requested path, if any."""
        return self.history[-1] if self.history else None

    def navigate(self, path: str) -> None:
        """Request a transition to ``path``."""
        logger.info(f"Navigating to {path}")
        self.history.append(path)
