"""In-memory toast notification sink."""

import itertools
import logging

from platewise.models import Toast, ToastVariant

logger = logging.getLogger(__name__)


class Toaster:
    """Holds the toasts currently visible to the user.

    Newest toasts come first. When more than ``limit`` toasts are raised the
    oldest ones are dropped.
    """

    def __init__(self, limit: int = 1) -> None:
        self.limit = limit
        self.toasts: list[Toast] = []
        self._ids = itertools.count(1)

    def toast(
        self,
        title: str,
        description: str | None = None,
        variant: ToastVariant = ToastVariant.DEFAULT,
    ) -> Toast:
        """Show a toast.

        Args:
            title: Short heading
            description: Body text
            variant: Severity used for styling

        Returns:
            The toast that was added
        """
        toast = Toast(
            id=str(next(self._ids)),
            title=title,
            description=description,
            variant=ToastVariant(variant),
        )
        self.toasts = [toast, *self.toasts][: self.limit]
        logger.debug(f"Toast {toast.id} ({toast.variant.value}): {title}")
        return toast

    def dismiss(self, toast_id: str | None = None) -> None:
        """Dismiss one toast, or all of them when no id is given."""
        if toast_id is None:
            self.toasts = []
        else:
            self.toasts = [t for t in self.toasts if t.id != toast_id]
