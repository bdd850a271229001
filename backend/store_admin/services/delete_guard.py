"""
Delete confirmation modal state
"""
import logging
from typing import Any, Awaitable, Callable, Optional

logger = logging.getLogger(__name__)


class DeleteGuardModal:
    """
    Confirmation step in front of a destructive action

    The confirm callback runs at most once at a time; the modal closes when
    it finishes, whatever the outcome.
    """

    def __init__(self, on_confirm: Callable[[], Awaitable[Any]]):
        self.is_open = False
        self.loading = False
        self._on_confirm = on_confirm

    @property
    def confirm_disabled(self) -> bool:
        return self.loading

    def open(self) -> None:
        self.is_open = True

    def close(self) -> None:
        """Cancel: close without running the action"""
        if self.loading:
            logger.debug("Ignoring close while the confirm action is pending")
            return
        self.is_open = False

    async def confirm(self) -> Optional[Any]:
        """
        Run the confirm callback

        Returns:
            The callback's result, or None when the modal is closed or a
            confirm is already in flight
        """
        if not self.is_open or self.loading:
            logger.debug("Ignoring confirm: modal closed or action pending")
            return None

        self.loading = True
        try:
            return await self._on_confirm()
        finally:
            self.loading = False
            self.is_open = False
