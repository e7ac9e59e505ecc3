"""Frame scheduling for Pong Arena."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

FrameCallback = Callable[[], Any]


class Scheduler(ABC):
    """
    Something that runs the next frame later.

    The game never loops on its own: at the end of every tick it hands
    itself back to a scheduler. A real display loop, a test or a
    headless runner decide when that frame actually runs.
    """

    @abstractmethod
    def schedule(self, callback: FrameCallback) -> None:
        """Request that callback runs as the next frame."""
        pass


class FrameScheduler(Scheduler):
    """Keeps at most one pending frame and runs it on demand."""

    def __init__(self):
        self._pending: Optional[FrameCallback] = None
        self.frames_run = 0

    def schedule(self, callback: FrameCallback) -> None:
        self._pending = callback

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def cancel(self) -> None:
        """Drop the pending frame, if any."""
        self._pending = None

    def run_next(self) -> bool:
        """
        Run the pending frame.

        Returns:
            True if a frame ran, False if nothing was scheduled
        """
        callback = self._pending
        if callback is None:
            return False
        self._pending = None
        callback()
        self.frames_run += 1
        return True

    def run(
        self,
        max_frames: Optional[int] = None,
        before_frame: Optional[Callable[[], bool]] = None,
    ) -> int:
        """
        Run frames until nothing is pending.

        Args:
            max_frames: Stop after this many frames (None = no limit)
            before_frame: Hook called before each frame; returning False stops

        Returns:
            Number of frames run by this call
        """
        count = 0
        while self.has_pending:
            if max_frames is not None and count >= max_frames:
                break
            if before_frame is not None and not before_frame():
                break
            self.run_next()
            count += 1
        return count
