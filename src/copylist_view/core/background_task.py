"""Background ListStore calls with queued result delivery."""

import logging
from typing import Callable, Any, List, Optional, Tuple
from PyQt6.QtCore import QThread, pyqtSignal

logger = logging.getLogger(__name__)

# --- Module-level constants ---
CLEANUP_WAIT_MS = 200     # Wait time per task during shutdown cleanup


class BackgroundTask(QThread):
    """
    Run one callable off the GUI thread and report the outcome by signal.

    Usage:
        task = BackgroundTask(target=store.get_copy_list)
        task.result_ready.connect(on_success)
        task.error_occurred.connect(on_error)  # Receives Exception, not str
        task.start()
    """

    result_ready = pyqtSignal(object)
    error_occurred = pyqtSignal(Exception)  # Full exception, caller decides

    def __init__(
        self,
        target: Callable[..., Any],
        args: Tuple = (),
        kwargs: dict = None,
        parent=None
    ):
        super().__init__(parent)
        self._target = target
        self._args = args
        self._kwargs = kwargs or {}
        self.cancelled = False

    def run(self):
        """Execute target in background, respecting cancellation."""
        try:
            result = self._target(*self._args, **self._kwargs)
            if not self.cancelled:
                self.result_ready.emit(result)
        except Exception as e:
            if not self.cancelled:
                self.error_occurred.emit(e)

    def cancel(self):
        """Cancel task; signals won't emit after this."""
        self.cancelled = True


class BackgroundTaskPool:
    """
    Keeps overlapping background tasks alive until each one finishes.

    Unlike a single-slot manager, starting a task never cancels the ones
    already in flight: every task completes and its callbacks run on the
    thread that called run(), in completion order.

    Usage:
        self._tasks = BackgroundTaskPool()

        def refresh(self):
            self._tasks.run(
                target=self.store.get_copy_list,
                on_success=self._render,
                on_error=self._on_fetch_failed,
            )

        def shutdown(self):
            self._tasks.cleanup()
    """

    def __init__(self):
        self._tasks: List[BackgroundTask] = []

    def run(
        self,
        target: Callable[..., Any],
        args: Tuple = (),
        kwargs: dict = None,
        on_success: Callable[[Any], None] = None,
        on_error: Callable[[Exception], None] = None,
    ) -> BackgroundTask:
        """
        Start target in a new background task.

        Args:
            target: Function to execute in background
            args: Positional arguments for target
            kwargs: Keyword arguments for target
            on_success: Callback for successful result
            on_error: Callback for error (receives Exception, not str)

        Returns:
            The started BackgroundTask
        """
        task = BackgroundTask(target=target, args=args, kwargs=kwargs)
        if on_success:
            task.result_ready.connect(on_success)
        if on_error:
            task.error_occurred.connect(on_error)
        task.finished.connect(lambda: self._forget(task))

        self._tasks.append(task)
        logger.debug(f"Starting background task for {getattr(target, '__name__', target)} ({len(self._tasks)} in flight)")
        task.start()
        return task

    @property
    def pending_count(self) -> int:
        return len(self._tasks)

    def wait_all(self, timeout_ms: Optional[int] = None) -> bool:
        """Block until every in-flight task has returned from run()."""
        done = True
        for task in list(self._tasks):
            if timeout_ms is None:
                done = task.wait() and done
            else:
                done = task.wait(timeout_ms) and done
        return done

    def cleanup(self):
        """Cancel and wait for in-flight tasks. Call on shutdown."""
        for task in list(self._tasks):
            if task.isRunning():
                task.cancel()
                task.wait(CLEANUP_WAIT_MS)
        self._tasks.clear()

    def _forget(self, task: BackgroundTask):
        if task in self._tasks:
            self._tasks.remove(task)
        task.deleteLater()
