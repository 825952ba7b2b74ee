"""Coalescing background refresh.

:class:`RefreshWorker` runs a refresh callable on one daemon thread. Requests
go into a single pending slot: a request submitted while another is still
pending replaces it (latest wins), and a request submitted while a refresh is
running waits for it to finish. Two refreshes never run at the same time.

Each request may carry an ``on_complete`` callback that runs on the worker
thread after its refresh returns. If the refresh raises, the error is logged
and the callback is skipped; an error raised by the callback is logged too.
Either way the worker keeps serving later requests.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional

logger = logging.getLogger(__name__)

Callback = Callable[[], None]


@dataclass(frozen=True)
class _Request:
    on_complete: Optional[Callback] = None


class RefreshWorker:
    refresh: Callback
    name: str

    def __init__(self, refresh: Callback, name: str = "terrain-refresh"):
        self.refresh = refresh
        self.name = name
        self._cond = threading.Condition()
        self._pending: Optional[_Request] = None
        self._running = False
        self._closed = False
        self._thread: Optional[threading.Thread] = None

    @property
    def busy(self) -> bool:
        with self._cond:
            return self._running or self._pending is not None

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def submit(self, on_complete: Optional[Callback] = None) -> None:
        """Queue a refresh, replacing any request that has not started yet."""
        with self._cond:
            if self._closed:
                raise RuntimeError(f"Refresh worker {self.name!r} is closed")
            if self._pending is not None:
                logger.debug("Coalescing pending refresh on %s", self.name)
            self._pending = _Request(on_complete)
            self._ensure_thread()
            self._cond.notify_all()

    def wait_idle(self, timeout: Optional[float] = None) -> bool:
        """Block until nothing is pending or running. False on timeout."""
        with self._cond:
            return self._cond.wait_for(
                lambda: not self._running and self._pending is None, timeout
            )

    def close(self, timeout: Optional[float] = None) -> None:
        """Stop after the in-flight refresh; pending requests are dropped."""
        with self._cond:
            self._closed = True
            self._pending = None
            self._cond.notify_all()
            thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)

    def _ensure_thread(self) -> None:
        if self._thread is None or not self._thread.is_alive():
            self._thread = threading.Thread(
                target=self._run, name=self.name, daemon=True
            )
            self._thread.start()

    def _run(self) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(lambda: self._closed or self._pending is not None)
                if self._closed:
                    return
                request = self._pending
                self._pending = None
                self._running = True
            try:
                self._execute(request)
            finally:
                with self._cond:
                    self._running = False
                    self._cond.notify_all()

    def _execute(self, request: Optional[_Request]) -> None:
        try:
            self.refresh()
        except Exception:
            logger.exception("Background refresh failed on %s", self.name)
            return
        if request is None or request.on_complete is None:
            return
        try:
            request.on_complete()
        except Exception:
            logger.exception("Refresh callback failed on %s", self.name)
