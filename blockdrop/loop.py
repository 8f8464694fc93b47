"""
Serialized intent loop.

Gravity ticks and player input are two independent producers. Both put
intents on one queue, and a single consumer applies them to the session one
at a time, so a move or rotation is always fully resolved before the next
tick tests for collisions.

The gravity producer is a background thread that enqueues Intent.TICK every
tick_ms milliseconds while the session is running. It exits on stop() or
once an applied intent ends the game.
"""

from __future__ import annotations

import threading
import queue as queue_mod

from blockdrop.game.session import TICK_MS, GameSession, Intent


class GameLoop:
    """Single-consumer intent queue with a periodic gravity producer.

    submit() may be called from any thread. The consumer methods
    (run_pending, run_next) and the control actions (start, stop) touch the
    session directly and must all be called from the one consumer thread.

    The gravity timer stops on its own once the session leaves RUNNING
    (stopped or game over); start() arms it again.
    """

    def __init__(self, session: GameSession, tick_ms: int = TICK_MS) -> None:
        if tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {tick_ms}")
        self.session = session
        self.tick_ms = tick_ms
        self._queue: queue_mod.Queue = queue_mod.Queue()
        self._timer_stop = threading.Event()
        self._timer_thread: threading.Thread | None = None

    # ── Producers ─────────────────────────────────────────────────────────

    def submit(self, intent: Intent) -> None:
        """Enqueue an intent. Safe to call from any thread."""
        self._queue.put_nowait(intent)

    def start_timer(self) -> None:
        """Start the gravity producer (no-op if it is already running)."""
        if self.timer_running and not self._timer_stop.is_set():
            return
        if self._timer_thread is not None:
            # a cancelled producer may still be sleeping out its last period
            self._timer_thread.join(timeout=5)
        self._timer_stop.clear()
        self._timer_thread = threading.Thread(target=self._timer, daemon=True)
        self._timer_thread.start()

    def stop_timer(self) -> None:
        """Cancel the gravity producer and wait for it to exit."""
        self._timer_stop.set()
        if self._timer_thread is not None:
            self._timer_thread.join(timeout=5)
            self._timer_thread = None

    @property
    def timer_running(self) -> bool:
        return self._timer_thread is not None and self._timer_thread.is_alive()

    def _timer(self) -> None:
        period = self.tick_ms / 1000.0
        while not self._timer_stop.wait(period):
            if not self.session.running:
                return
            self._queue.put_nowait(Intent.TICK)

    # ── Consumer ──────────────────────────────────────────────────────────

    def run_pending(self) -> int:
        """Apply every queued intent, in order, on the calling thread.

        Returns:
            Number of intents processed.
        """
        processed = 0
        while True:
            try:
                intent = self._queue.get_nowait()
            except queue_mod.Empty:
                return processed
            self._apply(intent)
            processed += 1

    def run_next(self, timeout: float | None = None) -> Intent | None:
        """Block until one intent is available and apply it.

        Args:
            timeout: Seconds to wait, or None to wait forever.

        Returns:
            The applied intent, or None if the wait timed out.
        """
        try:
            intent = self._queue.get(timeout=timeout)
        except queue_mod.Empty:
            return None
        self._apply(intent)
        return intent

    def _apply(self, intent: Intent) -> None:
        self.session.apply(intent)
        if not self.session.running:
            # game over or stopped: no more gravity until start()
            self._timer_stop.set()

    # ── Control surface ───────────────────────────────────────────────────

    def start(self) -> None:
        """Start (or restart) the game and the gravity timer.

        Consumer thread only.
        """
        self.session.start()
        self.start_timer()

    def stop(self) -> None:
        """Stop the game and cancel the gravity timer.

        Intents still queued are left alone; they are no-ops against an
        idle session. Consumer thread only.
        """
        self.session.stop()
        self.stop_timer()

    def pending(self) -> int:
        return self._queue.qsize()
