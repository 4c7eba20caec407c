"""Cooperative cancellation for long-running commands.

A looping command (an effect, for instance) checks a CancellationToken
between steps. Background watchers set the token when the user presses
ENTER or when a timer runs out. Nothing here stops a loop by force; a
command that never checks the token runs until it returns on its own.
"""

import threading

import click

from core.config import DEFAULT_POLL_INTERVAL


class CancellationToken:
    """Write-once flag shared between a command loop and its watchers."""

    def __init__(self):
        self._event = threading.Event()

    def cancel(self):
        self._event.set()

    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until cancelled or timeout. Returns True if cancelled."""
        return self._event.wait(timeout)


class Watcher:
    """Handle on one background watcher thread."""

    def __init__(self, name: str, target, stoppable: bool = False):
        self._stop = threading.Event()
        self.stoppable = stoppable
        self._thread = threading.Thread(target=target, args=(self._stop,), name=name, daemon=True)

    def start(self) -> 'Watcher':
        self._thread.start()
        return self

    def stop(self):
        """Wake a sleeping timer. Blocking console reads can't be woken."""
        self._stop.set()

    def join(self, timeout: float | None = None) -> bool:
        """Wait for the thread to finish. Returns True if it has."""
        if self._thread.ident is not None:
            self._thread.join(timeout)
        return not self._thread.is_alive()

    @property
    def running(self) -> bool:
        return self._thread.is_alive()


class InterruptController:
    """Starts watchers for one command invocation and answers is_cancelled()."""

    def __init__(self, token: CancellationToken | None = None,
                 poll_interval: float = DEFAULT_POLL_INTERVAL):
        self.token = token or CancellationToken()
        self.poll_interval = poll_interval
        self.watchers: list[Watcher] = []

    def is_cancelled(self) -> bool:
        return self.token.is_cancelled()

    def start_key_listener(self, stream=None) -> Watcher:
        """Cancel once a line (or EOF) is read from stream.

        The caller prints the 'Press [ENTER] to stop' prompt.

        Args:
            stream: Text stream to read from (default: stdin)
        """
        source = stream if stream is not None else click.get_text_stream('stdin')

        def listen(_stop):
            try:
                source.readline()
            except (OSError, ValueError):
                # Closed or broken stdin counts as a key press
                pass
            finally:
                self.token.cancel()

        return self._start(Watcher('lifx-key-listener', listen))

    def start_timer(self, seconds: float) -> Watcher:
        """Cancel after `seconds`, or as soon as the watcher is stopped.

        A duration of zero or less cancels before returning.
        """
        if seconds <= 0:
            self.token.cancel()

        def sleep(stop):
            try:
                stop.wait(min(max(seconds, 0), threading.TIMEOUT_MAX))
            finally:
                self.token.cancel()

        return self._start(Watcher('lifx-timer', sleep, stoppable=True))

    def _start(self, watcher: Watcher) -> Watcher:
        self.watchers.append(watcher)
        return watcher.start()

    def sleep(self, seconds: float) -> bool:
        """Pause a command loop, waking early on cancellation.

        Returns:
            True if the token was cancelled
        """
        return self.token.wait(seconds)

    def wait_until_cancelled(self):
        """Block the calling loop, polling every poll_interval seconds."""
        while not self.token.wait(self.poll_interval):
            pass

    def shutdown(self, wait: bool = False, timeout: float | None = None):
        """Stop timers and optionally join every watcher.

        Key listeners blocked on stdin are abandoned; they are daemon
        threads and end with the process.
        """
        for watcher in self.watchers:
            if watcher.stoppable:
                watcher.stop()
        if wait:
            for watcher in self.watchers:
                if watcher.stoppable:
                    watcher.join(timeout)
