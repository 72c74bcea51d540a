import logging

import pygame

logger = logging.getLogger(__name__)


class Timer:
    """Single-shot, pausable timer driven by a millisecond clock.

    The host loop calls ``poll()``; the callback runs at most once, when
    the clock reaches ``due``. Pausing keeps the unspent part of the delay so
    ``resume()`` waits only for what is left.
    """

    def __init__(self, callback, delay, clock=None):
        self.callback = callback
        self.clock = clock or pygame.time.get_ticks
        self.remaining = delay
        self.start = None
        self.due = None
        self.stopped = False
        self.resume()

    def pause(self):
        if self.due is None:
            return
        self.due = None
        self.remaining -= self.clock() - self.start

    def resume(self):
        if self.stopped:
            return
        self.start = self.clock()
        self.due = self.start + self.remaining

    def stop(self):
        self.due = None
        self.stopped = True

    def poll(self):
        """Run the callback if the timer is due. Returns True when it fired."""
        if self.due is None or self.clock() < self.due:
            return False
        self.due = None
        self.stopped = True
        self.callback()
        return True


class Scheduler:
    """Owns the single pending tick timer of a game."""

    def __init__(self, clock=None):
        self.clock = clock or pygame.time.get_ticks
        self.timer = None
        self.paused = False

    @property
    def running(self):
        return self.timer is not None and not self.timer.stopped

    def start(self, callback, period):
        """Arm a new timer for ``period`` ms, replacing any pending one."""
        if self.timer is not None:
            self.timer.stop()
        self.paused = False
        self.timer = Timer(callback, period, self.clock)
        return self.timer

    def pause(self):
        if self.timer is None or self.paused:
            return
        self.paused = True
        self.timer.pause()
        logger.debug("Timer paused with %.1f ms remaining", self.timer.remaining)

    def resume(self):
        if self.timer is None or not self.paused:
            return
        self.paused = False
        self.timer.resume()
        logger.debug("Timer resumed, due in %.1f ms", self.timer.remaining)

    def stop(self):
        if self.timer is not None:
            self.timer.stop()
        self.timer = None
        self.paused = False

    def poll(self):
        if self.timer is None:
            return False
        return self.timer.poll()
