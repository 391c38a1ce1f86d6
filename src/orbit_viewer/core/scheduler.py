"""Cooperative per-frame animation scheduling.

Playback speed is tied to the display refresh rate: each tick advances the
phase angle by a fixed step regardless of wall-clock time.
"""
from __future__ import annotations

from functools import partial
from typing import Callable, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .model import SimulationState

TickCallback = Callable[[], None]
FrameCallback = Callable[["SimulationState"], None]


class FrameTickSource:
    """Display-synchronised tick source, driven once per refresh by the host loop."""

    def __init__(self) -> None:
        self._next_handle = 0
        self._pending: dict[int, TickCallback] = {}
        self.frames = 0

    @property
    def pending(self) -> int:
        return len(self._pending)

    def request(self, callback: TickCallback) -> int:
        self._next_handle += 1
        self._pending[self._next_handle] = callback
        return self._next_handle

    def cancel(self, handle: int) -> None:
        self._pending.pop(handle, None)

    def run_pending(self) -> int:
        """Fire callbacks requested before this frame; return how many fired.

        Callbacks requested while firing run on the next frame, and callbacks
        cancelled by an earlier callback in the same frame are skipped.
        """

        self.frames += 1
        fired = 0
        for handle in list(self._pending):
            callback = self._pending.pop(handle, None)
            if callback is None:
                continue
            callback()
            fired += 1
        return fired


class AnimationScheduler:
    """
    Self-rescheduling tick chain that advances the simulation phase.

    Each ``start()`` opens a new generation. A scheduled callback carries the
    generation it was created for and becomes a no-op once ``stop()`` has
    moved the generation on, or when the state is no longer running at fire
    time.
    """

    def __init__(
        self,
        state: SimulationState,
        tick_source: FrameTickSource,
        on_frame: FrameCallback | None = None,
        *,
        step: float | None = None,
    ) -> None:
        self._state = state
        self._tick_source = tick_source
        self._on_frame = on_frame
        self._step = step
        self._generation = 0
        self._handle: int | None = None
        self._closed = False
        self.ticks = 0

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_active(self) -> bool:
        return self._handle is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def start(self) -> None:
        if self._closed:
            raise RuntimeError("Scheduler has been closed")
        if self._handle is not None:
            return
        self._generation += 1
        self._schedule(self._generation)

    def stop(self) -> None:
        self._generation += 1
        if self._handle is not None:
            self._tick_source.cancel(self._handle)
            self._handle = None

    def close(self) -> None:
        self.stop()
        self._closed = True

    def _schedule(self, generation: int) -> None:
        self._handle = self._tick_source.request(partial(self._on_tick, generation))

    def _on_tick(self, generation: int) -> None:
        if generation != self._generation:
            return
        self._handle = None
        if not self._state.is_running:
            return
        self._state.advance(self._step)
        self.ticks += 1
        if self._on_frame is not None:
            self._on_frame(self._state)
        # on_frame may have stopped or restarted the chain
        if generation == self._generation and self._handle is None and not self._closed:
            self._schedule(generation)

    def __enter__(self) -> "AnimationScheduler":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["AnimationScheduler", "FrameTickSource"]
