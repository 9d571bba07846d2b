"""
Temporal debounce that turns per-frame matches into confirmed gestures.
"""
import threading
from typing import Optional, Tuple

from .types import CurrentGesture, GestureMatch, StabilizedGestureEvent, StabilizerState


CONFIRM_FRAMES = 3


def stabilize(state: StabilizerState, match: Optional[GestureMatch],
              threshold: int = CONFIRM_FRAMES) -> Tuple[StabilizerState, Optional[StabilizedGestureEvent]]:
    """
    Advance the stabilizer by one frame.

    Args:
        state: State after the previous frame
        match: This frame's classification, or None when no hand was detected
        threshold: Consecutive identical labels needed to confirm

    Returns:
        (new_state, event) where event is set only on the frame the run
        length first reaches the threshold
    """
    if match is None or match.label is None:
        return StabilizerState(), None

    if match.label != state.last_label:
        new_state = StabilizerState(match.label, 1, match.confidence)
    else:
        new_state = StabilizerState(match.label, state.run_length + 1, match.confidence)

    if new_state.run_length == threshold:
        return new_state, StabilizedGestureEvent(label=match.label, confidence=match.confidence)
    return new_state, None


def current_gesture(state: StabilizerState, threshold: int = CONFIRM_FRAMES) -> CurrentGesture:
    if state.last_label is not None and state.run_length >= threshold:
        return CurrentGesture(gesture=state.last_label, confidence=state.confidence)
    return CurrentGesture(gesture=None, confidence=0.0)


class GestureStabilizer:
    """
    Owns one StabilizerState and applies `stabilize` to it frame by frame.

    The read-modify-write of the state happens under a lock so frames fed
    from more than one thread still advance the run one frame at a time.
    """

    def __init__(self, threshold: int = CONFIRM_FRAMES):
        if threshold < 1:
            raise ValueError(f"threshold must be at least 1, got {threshold}")
        self.threshold = threshold
        self._state = StabilizerState()
        self._lock = threading.RLock()

    def update(self, match: Optional[GestureMatch]) -> Optional[StabilizedGestureEvent]:
        with self._lock:
            self._state, event = stabilize(self._state, match, self.threshold)
            return event

    def reset(self) -> None:
        with self._lock:
            self._state = StabilizerState()

    @property
    def state(self) -> StabilizerState:
        with self._lock:
            return self._state

    @property
    def current(self) -> CurrentGesture:
        with self._lock:
            return current_gesture(self._state, self.threshold)
