"""
Gesture engine that turns hand landmark frames into confirmed gesture events.
"""
import logging
import threading
from typing import Any, Callable, List, Sequence

from .classifier import CASCADE, GestureRule, classify
from .config import Cfg
from .features import THUMB_EXTENSION_THRESHOLD, extract_features
from .stabilizer import CONFIRM_FRAMES, GestureStabilizer
from .types import CurrentGesture, FrameResult, GestureMatch, StabilizedGestureEvent

logger = logging.getLogger(__name__)

GestureListener = Callable[[StabilizedGestureEvent], None]


class GestureEngine:
    """
    Runs extraction, classification and stabilization for each frame.

    Features:
    - Pure per-frame extraction and rule cascade
    - Debounce over consecutive frames before a gesture is confirmed
    - Listeners notified in frame order, one call per confirmation
    - Stopping drops any frame still being classified and resets the run
    """

    def __init__(self, confirm_frames: int = CONFIRM_FRAMES,
                 thumb_threshold: float = THUMB_EXTENSION_THRESHOLD,
                 rules: Sequence[GestureRule] = CASCADE):
        """
        Initialize the engine.

        Args:
            confirm_frames: Consecutive identical matches needed to confirm
            thumb_threshold: Lateral thumb distance that counts as extended
            rules: Ordered classification rules
        """
        self.thumb_threshold = thumb_threshold
        self.rules = tuple(rules)
        self.stabilizer = GestureStabilizer(confirm_frames)

        self._lock = threading.RLock()
        self._listeners: List[GestureListener] = []
        self._running = True
        self._generation = 0

    @classmethod
    def from_config(cls, cfg: Cfg) -> "GestureEngine":
        return cls(
            confirm_frames=cfg.stabilizer.confirm_frames,
            thumb_threshold=cfg.features.thumb_extension_threshold,
        )

    def subscribe(self, listener: GestureListener) -> None:
        with self._lock:
            if listener not in self._listeners:
                self._listeners.append(listener)

    def unsubscribe(self, listener: GestureListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    @property
    def current(self) -> CurrentGesture:
        """The confirmed gesture for live display, or None while unconfirmed."""
        return self.stabilizer.current

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self._running

    def start(self) -> None:
        """Resume tracking from an unconfirmed state."""
        with self._lock:
            if self._running:
                return
            self._running = True
            self._generation += 1
            self.stabilizer.reset()
        logger.info("Gesture tracking started")

    def stop(self) -> None:
        """Stop tracking, discard any in-flight frame and clear the current run."""
        with self._lock:
            self._running = False
            self._generation += 1
            self.stabilizer.reset()
        logger.info("Gesture tracking stopped")

    def process_frame(self, landmarks: Any) -> FrameResult:
        """
        Process one frame of landmarks.

        Args:
            landmarks: HandFrame or raw tracker points; None when no hand is visible

        Returns:
            FrameResult with the features, raw match, the confirmation event
            if this frame produced one, and the current confirmed gesture
        """
        with self._lock:
            if not self._running:
                return FrameResult(None, GestureMatch.none(), None, self.current)
            generation = self._generation

        features = extract_features(landmarks, self.thumb_threshold)
        match = classify(features, self.rules)

        with self._lock:
            if not self._running or generation != self._generation:
                logger.debug("Dropping frame that was in flight when tracking stopped")
                return FrameResult(features, match, None, self.current)

            had_run = self.stabilizer.state.run_length > 0
            event = self.stabilizer.update(match if features is not None else None)

            if features is None and had_run:
                logger.debug("Hand lost, stabilizer reset")
            if event is not None:
                logger.info("Confirmed gesture %r (confidence %.2f)", event.label, event.confidence)
                self._dispatch(event)

            return FrameResult(features, match, event, self.current)

    def _dispatch(self, event: StabilizedGestureEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Gesture listener %r failed for %r", listener, event.label)
