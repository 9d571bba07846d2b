"""
Finger extension features derived from a single hand frame.
"""
import logging
from typing import Any, Optional

from .types import FingerExtensionState, HandFrame, Landmark, MalformedFrameError

logger = logging.getLogger(__name__)

# Hand topology (MediaPipe 21-point layout)
WRIST = 0
THUMB_TIP = 4
INDEX_PIP = 6
INDEX_TIP = 8
MIDDLE_PIP = 10
MIDDLE_TIP = 12
RING_PIP = 14
RING_TIP = 16
PINKY_PIP = 18
PINKY_TIP = 20

# Thumb extension is lateral, so it is measured along x
THUMB_EXTENSION_THRESHOLD = 0.1


def is_finger_extended(frame: HandFrame, tip_idx: int, pip_idx: int) -> bool:
    """A finger is extended when its tip sits above its PIP joint (smaller y)."""
    return frame[tip_idx].y < frame[pip_idx].y


def is_thumb_extended(frame: HandFrame, threshold: float = THUMB_EXTENSION_THRESHOLD) -> bool:
    """The thumb is extended when its tip is far enough sideways from the wrist."""
    return abs(frame[THUMB_TIP].x - frame[WRIST].x) > threshold


def horizontal_gap(a: Landmark, b: Landmark) -> float:
    return abs(a.x - b.x)


def manhattan(a: Landmark, b: Landmark) -> float:
    return abs(a.x - b.x) + abs(a.y - b.y)


def extract_features(landmarks: Any,
                     thumb_threshold: float = THUMB_EXTENSION_THRESHOLD) -> Optional[FingerExtensionState]:
    """
    Derive finger extension flags from one frame of landmarks.

    Args:
        landmarks: A HandFrame, any iterable of raw tracker points, or None when no hand is visible
        thumb_threshold: Minimum |thumb tip x - wrist x| for an extended thumb

    Returns:
        FingerExtensionState, or None if there is no usable hand in the frame
    """
    if landmarks is None:
        return None

    try:
        if isinstance(landmarks, HandFrame):
            frame = landmarks
        else:
            points = list(landmarks)
            if not points:
                return None
            frame = HandFrame.from_points(points)
    except (MalformedFrameError, TypeError) as e:
        logger.debug("Discarding malformed hand frame: %s", e)
        return None

    return FingerExtensionState(
        thumb=is_thumb_extended(frame, thumb_threshold),
        index=is_finger_extended(frame, INDEX_TIP, INDEX_PIP),
        middle=is_finger_extended(frame, MIDDLE_TIP, MIDDLE_PIP),
        ring=is_finger_extended(frame, RING_TIP, RING_PIP),
        pinky=is_finger_extended(frame, PINKY_TIP, PINKY_PIP),
        frame=frame,
    )
