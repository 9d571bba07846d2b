"""
Operator feedback drawn onto camera frames with OpenCV.
"""
import cv2
import numpy as np
from typing import Optional, Tuple

from .types import CurrentGesture, HandFrame

HAND_CONNECTIONS: Tuple[Tuple[int, int], ...] = (
    (0, 1), (1, 2), (2, 3), (3, 4),         # Thumb
    (0, 5), (5, 6), (6, 7), (7, 8),         # Index
    (0, 9), (9, 10), (10, 11), (11, 12),    # Middle
    (0, 13), (13, 14), (14, 15), (15, 16),  # Ring
    (0, 17), (17, 18), (18, 19), (19, 20),  # Pinky
    (5, 9), (9, 13), (13, 17),              # Palm
)

LINE_COLOR = (94, 197, 34)    # BGR
POINT_COLOR = (74, 163, 22)
TEXT_COLOR = (255, 255, 255)


def to_pixel(hand: HandFrame, idx: int, width: int, height: int) -> Tuple[int, int]:
    return int(hand[idx].x * width), int(hand[idx].y * height)


def draw_landmarks(frame: np.ndarray, hand: HandFrame) -> np.ndarray:
    """
    Draw hand connections and landmark points on the frame.

    Args:
        frame: BGR frame, modified in place
        hand: Landmarks in normalized coordinates

    Returns:
        The same frame, for chaining
    """
    height, width = frame.shape[:2]

    for start, end in HAND_CONNECTIONS:
        cv2.line(frame, to_pixel(hand, start, width, height),
                 to_pixel(hand, end, width, height), LINE_COLOR, 3)

    for idx in range(len(hand)):
        cv2.circle(frame, to_pixel(hand, idx, width, height), 5, POINT_COLOR, -1)

    return frame


def draw_status(frame: np.ndarray, current: CurrentGesture,
                transcript_text: str = "", muted: bool = False,
                hand_detected: Optional[bool] = None) -> np.ndarray:
    """Draw the detected gesture, transcript and key help onto the frame."""
    height = frame.shape[0]

    if current.gesture:
        status = f"Detected: {current.gesture} ({round(current.confidence * 100)}%)"
        color = (0, 255, 0)
    elif hand_detected is False:
        status = "No hand detected"
        color = (0, 0, 255)
    else:
        status = "No gesture detected"
        color = (0, 165, 255)

    cv2.putText(frame, status, (10, 30), cv2.FONT_HERSHEY_SIMPLEX, 0.8, color, 2)
    if transcript_text:
        cv2.putText(frame, transcript_text, (10, 65), cv2.FONT_HERSHEY_SIMPLEX, 0.6, TEXT_COLOR, 1)
    if muted:
        cv2.putText(frame, "MUTED", (10, 95), cv2.FONT_HERSHEY_SIMPLEX, 0.6, (0, 0, 255), 2)

    cv2.putText(frame, "m: mute  c: clear  a: add to sentence  s: speak sentence",
                (10, height - 40), cv2.FONT_HERSHEY_SIMPLEX, 0.45, TEXT_COLOR, 1)
    cv2.putText(frame, "x: remove word  g: guide  q: quit",
                (10, height - 20), cv2.FONT_HERSHEY_SIMPLEX, 0.45, TEXT_COLOR, 1)
    return frame
