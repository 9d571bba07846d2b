"""
Hand landmark detection using MediaPipe.
"""
import logging

import cv2
import mediapipe as mp
import numpy as np
from typing import Optional

from .types import HandFrame, MalformedFrameError

logger = logging.getLogger(__name__)


class HandsTracker:
    """Hand landmark tracker using MediaPipe Hands."""

    def __init__(self, max_num_hands: int = 1, model_complexity: int = 1,
                 min_detection_conf: float = 0.7, min_tracking_conf: float = 0.5):
        """
        Initialize the hands tracker.

        Args:
            max_num_hands: Maximum number of hands to detect
            model_complexity: MediaPipe landmark model complexity (0 or 1)
            min_detection_conf: Minimum confidence for hand detection
            min_tracking_conf: Minimum confidence for hand tracking
        """
        self.mp_hands = mp.solutions.hands
        self.hands = self.mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=max_num_hands,
            model_complexity=model_complexity,
            min_detection_confidence=min_detection_conf,
            min_tracking_confidence=min_tracking_conf
        )

    def process(self, frame_bgr: np.ndarray) -> Optional[HandFrame]:
        """
        Process a frame and return the first hand's landmarks.

        Args:
            frame_bgr: Input frame in BGR format

        Returns:
            HandFrame of 21 normalized points, or None if no hand detected
        """
        # MediaPipe expects RGB
        frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)
        results = self.hands.process(frame_rgb)

        if not results.multi_hand_landmarks:
            return None

        hand_landmarks = results.multi_hand_landmarks[0]
        try:
            return HandFrame.from_points(hand_landmarks.landmark)
        except MalformedFrameError as e:
            logger.warning("Tracker returned unusable landmarks: %s", e)
            return None

    def close(self) -> None:
        self.hands.close()
