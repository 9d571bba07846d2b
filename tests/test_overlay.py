"""
Test cases for drawing landmarks and status onto frames.
"""
import unittest
import sys
from pathlib import Path

import numpy as np

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from signspeak.overlay import HAND_CONNECTIONS, draw_landmarks, draw_status, to_pixel
from signspeak.types import CurrentGesture, HandFrame
from hand_poses import open_palm


class TestOverlay(unittest.TestCase):
    """Test frame annotation."""

    def setUp(self):
        self.frame = np.zeros((480, 640, 3), dtype=np.uint8)
        self.hand = HandFrame.from_points(open_palm())

    def test_connections_reference_valid_landmarks(self):
        for start, end in HAND_CONNECTIONS:
            self.assertTrue(0 <= start < 21 and 0 <= end < 21)

    def test_to_pixel(self):
        self.assertEqual(to_pixel(self.hand, 0, 640, 480), (320, 384))

    def test_draw_landmarks(self):
        out = draw_landmarks(self.frame, self.hand)
        self.assertIs(out, self.frame)
        self.assertTrue(self.frame.any())
        x, y = to_pixel(self.hand, 8, 640, 480)
        self.assertTrue(self.frame[y, x].any())

    def test_draw_status(self):
        out = draw_status(self.frame, CurrentGesture("V", 0.85), "Hello V", muted=True)
        self.assertIs(out, self.frame)
        self.assertTrue(self.frame[:100].any())

    def test_draw_status_without_gesture(self):
        draw_status(self.frame, CurrentGesture(None, 0.0), hand_detected=False)
        self.assertTrue(self.frame.any())


if __name__ == '__main__':
    unittest.main()
