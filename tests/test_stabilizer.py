"""
Test cases for the temporal gesture stabilizer.
"""
import unittest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from signspeak.stabilizer import CONFIRM_FRAMES, GestureStabilizer, current_gesture, stabilize
from signspeak.types import CurrentGesture, GestureMatch, StabilizedGestureEvent, StabilizerState

CONFIDENCE = {"A": 0.85, "B": 0.85, "Yes": 0.6}


def to_match(label):
    """'-' means no hand, '?' means a hand that matched no rule."""
    if label == "-":
        return None
    if label == "?":
        return GestureMatch.none()
    return GestureMatch(label, CONFIDENCE.get(label, 0.7))


def run(labels, threshold=CONFIRM_FRAMES):
    """Feed a label sequence and return the frame indexes that emitted events."""
    state = StabilizerState()
    emitted = []
    for i, label in enumerate(labels):
        state, event = stabilize(state, to_match(label), threshold)
        if event is not None:
            emitted.append((i, event.label))
    return emitted


class TestStabilize(unittest.TestCase):
    """Test the pure stabilizer step."""

    def test_held_gesture_emits_once(self):
        self.assertEqual(run(["A", "A", "A", "A"]), [(2, "A")])

    def test_alternating_never_emits(self):
        self.assertEqual(run(["A", "B", "A", "B"]), [])

    def test_hand_loss_resets_run(self):
        self.assertEqual(run(["A", "A", "-", "A", "A", "A"]), [(5, "A")])

    def test_unmatched_frame_resets_run(self):
        self.assertEqual(run(["A", "A", "?", "A", "A", "A"]), [(5, "A")])

    def test_interrupted_run_confirms_new_label(self):
        self.assertEqual(run(["A", "A", "B", "B", "B"]), [(4, "B")])

    def test_second_gesture_confirmed_after_switch(self):
        self.assertEqual(run(["A", "A", "A", "B", "B", "B"]), [(2, "A"), (5, "B")])

    def test_long_hold_emits_only_at_threshold(self):
        self.assertEqual(run(["Yes"] * 20), [(2, "Yes")])

    def test_reconfirm_after_release(self):
        self.assertEqual(run(["A"] * 4 + ["-"] + ["A"] * 3), [(2, "A"), (7, "A")])

    def test_threshold_of_one(self):
        self.assertEqual(run(["A", "A", "B"], threshold=1), [(0, "A"), (2, "B")])

    def test_state_transitions(self):
        state, event = stabilize(StabilizerState(), GestureMatch("A", 0.85))
        self.assertEqual(state, StabilizerState("A", 1, 0.85))
        self.assertIsNone(event)

        state, _ = stabilize(state, GestureMatch("A", 0.85))
        state, event = stabilize(state, GestureMatch("A", 0.85))
        self.assertEqual(state.run_length, 3)
        self.assertEqual(event, StabilizedGestureEvent("A", 0.85))

        state, event = stabilize(state, None)
        self.assertEqual(state, StabilizerState())
        self.assertIsNone(event)

    def test_pure(self):
        state = StabilizerState("A", 2, 0.85)
        first = stabilize(state, GestureMatch("A", 0.85))
        second = stabilize(state, GestureMatch("A", 0.85))
        self.assertEqual(first, second)
        self.assertEqual(state, StabilizerState("A", 2, 0.85))


class TestCurrentGesture(unittest.TestCase):
    """Test the live gesture view."""

    def test_unconfirmed(self):
        self.assertEqual(current_gesture(StabilizerState("A", 2, 0.85)), CurrentGesture(None, 0.0))

    def test_confirmed(self):
        self.assertEqual(current_gesture(StabilizerState("A", 3, 0.85)), CurrentGesture("A", 0.85))
        self.assertEqual(current_gesture(StabilizerState("A", 9, 0.85)), CurrentGesture("A", 0.85))

    def test_to_dict(self):
        self.assertEqual(CurrentGesture("V", 0.85).to_dict(), {"gesture": "V", "confidence": 0.85})


class TestGestureStabilizer(unittest.TestCase):
    """Test the stateful wrapper."""

    def setUp(self):
        self.stabilizer = GestureStabilizer()

    def test_update_and_current(self):
        match = GestureMatch("B", 0.85)
        events = [self.stabilizer.update(match) for _ in range(4)]
        self.assertEqual(events, [None, None, StabilizedGestureEvent("B", 0.85), None])
        self.assertEqual(self.stabilizer.current, CurrentGesture("B", 0.85))

    def test_reset(self):
        for _ in range(3):
            self.stabilizer.update(GestureMatch("B", 0.85))
        self.stabilizer.reset()
        self.assertEqual(self.stabilizer.state, StabilizerState())
        self.assertEqual(self.stabilizer.current.gesture, None)

    def test_invalid_threshold(self):
        with self.assertRaises(ValueError):
            GestureStabilizer(0)


if __name__ == '__main__':
    unittest.main()
