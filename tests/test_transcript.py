"""
Test cases for the transcript and sentence builder.
"""
import unittest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from signspeak.config import load_config
from signspeak.speaker_mock import MockSpeaker
from signspeak.speech import GestureAnnouncer
from signspeak.transcript import QUICK_WORDS, SentenceBuilder, Transcript
from signspeak.types import StabilizedGestureEvent


def event(label, confidence=0.85):
    return StabilizedGestureEvent(label, confidence)


class TestTranscript(unittest.TestCase):
    """Test transcript accumulation."""

    def setUp(self):
        self.transcript = Transcript()

    def test_add(self):
        self.assertTrue(self.transcript.add(event("Hello", 0.8)))
        self.assertTrue(self.transcript.add(event("I Love You", 0.9)))
        self.assertEqual(self.transcript.items, ["Hello", "I Love You"])
        self.assertEqual(self.transcript.text, "Hello I Love You")

    def test_consecutive_duplicate_ignored(self):
        self.transcript.add(event("A"))
        self.assertFalse(self.transcript.add(event("A")))
        self.assertEqual(len(self.transcript), 1)

    def test_non_consecutive_duplicate_kept(self):
        for label in ("A", "B", "A"):
            self.transcript.add(event(label))
        self.assertEqual(self.transcript.items, ["A", "B", "A"])

    def test_confidence_gate(self):
        self.assertFalse(self.transcript.add(event("Yes", 0.6)))
        self.assertFalse(self.transcript.add(event("Please", 0.6)))
        self.assertTrue(self.transcript.add(event("Maybe", 0.65)))
        self.assertEqual(self.transcript.items, ["Maybe"])

    def test_keeps_most_recent_items(self):
        labels = ["A", "B"] * 6
        for label in labels:
            self.transcript.add(event(label))
        self.assertEqual(len(self.transcript), 10)
        self.assertEqual(self.transcript.items, labels[-10:])

    def test_clear(self):
        self.transcript.add(event("V"))
        self.transcript.clear()
        self.assertEqual(self.transcript.items, [])
        self.assertEqual(self.transcript.text, "")

    def test_invalid_size(self):
        with self.assertRaises(ValueError):
            Transcript(max_items=0)

    def test_from_config(self):
        cfg = load_config()
        cfg.transcript.max_items = 2
        transcript = Transcript.from_config(cfg)
        for label in ("A", "B", "L"):
            transcript.add(event(label))
        self.assertEqual(transcript.items, ["B", "L"])


class TestSentenceBuilder(unittest.TestCase):
    """Test sentence composition."""

    def setUp(self):
        self.sentence = SentenceBuilder()

    def test_quick_words(self):
        self.assertEqual(len(QUICK_WORDS), 24)
        self.assertEqual(len(set(QUICK_WORDS)), 24)

    def test_add_and_remove(self):
        for word in ("I", "Want", "Water"):
            self.sentence.add_word(word)
        self.assertEqual(self.sentence.remove_at(1), "Want")
        self.assertEqual(self.sentence.text, "I Water")
        self.assertEqual(self.sentence.pop(), "Water")
        self.assertEqual(self.sentence.words, ["I"])

    def test_blank_words_ignored(self):
        self.sentence.add_word("   ")
        self.sentence.add_word(" Help ")
        self.assertEqual(self.sentence.words, ["Help"])

    def test_remove_out_of_range(self):
        with self.assertRaises(IndexError):
            self.sentence.remove_at(3)

    def test_add_detected_moves_transcript(self):
        transcript = Transcript()
        transcript.add(event("Hello", 0.8))
        transcript.add(event("V"))
        self.sentence.add_word("Say")

        added = self.sentence.add_detected(transcript)

        self.assertEqual(added, 2)
        self.assertEqual(self.sentence.words, ["Say", "Hello", "V"])
        self.assertEqual(len(transcript), 0)

    def test_add_detected_empty(self):
        self.assertEqual(self.sentence.add_detected(Transcript()), 0)
        self.assertEqual(len(self.sentence), 0)

    def test_clear(self):
        self.sentence.add_word("Hello")
        self.sentence.clear()
        self.assertEqual(self.sentence.text, "")


class TestSentenceSpeech(unittest.IsolatedAsyncioTestCase):
    """Test speaking a composed sentence."""

    async def test_speak(self):
        speaker = MockSpeaker()
        announcer = GestureAnnouncer(speaker)
        sentence = SentenceBuilder()
        for word in ("I", "Need", "Help"):
            sentence.add_word(word)
        self.assertTrue(await sentence.speak(announcer))
        self.assertEqual(speaker.spoken, ["I Need Help"])

    async def test_speak_empty(self):
        speaker = MockSpeaker()
        self.assertFalse(await SentenceBuilder().speak(GestureAnnouncer(speaker)))
        self.assertEqual(speaker.spoken, [])


if __name__ == '__main__':
    unittest.main()
