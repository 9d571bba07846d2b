"""
Transcript and sentence assembly from confirmed gestures.
"""
from collections import deque
from typing import Deque, List, Tuple

from .config import Cfg
from .types import StabilizedGestureEvent

QUICK_WORDS: Tuple[str, ...] = (
    "I", "You", "We", "Hello", "Please", "Thank You", "Yes", "No",
    "Help", "Want", "Need", "Good", "Bad", "Love", "Sorry", "Eat",
    "Drink", "Water", "Walk", "Look", "How", "What", "Where", "Why",
)


class Transcript:
    """Recent confirmed gestures, without back-to-back repeats."""

    def __init__(self, max_items: int = 10, min_confidence: float = 0.6):
        if max_items < 1:
            raise ValueError(f"max_items must be at least 1, got {max_items}")
        self.min_confidence = min_confidence
        self._items: Deque[str] = deque(maxlen=max_items)

    @classmethod
    def from_config(cls, cfg: Cfg) -> "Transcript":
        return cls(max_items=cfg.transcript.max_items,
                   min_confidence=cfg.transcript.min_confidence)

    def add(self, event: StabilizedGestureEvent) -> bool:
        """
        Append a confirmed gesture.

        Returns:
            True if the label was appended; False when it is too uncertain
            or repeats the most recent item
        """
        if event.confidence <= self.min_confidence:
            return False
        if self._items and self._items[-1] == event.label:
            return False
        self._items.append(event.label)
        return True

    def clear(self) -> None:
        self._items.clear()

    @property
    def items(self) -> List[str]:
        return list(self._items)

    @property
    def text(self) -> str:
        return " ".join(self._items)

    def __len__(self) -> int:
        return len(self._items)


class SentenceBuilder:
    """Word list the user composes from detections and the quick-word bank."""

    def __init__(self):
        self._words: List[str] = []

    def add_word(self, word: str) -> None:
        word = word.strip()
        if word:
            self._words.append(word)

    def remove_at(self, index: int) -> str:
        """Remove and return the word at index; raises IndexError if out of range."""
        return self._words.pop(index)

    def pop(self) -> str:
        return self._words.pop()

    def clear(self) -> None:
        self._words.clear()

    def add_detected(self, transcript: Transcript) -> int:
        """Move every transcript item into the sentence. Returns how many were added."""
        detected = transcript.items
        self._words.extend(detected)
        if detected:
            transcript.clear()
        return len(detected)

    async def speak(self, announcer) -> bool:
        """Speak the whole sentence through a GestureAnnouncer."""
        if not self._words:
            return False
        return await announcer.say(self.text)

    @property
    def words(self) -> List[str]:
        return list(self._words)

    @property
    def text(self) -> str:
        return " ".join(self._words)

    def __len__(self) -> int:
        return len(self._words)
