"""
Speech output for confirmed gestures with repeat suppression.
"""
import logging
import time
from typing import Callable, Optional

from .config import Cfg
from .types import SpeakerProto, StabilizedGestureEvent

logger = logging.getLogger(__name__)


class GestureAnnouncer:
    """
    Voices confirmed gestures through a speaker.

    The stabilizer re-confirms a held gesture after every break in the run,
    so identical text is suppressed for a cooldown window instead of being
    spoken again.
    """

    def __init__(self, speaker: SpeakerProto, cooldown_ms: int = 2000,
                 min_confidence: float = 0.6, muted: bool = False,
                 clock: Callable[[], float] = time.monotonic):
        """
        Initialize the announcer.

        Args:
            speaker: Speech output implementing SpeakerProto
            cooldown_ms: Window in which identical text is not repeated
            min_confidence: Gestures at or below this confidence are not spoken
            muted: Start muted
            clock: Monotonic time source in seconds
        """
        self.speaker = speaker
        self.cooldown_ms = cooldown_ms
        self.min_confidence = min_confidence
        self.muted = muted
        self._clock = clock
        self.last_spoken: Optional[str] = None
        self.last_spoken_at: float = 0.0

    @classmethod
    def from_config(cls, speaker: SpeakerProto, cfg: Cfg) -> "GestureAnnouncer":
        return cls(
            speaker,
            cooldown_ms=cfg.speech.cooldown_ms,
            min_confidence=cfg.speech.min_confidence,
            muted=cfg.speech.muted,
        )

    async def announce(self, event: StabilizedGestureEvent) -> bool:
        """Speak a confirmed gesture. Returns True if it was spoken."""
        if self.muted or event.confidence <= self.min_confidence:
            return False
        return await self.say(event.label)

    async def say(self, text: str) -> bool:
        """Speak arbitrary text unless it repeats the last utterance too soon."""
        if not text:
            return False

        now = self._clock()
        if text == self.last_spoken and (now - self.last_spoken_at) * 1000 < self.cooldown_ms:
            logger.debug("Suppressing repeat of %r within cooldown", text)
            return False

        await self.speaker.stop()
        await self.speaker.speak(text)
        self.last_spoken = text
        self.last_spoken_at = now
        return True

    async def set_muted(self, muted: bool) -> None:
        self.muted = muted
        if muted:
            await self.speaker.stop()
        logger.info("Speech %s", "muted" if muted else "unmuted")

    async def toggle_mute(self) -> bool:
        await self.set_muted(not self.muted)
        return self.muted
