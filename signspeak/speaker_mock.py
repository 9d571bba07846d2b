"""
Mock speaker implementation for running without a speech engine.
"""
import logging
from typing import List

logger = logging.getLogger(__name__)


class MockSpeaker:
    """Mock speaker that logs utterances instead of voicing them."""

    def __init__(self):
        """Initialize the mock speaker."""
        self.spoken: List[str] = []
        self.stop_count = 0

    async def speak(self, text: str) -> None:
        """Record the text instead of speaking it."""
        self.spoken.append(text)
        logger.info("[MockSpeaker] Speak: %r (call #%d)", text, len(self.spoken))

    async def stop(self) -> None:
        """Record a cancellation."""
        self.stop_count += 1

    def reset_counters(self) -> None:
        """Reset recorded calls for testing."""
        self.spoken.clear()
        self.stop_count = 0
