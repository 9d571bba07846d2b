"""
Main application: webcam sign language translator.
"""
import argparse
import asyncio
import logging
from typing import Optional

import cv2

from .catalog import format_guide
from .config import Cfg, load_config
from .gestures import GestureEngine
from .landmarks import HandsTracker
from .overlay import draw_landmarks, draw_status
from .speaker_mock import MockSpeaker
from .speech import GestureAnnouncer
from .transcript import SentenceBuilder, Transcript
from .types import SpeakerProto

logger = logging.getLogger(__name__)


class SignTranslatorApp:
    """Main application class for the sign gesture translator."""

    def __init__(self, config: Optional[Cfg] = None, config_path: Optional[str] = None,
                 muted: Optional[bool] = None, speaker: Optional[SpeakerProto] = None):
        """Initialize the application with configuration."""
        self.config = config or load_config(config_path)
        self.tracker = HandsTracker(
            max_num_hands=self.config.mediapipe.max_num_hands,
            model_complexity=self.config.mediapipe.model_complexity,
            min_detection_conf=self.config.mediapipe.min_detection_confidence,
            min_tracking_conf=self.config.mediapipe.min_tracking_confidence
        )
        self.engine = GestureEngine.from_config(self.config)
        self.transcript = Transcript.from_config(self.config)
        self.sentence = SentenceBuilder()

        self.announcer = GestureAnnouncer.from_config(speaker or MockSpeaker(), self.config)
        if muted is not None:
            self.announcer.muted = muted

        # Initialize camera
        self.cap = cv2.VideoCapture(self.config.camera.index)
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.config.camera.width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.config.camera.height)
        self.cap.set(cv2.CAP_PROP_FPS, self.config.camera.fps)

        if not self.cap.isOpened():
            raise RuntimeError(f"Failed to open camera {self.config.camera.index}")

    async def run(self):
        """Run the main application loop."""
        print(f"Starting {self.config.display.window_name}")
        print("Hold a sign steady for a moment to have it spoken and transcribed.")
        print("Press 'g' for the gesture guide, 'q' to quit")

        try:
            while True:
                ret, frame = self.cap.read()
                if not ret:
                    logger.error("Failed to read frame from camera")
                    break

                if self.config.display.mirror:
                    frame = cv2.flip(frame, 1)

                hand = self.tracker.process(frame)
                result = self.engine.process_frame(hand)

                if result.event is not None:
                    self.transcript.add(result.event)
                    await self.announcer.announce(result.event)

                if hand is not None and self.config.display.show_landmarks:
                    draw_landmarks(frame, hand)
                draw_status(frame, result.current, self.transcript.text,
                            self.announcer.muted, result.hand_detected)

                cv2.imshow(self.config.display.window_name, frame)

                key = cv2.waitKey(1) & 0xFF
                if key == ord('q'):
                    break
                await self.handle_key(key)
        finally:
            self.engine.stop()
            await self.announcer.speaker.stop()
            self.cap.release()
            self.tracker.close()
            cv2.destroyAllWindows()

    async def handle_key(self, key: int) -> None:
        """Apply a keyboard command."""
        if key == ord('m'):
            await self.announcer.toggle_mute()
        elif key == ord('c'):
            self.transcript.clear()
        elif key == ord('a'):
            added = self.sentence.add_detected(self.transcript)
            print(f"Sentence ({added} added): {self.sentence.text}")
        elif key == ord('s'):
            await self.sentence.speak(self.announcer)
        elif key == ord('x'):
            if len(self.sentence):
                self.sentence.pop()
            print(f"Sentence: {self.sentence.text}")
        elif key == ord('g'):
            print(format_guide())

    def __del__(self):
        """Cleanup resources."""
        if hasattr(self, 'cap') and self.cap.isOpened():
            self.cap.release()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Translate hand signs from a webcam into text and speech.")
    parser.add_argument("--config", help="Path to a YAML config file")
    parser.add_argument("--mute", action="store_true", help="Start with speech muted")
    parser.add_argument("--log-level", help="Override the configured log level")
    return parser.parse_args(argv)


def configure_logging(level: str, fmt: str) -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=fmt)


async def main(argv=None):
    """Entry point for the application."""
    args = parse_args(argv)

    app = None
    try:
        cfg = load_config(args.config)
        configure_logging(args.log_level or cfg.logging.level, cfg.logging.format)
        app = SignTranslatorApp(config=cfg, muted=True if args.mute else None)
        await app.run()
    except KeyboardInterrupt:
        print("\nApplication interrupted by user")
    except (FileNotFoundError, RuntimeError, ValueError) as e:
        logger.error("Error: %s", e)
        raise SystemExit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        print(f"Error: {e}")
        raise SystemExit(1)
    finally:
        if app is not None:
            app.engine.stop()


def run():
    asyncio.run(main())


if __name__ == "__main__":
    run()
