"""
SignSpeak - Sign Gesture Recognition

Turns MediaPipe hand landmarks into debounced sign language letters and
words for speech output and transcript assembly.
"""

__version__ = "0.1.0"
__author__ = "SignSpeak Team"

from .types import (
    HandFrame,
    Landmark,
    FingerExtensionState,
    GestureMatch,
    StabilizerState,
    StabilizedGestureEvent,
    CurrentGesture,
    FrameResult,
    SpeakerProto,
    MalformedFrameError,
)
from .config import load_config, Cfg
from .features import extract_features
from .classifier import CASCADE, GestureRule, classify
from .stabilizer import GestureStabilizer, stabilize
from .gestures import GestureEngine
from .speech import GestureAnnouncer
from .speaker_mock import MockSpeaker
from .transcript import Transcript, SentenceBuilder

__all__ = [
    "HandFrame",
    "Landmark",
    "FingerExtensionState",
    "GestureMatch",
    "StabilizerState",
    "StabilizedGestureEvent",
    "CurrentGesture",
    "FrameResult",
    "SpeakerProto",
    "MalformedFrameError",
    "load_config",
    "Cfg",
    "extract_features",
    "CASCADE",
    "GestureRule",
    "classify",
    "GestureStabilizer",
    "stabilize",
    "GestureEngine",
    "GestureAnnouncer",
    "MockSpeaker",
    "Transcript",
    "SentenceBuilder",
]
