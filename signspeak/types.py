"""
Type definitions for the sign gesture recognition engine.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass, asdict
from typing import Any, Iterable, Optional, Protocol, Tuple, runtime_checkable

import numpy as np


LANDMARK_COUNT = 21


class SignSpeakError(Exception):
    """Base class for errors raised by this package."""


class MalformedFrameError(SignSpeakError, ValueError):
    """Raised when landmark data cannot form a 21-point hand frame."""


@dataclass(frozen=True)
class Landmark:
    """One tracked hand point in normalized frame coordinates."""
    x: float
    y: float
    z: float = 0.0


def _coerce_point(point: Any) -> Tuple[float, ...]:
    if hasattr(point, "x") and hasattr(point, "y"):
        return (point.x, point.y, getattr(point, "z", 0.0) or 0.0)
    if isinstance(point, Mapping):
        try:
            return (point["x"], point["y"], point.get("z", 0.0) or 0.0)
        except KeyError as e:
            raise MalformedFrameError(f"landmark is missing coordinate {e}") from e
    return tuple(point)


def _as_landmark(point: Any) -> Landmark:
    """Coerce one point to a Landmark with finite coordinates."""
    if isinstance(point, Landmark):
        coords = (point.x, point.y, point.z)
    else:
        try:
            coords = _coerce_point(point)
        except TypeError as e:
            raise MalformedFrameError(f"unreadable landmark {point!r}") from e
        if len(coords) not in (2, 3):
            raise MalformedFrameError(f"landmark needs 2 or 3 coordinates, got {len(coords)}")
    try:
        values = [float(c) for c in coords]
    except (TypeError, ValueError) as e:
        raise MalformedFrameError(f"unreadable landmark {point!r}") from e
    if not all(math.isfinite(v) for v in values):
        raise MalformedFrameError("landmark coordinates must be finite")
    return Landmark(*values)


@dataclass(frozen=True)
class HandFrame:
    """
    The 21 landmarks of one hand for a single camera frame.

    Index 0 is the wrist; thumb 1-4, index 5-8, middle 9-12, ring 13-16 and
    pinky 17-20, with 6/10/14/18 as the middle (PIP) joints.
    """
    landmarks: Tuple[Landmark, ...]

    def __post_init__(self):
        try:
            points = tuple(self.landmarks)
        except TypeError as e:
            raise MalformedFrameError(f"landmarks must be a sequence: {e}") from e
        if len(points) != LANDMARK_COUNT:
            raise MalformedFrameError(
                f"expected {LANDMARK_COUNT} landmarks, got {len(points)}"
            )
        # frozen: store the validated tuple in place of whatever was passed
        object.__setattr__(self, "landmarks", tuple(_as_landmark(p) for p in points))

    @classmethod
    def from_points(cls, points: Iterable[Any]) -> "HandFrame":
        """
        Build a frame from raw tracker output.

        Args:
            points: (x, y) or (x, y, z) tuples, dicts with x/y/z keys,
                objects exposing .x/.y/.z, or a (21, 2|3) numpy array

        Returns:
            A validated HandFrame

        Raises:
            MalformedFrameError: wrong count, missing or non-finite coordinates
        """
        if points is None:
            raise MalformedFrameError("no landmarks supplied")

        try:
            if isinstance(points, np.ndarray):
                arr = points.astype(float)
            else:
                arr = np.asarray([_coerce_point(p) for p in points], dtype=float)
        except MalformedFrameError:
            raise
        except (TypeError, ValueError) as e:
            raise MalformedFrameError(f"unreadable landmark data: {e}") from e

        if arr.ndim != 2 or arr.shape[0] != LANDMARK_COUNT or arr.shape[1] not in (2, 3):
            raise MalformedFrameError(
                f"expected {LANDMARK_COUNT} points of 2 or 3 coordinates, got shape {arr.shape}"
            )
        if not np.all(np.isfinite(arr)):
            raise MalformedFrameError("landmark coordinates must be finite")

        has_z = arr.shape[1] == 3
        return cls(tuple(
            Landmark(float(row[0]), float(row[1]), float(row[2]) if has_z else 0.0)
            for row in arr
        ))

    def __len__(self) -> int:
        return len(self.landmarks)

    def __getitem__(self, index: int) -> Landmark:
        return self.landmarks[index]


@dataclass(frozen=True)
class FingerExtensionState:
    """Per-finger extension flags derived from one HandFrame."""
    thumb: bool
    index: bool
    middle: bool
    ring: bool
    pinky: bool
    frame: HandFrame

    @property
    def extended_count(self) -> int:
        return sum((self.thumb, self.index, self.middle, self.ring, self.pinky))

    def as_dict(self) -> dict:
        return {
            "thumb": self.thumb,
            "index": self.index,
            "middle": self.middle,
            "ring": self.ring,
            "pinky": self.pinky,
            "extended_count": self.extended_count,
        }


@dataclass(frozen=True)
class GestureMatch:
    """Raw per-frame classifier output."""
    label: Optional[str]
    confidence: float

    @classmethod
    def none(cls) -> "GestureMatch":
        return cls(label=None, confidence=0.0)

    @property
    def matched(self) -> bool:
        return self.label is not None


@dataclass(frozen=True)
class StabilizerState:
    """Run-length summary kept between frames by the stabilizer."""
    last_label: Optional[str] = None
    run_length: int = 0
    confidence: float = 0.0  # confidence of the latest match in this run


@dataclass(frozen=True)
class StabilizedGestureEvent:
    """A gesture held for enough consecutive frames to be trusted."""
    label: str
    confidence: float


@dataclass(frozen=True)
class CurrentGesture:
    """Live view of the confirmed gesture, or None while unconfirmed."""
    gesture: Optional[str]
    confidence: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class FrameResult:
    """Everything one engine step produced for a single frame."""
    features: Optional[FingerExtensionState]
    match: GestureMatch
    event: Optional[StabilizedGestureEvent]
    current: CurrentGesture

    @property
    def hand_detected(self) -> bool:
        return self.features is not None


@runtime_checkable
class SpeakerProto(Protocol):
    """Abstract protocol for speech outputs that voice confirmed gestures."""

    async def speak(self, text: str) -> None:
        """Speak the given text, interrupting nothing itself."""
        ...

    async def stop(self) -> None:
        """Cancel any utterance in progress."""
        ...
