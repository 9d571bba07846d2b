"""
Rule cascade that maps finger extension features to letters and words.

Rules are evaluated top to bottom and the first one whose predicate holds
wins. Several rules share extension patterns, so their order is part of the
behaviour: moving a rule changes which gesture a pose produces.
"""
from dataclasses import dataclass
from typing import Callable, Literal, Optional, Sequence, Tuple

from .features import (
    WRIST, THUMB_TIP, INDEX_PIP, INDEX_TIP, MIDDLE_PIP, MIDDLE_TIP, PINKY_TIP,
    horizontal_gap, manhattan,
)
from .types import FingerExtensionState, GestureMatch


Predicate = Callable[[FingerExtensionState], bool]


@dataclass(frozen=True)
class GestureRule:
    """One entry of the cascade: a predicate and the result it yields."""
    label: str
    confidence: float
    kind: Literal["letter", "word"]
    predicate: Predicate

    def matches(self, features: FingerExtensionState) -> bool:
        return self.predicate(features)


def _flags(f: FingerExtensionState, **expected: bool) -> bool:
    """True when every named finger has the expected extension flag."""
    return all(getattr(f, name) == value for name, value in expected.items())


def _pt(f: FingerExtensionState, idx: int):
    return f.frame[idx]


# Letters

def _letter_a(f):
    # Fist with thumb alongside
    return _flags(f, thumb=True, index=False, middle=False, ring=False, pinky=False)


def _letter_b(f):
    return _flags(f, thumb=False, index=True, middle=True, ring=True, pinky=True)


def _letter_c(f):
    if f.extended_count < 3:
        return False
    if not _pt(f, INDEX_TIP).x < _pt(f, PINKY_TIP).x + 0.15:
        return False
    distance = horizontal_gap(_pt(f, THUMB_TIP), _pt(f, INDEX_TIP))
    return 0.05 < distance < 0.15


def _letter_d(f):
    if not _flags(f, index=True, middle=False, ring=False, pinky=False):
        return False
    return manhattan(_pt(f, THUMB_TIP), _pt(f, MIDDLE_TIP)) < 0.1


def _letter_i(f):
    return _flags(f, thumb=False, index=False, middle=False, ring=False, pinky=True)


def _letter_j(f):
    # J is drawn in the air; a pinky swung past the wrist stands in for it
    if not _flags(f, index=False, middle=False, ring=False, pinky=True):
        return False
    return _pt(f, PINKY_TIP).x < _pt(f, WRIST).x - 0.05


def _letter_l(f):
    return _flags(f, thumb=True, index=True, middle=False, ring=False, pinky=False)


def _letter_o(f):
    if not _flags(f, index=False, middle=False, ring=False, pinky=False):
        return False
    return manhattan(_pt(f, THUMB_TIP), _pt(f, INDEX_TIP)) < 0.08 and not f.thumb


def _letter_u(f):
    if not _flags(f, thumb=False, index=True, middle=True, ring=False, pinky=False):
        return False
    return horizontal_gap(_pt(f, INDEX_TIP), _pt(f, MIDDLE_TIP)) < 0.04


def _letter_v(f):
    if not _flags(f, index=True, middle=True, ring=False, pinky=False):
        return False
    return horizontal_gap(_pt(f, INDEX_TIP), _pt(f, MIDDLE_TIP)) > 0.04


def _letter_y(f):
    return _flags(f, thumb=True, index=False, middle=False, ring=False, pinky=True)


def _letter_z(f):
    # Z is also a motion; an index tip leaning left of its joint approximates it
    if not _flags(f, thumb=False, index=True, middle=False, ring=False, pinky=False):
        return False
    return _pt(f, INDEX_TIP).x < _pt(f, INDEX_PIP).x - 0.03


# Words

def _word_i_love_you(f):
    return _flags(f, thumb=True, index=True, middle=False, ring=False, pinky=True)


def _word_hello(f):
    return f.extended_count == 5


def _word_yes(f):
    return f.extended_count == 0


def _word_no(f):
    if not _flags(f, thumb=False, index=True, middle=True, ring=False, pinky=False):
        return False
    return horizontal_gap(_pt(f, INDEX_TIP), _pt(f, MIDDLE_TIP)) < 0.03


def _word_please(f):
    # Open hand held low, near the chest
    return f.extended_count >= 4 and _pt(f, WRIST).y > 0.5


def _word_drink(f):
    if not _flags(f, thumb=True, index=False, middle=False, ring=False, pinky=False):
        return False
    return _pt(f, THUMB_TIP).y < 0.4


def _word_rain(f):
    if f.extended_count < 4:
        return False
    frame = f.frame
    return frame[INDEX_TIP].y > frame[INDEX_PIP].y and frame[MIDDLE_TIP].y > frame[MIDDLE_PIP].y


def _word_eat(f):
    if not _flags(f, index=False, middle=False, ring=False, pinky=False):
        return False
    return _pt(f, INDEX_TIP).y < 0.35 and _pt(f, WRIST).y < 0.5


def _word_thirsty(f):
    if not _flags(f, index=True, middle=False, ring=False, pinky=False):
        return False
    tip_y = _pt(f, INDEX_TIP).y
    return tip_y > _pt(f, INDEX_PIP).y and tip_y < 0.4


def _word_say(f):
    if not _flags(f, index=True, middle=False, ring=False, pinky=False):
        return False
    tip = _pt(f, INDEX_TIP)
    return tip.y < 0.3 and 0.4 < tip.x < 0.6


def _word_maybe(f):
    if f.extended_count < 4 or not 0.4 < _pt(f, WRIST).y < 0.6:
        return False
    return abs(_pt(f, INDEX_TIP).y - _pt(f, PINKY_TIP).y) < 0.05


def _word_dont_know(f):
    return f.extended_count >= 3 and _pt(f, INDEX_TIP).y < 0.25


def _word_forget(f):
    wrist = _pt(f, WRIST)
    return (f.extended_count >= 4 and wrist.y < 0.3
            and _pt(f, INDEX_TIP).x > wrist.x + 0.1)


def _word_walk(f):
    if not _flags(f, index=True, middle=True, ring=False, pinky=False):
        return False
    return _pt(f, INDEX_TIP).y > _pt(f, WRIST).y


def _word_shirt(f):
    if not _flags(f, thumb=True, index=True, middle=False, ring=False, pinky=False):
        return False
    pinch = manhattan(_pt(f, THUMB_TIP), _pt(f, INDEX_TIP))
    return pinch < 0.08 and _pt(f, WRIST).y > 0.4


def _word_book(f):
    if f.extended_count < 4 or abs(_pt(f, INDEX_TIP).y - _pt(f, PINKY_TIP).y) >= 0.03:
        return False
    return 0.45 < _pt(f, WRIST).y < 0.55


def _word_look(f):
    if not _flags(f, index=True, middle=True, ring=False, pinky=False):
        return False
    return _pt(f, INDEX_TIP).y < 0.3 and _pt(f, MIDDLE_TIP).y < 0.3


def _word_how(f):
    if not 3 <= f.extended_count <= 4:
        return False
    curved = _pt(f, INDEX_TIP).y > _pt(f, INDEX_PIP).y - 0.05
    return curved and _pt(f, WRIST).y > 0.4


CASCADE: Tuple[GestureRule, ...] = (
    GestureRule("A", 0.85, "letter", _letter_a),
    GestureRule("B", 0.85, "letter", _letter_b),
    GestureRule("C", 0.75, "letter", _letter_c),
    GestureRule("D", 0.8, "letter", _letter_d),
    GestureRule("I", 0.85, "letter", _letter_i),
    GestureRule("J", 0.75, "letter", _letter_j),
    GestureRule("L", 0.85, "letter", _letter_l),
    GestureRule("O", 0.8, "letter", _letter_o),
    GestureRule("U", 0.8, "letter", _letter_u),
    GestureRule("V", 0.85, "letter", _letter_v),
    GestureRule("Y", 0.85, "letter", _letter_y),
    GestureRule("Z", 0.75, "letter", _letter_z),
    GestureRule("I Love You", 0.9, "word", _word_i_love_you),
    GestureRule("Hello", 0.8, "word", _word_hello),
    GestureRule("Yes", 0.6, "word", _word_yes),
    GestureRule("No", 0.7, "word", _word_no),
    GestureRule("Please", 0.6, "word", _word_please),
    GestureRule("Drink", 0.7, "word", _word_drink),
    GestureRule("Rain", 0.7, "word", _word_rain),
    GestureRule("Eat", 0.7, "word", _word_eat),
    GestureRule("Thirsty", 0.7, "word", _word_thirsty),
    GestureRule("Say", 0.7, "word", _word_say),
    GestureRule("Maybe", 0.65, "word", _word_maybe),
    GestureRule("Don't Know", 0.65, "word", _word_dont_know),
    GestureRule("Forget", 0.65, "word", _word_forget),
    GestureRule("Walk", 0.7, "word", _word_walk),
    GestureRule("Shirt", 0.7, "word", _word_shirt),
    GestureRule("Book", 0.65, "word", _word_book),
    GestureRule("Look", 0.7, "word", _word_look),
    GestureRule("How", 0.65, "word", _word_how),
)

LABELS: Tuple[str, ...] = tuple(rule.label for rule in CASCADE)

# Rules that can never fire in this order. Each is fully covered by an
# earlier rule or contradicts its own extension flags:
#   Drink   -> A (thumb-only pose)
#   Rain    -> needs >= 4 extended fingers yet index and middle both folded
#   Eat     -> Yes (fist) or A (fist + thumb)
#   Thirsty -> index extended and folded at once
#   No      -> U (gap < 0.03 is inside U's gap < 0.04)
#   Shirt   -> L (same extension pattern)
#   Book    -> Please (wrist > 0.5) or Maybe (wrist <= 0.5)
SHADOWED_RULES = frozenset({"Drink", "Rain", "Eat", "Thirsty", "No", "Shirt", "Book"})


def rule_for(label: str) -> Optional[GestureRule]:
    for rule in CASCADE:
        if rule.label == label:
            return rule
    return None


def classify(features: Optional[FingerExtensionState],
             rules: Sequence[GestureRule] = CASCADE) -> GestureMatch:
    """
    Run the cascade over one frame's features.

    Args:
        features: Extension state for the frame, or None when no hand was found
        rules: Ordered rules; the first whose predicate holds wins

    Returns:
        GestureMatch with the winning label and its fixed confidence, or
        GestureMatch.none() when no hand is present or no rule matches
    """
    if features is None:
        return GestureMatch.none()

    for rule in rules:
        if rule.matches(features):
            return GestureMatch(label=rule.label, confidence=rule.confidence)

    return GestureMatch.none()
