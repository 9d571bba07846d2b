"""
Reference guide of the letters and words the translator teaches.
"""
from dataclasses import dataclass
from typing import List, Literal, Optional, Tuple

from .classifier import LABELS, SHADOWED_RULES


@dataclass(frozen=True)
class GestureTutorial:
    """How to form one gesture."""
    gesture: str
    kind: Literal["letter", "word"]
    description: str
    steps: Tuple[str, ...]


TUTORIALS: Tuple[GestureTutorial, ...] = (
    # Letters
    GestureTutorial("A", "letter", "Fist with thumb alongside", ("Make a fist", "Rest thumb on side of fist")),
    GestureTutorial("B", "letter", "Four fingers up, thumb tucked", ("Extend all four fingers upward", "Tuck thumb across palm")),
    GestureTutorial("C", "letter", "Curved hand shape", ("Curve all fingers", "Form a C shape with hand")),
    GestureTutorial("D", "letter", "Index up, others touch thumb", ("Extend index finger up", "Touch other fingers to thumb tip")),
    GestureTutorial("I", "letter", "Pinky extended only", ("Make a fist", "Extend only pinky finger")),
    GestureTutorial("J", "letter", "Pinky extended, J motion", ("Extend pinky finger", "Draw J shape in air")),
    GestureTutorial("L", "letter", "L shape with thumb and index", ("Extend thumb and index finger", "Form 90-degree L shape")),
    GestureTutorial("O", "letter", "All fingers curved to thumb", ("Curve all fingers", "Touch fingertips to thumb")),
    GestureTutorial("U", "letter", "Index and middle together", ("Extend index and middle fingers", "Keep them together touching")),
    GestureTutorial("V", "letter", "Peace sign", ("Extend index and middle fingers", "Spread them apart in V shape")),
    GestureTutorial("Y", "letter", "Thumb and pinky extended", ("Make loose fist", "Extend thumb and pinky only")),
    GestureTutorial("Z", "letter", "Index drawing Z", ("Extend index finger", "Draw Z shape in air")),
    # Words
    GestureTutorial("Hello", "word", "Open palm wave", ("Open palm with all fingers spread", "Wave gently")),
    GestureTutorial("I Love You", "word", "Thumb, index, pinky extended", ("Extend thumb, index, and pinky", "Keep middle and ring folded")),
    GestureTutorial("Yes", "word", "Fist nodding motion", ("Make a fist", "Nod hand like nodding head")),
    GestureTutorial("No", "word", "Index and middle close", ("Extend index and middle fingers", "Tap them together")),
    GestureTutorial("Please", "word", "Flat hand on chest", ("Flat open palm", "Circle on chest")),
    GestureTutorial("Thank You", "word", "Hand from chin forward", ("Touch fingertips to chin", "Move hand forward")),
    GestureTutorial("Drink", "word", "C-shape to mouth", ("Make C shape", "Bring to mouth like drinking")),
    GestureTutorial("Eat", "word", "Bunched fingers to mouth", ("Bunch fingertips together", "Tap to mouth repeatedly")),
    GestureTutorial("Water", "word", "W at chin", ("Make W with 3 fingers", "Tap chin twice")),
    GestureTutorial("Help", "word", "Thumbs up on palm", ("Make thumbs up", "Place on flat palm, lift up")),
    GestureTutorial("Sorry", "word", "Fist circle on chest", ("Make a fist", "Circle on chest")),
    GestureTutorial("Good", "word", "Hand from chin down", ("Flat hand at chin", "Move down to other palm")),
    GestureTutorial("Bad", "word", "Hand from chin flip", ("Touch chin with fingers", "Flip hand down")),
    GestureTutorial("Walk", "word", "Two fingers walking", ("Extend index and middle", "Walk fingers forward")),
    GestureTutorial("Look", "word", "V fingers from eyes", ("Make V shape", "Point from eyes outward")),
    GestureTutorial("How", "word", "Curved hands rotating", ("Curve both hands", "Rotate them together")),
)

# Short list shown on the translator screen
SUPPORTED_GESTURES: Tuple[Tuple[str, str], ...] = (
    ("A", "Fist with thumb up"),
    ("B", "All fingers up, thumb folded"),
    ("C", "Curved hand shape"),
    ("L", "Index & thumb extended (L shape)"),
    ("V", "Peace sign"),
    ("Hello", "Open palm, all fingers spread"),
    ("I Love You", "Thumb, index & pinky extended"),
    ("Yes", "Closed fist"),
    ("No", "Index & middle together"),
    ("Please", "Open palm near chest"),
)


def letters() -> List[GestureTutorial]:
    return [t for t in TUTORIALS if t.kind == "letter"]


def words() -> List[GestureTutorial]:
    return [t for t in TUTORIALS if t.kind == "word"]


def lookup(label: str) -> Optional[GestureTutorial]:
    for tutorial in TUTORIALS:
        if tutorial.gesture == label:
            return tutorial
    return None


def recognizable() -> List[GestureTutorial]:
    """Tutorials whose gesture the classifier can actually produce."""
    return [t for t in TUTORIALS if t.gesture in LABELS and t.gesture not in SHADOWED_RULES]


def format_guide() -> str:
    """Plain-text guide for printing to a console."""
    known = recognizable()
    lines = ["Letters:"]
    for t in letters():
        lines.append(f"  {t.gesture:<3} {t.description}: {'; '.join(t.steps)}")
    lines.append("Words & Phrases:")
    for t in words():
        marker = "" if t in known else " (not recognized yet)"
        lines.append(f"  {t.gesture:<11} {t.description}{marker}")
    return "\n".join(lines)
