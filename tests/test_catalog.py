"""
Test cases for the gesture reference guide.
"""
import unittest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from signspeak import catalog
from signspeak.classifier import LABELS


class TestCatalog(unittest.TestCase):
    """Test tutorial lookup and grouping."""

    def test_counts(self):
        self.assertEqual(len(catalog.TUTORIALS), 28)
        self.assertEqual(len(catalog.letters()), 12)
        self.assertEqual(len(catalog.words()), 16)

    def test_every_letter_is_classifiable(self):
        for tutorial in catalog.letters():
            self.assertIn(tutorial.gesture, LABELS)

    def test_lookup(self):
        tutorial = catalog.lookup("V")
        self.assertEqual(tutorial.description, "Peace sign")
        self.assertEqual(tutorial.kind, "letter")
        self.assertIsNone(catalog.lookup("Q"))

    def test_recognizable_excludes_unreachable(self):
        names = {t.gesture for t in catalog.recognizable()}
        self.assertIn("Hello", names)
        self.assertIn("Walk", names)
        for missing in ("Thank You", "Water", "Help", "Drink", "Eat", "No"):
            self.assertNotIn(missing, names)

    def test_supported_gestures_are_tutorials(self):
        for label, _ in catalog.SUPPORTED_GESTURES:
            self.assertIsNotNone(catalog.lookup(label), label)

    def test_format_guide(self):
        guide = catalog.format_guide()
        self.assertIn("Letters:", guide)
        self.assertIn("Words & Phrases:", guide)
        self.assertIn("Water", guide)
        water_line = next(line for line in guide.splitlines() if "Water" in line)
        self.assertTrue(water_line.endswith("(not recognized yet)"))
        hello_line = next(line for line in guide.splitlines() if line.strip().startswith("Hello"))
        self.assertNotIn("not recognized", hello_line)


if __name__ == '__main__':
    unittest.main()
