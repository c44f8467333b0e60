"""
Unit tests for the pastel color generator (bounds, spread rejection, retry cap, hex format).
Run from project root: python -m pytest tests/ -v
Or: python -m unittest discover -s tests -p "test_*.py" -v
"""
import re
import sys
import unittest
from pathlib import Path

# Project root on path so "from pastel. ..." works
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tests.recording import RecordingSink  # noqa: E402

HEX_RE = re.compile(r"^#[0-9a-f]{6}$")


class TestChannelValue(unittest.TestCase):
    """get_channel_value stays inside [min, max] and handles degenerate bounds."""

    def test_values_within_bounds(self):
        from pastel.generator import ColorGenerator
        from pastel.random_utils import seeded_random

        cases = [
            (0, 255),
            (90, 230),
            (10, 11),
            (200, 255),
            (0, 40),
        ]
        for low, high in cases:
            gen = ColorGenerator(high, high, high, low, low, low, random_source=seeded_random(low + high))
            for channel in ("r", "g", "b"):
                for _ in range(200):
                    value = gen.get_channel_value(channel)
                    self.assertIsInstance(value, int)
                    self.assertGreaterEqual(value, low)
                    self.assertLessEqual(value, high)

    def test_draw_reaches_both_ends(self):
        """A draw of 0 gives min; a draw just under 1 rounds up to max."""
        from pastel.generator import ColorGenerator

        gen = ColorGenerator(random_source=lambda: 0.0)
        self.assertEqual(gen.get_channel_value("r"), 90)
        gen = ColorGenerator(random_source=lambda: 0.9999)
        self.assertEqual(gen.get_channel_value("g"), 230)

    def test_equal_bounds_give_min_or_min_plus_one(self):
        """Interval floor of 1: min == max yields min or min + 1 depending on the draw."""
        from pastel.generator import ColorGenerator

        gen = ColorGenerator(100, 100, 100, 100, 100, 100, random_source=lambda: 0.49)
        self.assertEqual(gen.get_channel_value("r"), 100)
        gen = ColorGenerator(100, 100, 100, 100, 100, 100, random_source=lambda: 0.5)
        self.assertEqual(gen.get_channel_value("r"), 101)

        gen = ColorGenerator(100, 100, 100, 100, 100, 100)
        seen = {gen.get_channel_value("b") for _ in range(300)}
        self.assertTrue(seen <= {100, 101})

    def test_inverted_bounds_tolerated(self):
        """min > max does not raise; the interval is floored to 1 above min."""
        from pastel.generator import ColorGenerator

        gen = ColorGenerator(r_max=50, r_min=100)
        for _ in range(100):
            self.assertIn(gen.get_channel_value("r"), (100, 101))

    def test_unknown_channel(self):
        from pastel.generator import ColorGenerator

        with self.assertRaises(KeyError):
            ColorGenerator().get_channel_value("a")


class TestConstruction(unittest.TestCase):
    """Defaults apply per bound; explicit zero is kept."""

    def test_defaults(self):
        from pastel.generator import ChannelBounds, ColorGenerator

        gen = ColorGenerator()
        self.assertEqual(gen.max_limit, ChannelBounds(230, 230, 230))
        self.assertEqual(gen.min_limit, ChannelBounds(90, 90, 90))

    def test_partial_bounds(self):
        from pastel.generator import ColorGenerator

        gen = ColorGenerator(g_max=200, b_min=120)
        self.assertEqual(gen.max_limit.to_dict(), {"r": 230, "g": 200, "b": 230})
        self.assertEqual(gen.min_limit.to_dict(), {"r": 90, "g": 90, "b": 120})

    def test_zero_is_a_bound_not_a_default(self):
        from pastel.generator import ColorGenerator

        gen = ColorGenerator(r_min=0)
        self.assertEqual(gen.min_limit["r"], 0)
        self.assertEqual(gen.min_limit["g"], 90)

    def test_float_bounds_truncated_to_int(self):
        from pastel.generator import ColorGenerator

        gen = ColorGenerator(r_max=200.0, r_min=90.7, random_source=lambda: 0.0)
        self.assertEqual(gen.max_limit["r"], 200)
        self.assertEqual(gen.min_limit["r"], 90)
        value = gen.get_channel_value("r")
        self.assertIsInstance(value, int)
        self.assertEqual(gen.generate_color(), "#5a5a5a")

    def test_bounds_are_immutable(self):
        from dataclasses import FrozenInstanceError

        from pastel.generator import ColorGenerator

        gen = ColorGenerator()
        with self.assertRaises(FrozenInstanceError):
            gen.max_limit.r = 10
        with self.assertRaises(AttributeError):
            gen.max_limit = None


class TestGenerateColor(unittest.TestCase):
    """generate_color output format, spread limit, retries, determinism."""

    def test_format_and_spread_with_defaults(self):
        from pastel.generator import MIN_COLOR_DIFF, ColorGenerator, channel_spread, hex_to_rgb

        gen = ColorGenerator()
        for _ in range(500):
            color = gen.generate_color()
            self.assertRegex(color, HEX_RE)
            rgb = hex_to_rgb(color)
            self.assertLessEqual(channel_spread(rgb), MIN_COLOR_DIFF)
            self.assertTrue(all(90 <= c <= 230 for c in rgb))

    def test_zero_draws_give_min_color(self):
        from pastel.generator import ColorGenerator

        gen = ColorGenerator(random_source=lambda: 0.0)
        self.assertEqual(gen.generate_color(), "#5a5a5a")
        self.assertEqual(gen.generate_rgb(), (90, 90, 90))

    def test_rejected_draw_is_retried_from_scratch(self):
        """Spread 140 is rejected; the next full triple is accepted."""
        from pastel.generator import ColorGenerator
        from pastel.random_utils import sequence_random

        draws = [0.0, 0.999, 0.0, 0.5, 0.5, 0.5]
        gen = ColorGenerator(random_source=sequence_random(draws))
        self.assertEqual(gen.generate_color(), "#a0a0a0")

    def test_spread_of_exactly_thirty_accepted(self):
        from pastel.generator import ColorGenerator
        from pastel.random_utils import sequence_random

        # interval 140: 0.0 -> 90, 30/140 -> 120
        gen = ColorGenerator(random_source=sequence_random([0.0, 30 / 140, 0.0]))
        self.assertEqual(gen.generate_rgb(), (90, 120, 90))

    def test_retry_cap_keeps_last_draw(self):
        from pastel.generator import ColorGenerator
        from pastel.random_utils import sequence_random

        gen = ColorGenerator(random_source=sequence_random([0.0, 0.999, 0.0] * 3), max_attempts=3)
        with self.assertLogs("pastel.generator.generator", level="WARNING"):
            rgb = gen.generate_rgb()
        self.assertEqual(rgb, (90, 230, 90))

    def test_seeded_sources_are_deterministic(self):
        from pastel.generator import ColorGenerator
        from pastel.random_utils import seeded_random

        a = ColorGenerator(random_source=seeded_random(42))
        b = ColorGenerator(random_source=seeded_random(42))
        self.assertEqual(
            [a.generate_color() for _ in range(20)],
            [b.generate_color() for _ in range(20)],
        )

    def test_all_zero_bounds(self):
        """max = min = 0: each channel is 0 or 1, always accepted."""
        from pastel.generator import ColorGenerator, hex_to_rgb

        gen = ColorGenerator(0, 0, 0, 0, 0, 0)
        for _ in range(100):
            color = gen.generate_color()
            self.assertRegex(color, HEX_RE)
            self.assertTrue(all(c in (0, 1) for c in hex_to_rgb(color)))
        gen = ColorGenerator(0, 0, 0, 0, 0, 0, random_source=lambda: 0.0)
        self.assertEqual(gen.generate_color(), "#000000")


class TestUpdateBackground(unittest.TestCase):
    def test_sink_gets_background_then_label(self):
        from pastel.generator import ColorGenerator

        sink = RecordingSink()
        gen = ColorGenerator(random_source=lambda: 0.0)
        color = gen.update_background(sink)
        self.assertEqual(color, "#5a5a5a")
        self.assertEqual(sink.calls, [("background", "#5a5a5a"), ("label", "#5a5a5a")])

    def test_recording_sink_implements_interface(self):
        from pastel.presentation import PresentationSink

        self.assertIsInstance(RecordingSink(), PresentationSink)


class TestHexHelpers(unittest.TestCase):
    def test_to_hex_pads(self):
        from pastel.generator import to_hex

        self.assertEqual(to_hex((0, 1, 255)), "#0001ff")

    def test_hex_to_rgb(self):
        from pastel.generator import hex_to_rgb

        self.assertEqual(hex_to_rgb("#5A5a5a"), (90, 90, 90))
        for bad in ("5a5a5a", "#5a5a5", "#gggggg", "", None):
            with self.assertRaises(ValueError):
                hex_to_rgb(bad)

    def test_channel_spread(self):
        from pastel.generator import channel_spread

        self.assertEqual(channel_spread((90, 230, 100)), 140)
        self.assertEqual(channel_spread((7, 7, 7)), 0)


class TestRandomSources(unittest.TestCase):
    def test_secure_random_range(self):
        from pastel.random_utils import secure_random

        for _ in range(100):
            v = secure_random()
            self.assertGreaterEqual(v, 0.0)
            self.assertLess(v, 1.0)

    def test_sequence_random_exhausted(self):
        from pastel.random_utils import sequence_random

        draw = sequence_random([0.25])
        self.assertEqual(draw(), 0.25)
        with self.assertRaises(RuntimeError):
            draw()

    def test_seeded_none_is_secure(self):
        from pastel.random_utils import secure_random, seeded_random

        self.assertIs(seeded_random(None), secure_random)


if __name__ == "__main__":
    unittest.main()
