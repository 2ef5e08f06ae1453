import unittest
from inventory.domain.ParsedIntent import Direction, ParsedIntent
from inventory.logic.commands.interpreter import interpret
from inventory.logic.results import Unrecognized


class TestInterpreter(unittest.TestCase):

    def test_i_used(self):
        self.assertEqual(interpret("I used 5 syringes"), ParsedIntent(5, "syringes", Direction.CONSUME))

    def test_used_without_subject(self):
        intent = interpret("Used 2 vials of lidocaine")
        self.assertEqual(intent.quantity_delta, 2)
        self.assertEqual(intent.item_fragment, "vials of lidocaine")
        self.assertEqual(intent.direction, Direction.CONSUME)

    def test_remove(self):
        self.assertEqual(interpret("Remove 3 bandages"), ParsedIntent(3, "bandages", Direction.CONSUME))

    def test_add_strips_to_inventory_suffix(self):
        self.assertEqual(interpret("Add 10 gloves to inventory"), ParsedIntent(10, "gloves", Direction.ADD))

    def test_add_without_suffix(self):
        self.assertEqual(interpret("add 7 gauze"), ParsedIntent(7, "gauze", Direction.ADD))

    def test_add_trailing_period(self):
        self.assertEqual(interpret("Add 10 gloves to inventory."), ParsedIntent(10, "gloves", Direction.ADD))

    def test_trailing_used(self):
        self.assertEqual(interpret("4 gauze packs used"), ParsedIntent(4, "gauze packs", Direction.CONSUME))

    def test_case_insensitive(self):
        self.assertEqual(interpret("I USED 5 SYRINGES"), ParsedIntent(5, "syringes", Direction.CONSUME))

    def test_fragment_is_trimmed(self):
        self.assertEqual(interpret("remove 3 bandages   ").item_fragment, "bandages")

    def test_first_pattern_wins(self):
        # Both "used <N> <rest>" and "<N> <rest> used" could apply.
        intent = interpret("used 2 gloves 3 syringes used")
        self.assertEqual(intent.quantity_delta, 2)
        self.assertEqual(intent.item_fragment, "gloves 3 syringes used")

    def test_multi_digit_quantity(self):
        self.assertEqual(interpret("remove 120 gloves").quantity_delta, 120)

    def test_zero_quantity_parses(self):
        self.assertEqual(interpret("used 0 gloves"), ParsedIntent(0, "gloves", Direction.CONSUME))

    def test_oversized_numeral_is_unrecognized(self):
        result = interpret("used " + "9" * 5000 + " gloves")
        self.assertIsInstance(result, Unrecognized)
        self.assertIn("Could not understand command", result.status)

    def test_spelled_out_numbers_unsupported(self):
        self.assertIsInstance(interpret("I used five syringes"), Unrecognized)

    def test_add_anywhere_means_add(self):
        intent = interpret("used 3 adductor pads")
        self.assertEqual(intent.item_fragment, "adductor pads")
        self.assertEqual(intent.direction, Direction.ADD)

    def test_strict_direction_uses_pattern(self):
        intent = interpret("used 3 adductor pads", strict_direction=True)
        self.assertEqual(intent.direction, Direction.CONSUME)
        self.assertEqual(interpret("add 3 gloves", strict_direction=True).direction, Direction.ADD)

    def test_unrecognized(self):
        result = interpret("xyz please help")
        self.assertIsInstance(result, Unrecognized)
        self.assertEqual(result.kind, "unrecognized")
        self.assertIn("Could not understand command", result.status)
        self.assertIn('"I used 5 syringes"', result.status)

    def test_empty_and_non_string_input(self):
        for value in ("", "   ", None, 42):
            self.assertIsInstance(interpret(value), Unrecognized)


if __name__ == '__main__':
    unittest.main()
