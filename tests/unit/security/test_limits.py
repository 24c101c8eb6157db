"""
Test cases for security limits and validation.

Tests focus on preventing resource exhaustion attacks and validating input constraints.
"""

import unittest

import strictjson
from strictjson.core.engine import Lexer, parse
from strictjson.security.limits import LimitValidator
from strictjson.security.exceptions import SecurityError
from strictjson.utils.config import ParseConfig, ParseLimits


class TestLimitValidator(unittest.TestCase):
    """Test LimitValidator functionality for security constraints."""

    def setUp(self):
        """Set up test validator with custom limits."""
        self.limits = ParseLimits(
            max_input_size=1000,
            max_string_length=50,
            max_number_length=20,
            max_nesting_depth=5,
            max_array_items=10,
            max_object_keys=10
        )
        self.validator = LimitValidator(self.limits)

    def test_input_size_validation_pass(self):
        """Test input size validation within limits."""
        self.validator.validate_input_size("x" * 500)

    def test_input_size_validation_fail(self):
        """Test input size validation exceeding limits."""
        with self.assertRaises(SecurityError) as cm:
            self.validator.validate_input_size("x" * 1001)

        self.assertIn("Input size 1001 exceeds limit 1000", str(cm.exception))

    def test_string_length_validation_fail(self):
        """Test string length validation exceeding limits."""
        with self.assertRaises(SecurityError) as cm:
            self.validator.validate_string_length("x" * 51, "line 5")

        error = cm.exception
        self.assertIn("String length 51 exceeds limit 50", str(error))
        self.assertIn("at line 5", str(error))

    def test_string_length_validation_no_position(self):
        """Test string length validation without position info."""
        with self.assertRaises(SecurityError) as cm:
            self.validator.validate_string_length("x" * 51)

        self.assertNotIn(" at ", str(cm.exception))

    def test_number_length_validation(self):
        """Test number length validation."""
        self.validator.validate_number_length("123.456789")
        with self.assertRaises(SecurityError) as cm:
            self.validator.validate_number_length("1" * 21, "column 15")

        self.assertIn("Number length 21 exceeds limit 20", str(cm.exception))
        self.assertIn("at column 15", str(cm.exception))

    def test_nesting_depth_validation(self):
        """Test nesting depth tracking."""
        for _ in range(5):
            self.validator.enter_structure()
        self.assertEqual(self.validator.nesting_depth, 5)

        with self.assertRaises(SecurityError) as cm:
            self.validator.enter_structure("line 1, column 6")

        self.assertIn("Nesting depth 6 exceeds limit 5", str(cm.exception))
        self.assertIn("too deeply nested", str(cm.exception))

    def test_exit_structure(self):
        """Test that exiting never drops below zero."""
        self.validator.enter_structure()
        self.validator.exit_structure()
        self.validator.exit_structure()
        self.assertEqual(self.validator.nesting_depth, 0)

    def test_item_counts(self):
        """Test object key and array item counts."""
        self.validator.validate_object_keys(10)
        self.validator.validate_array_items(10)
        with self.assertRaises(SecurityError):
            self.validator.validate_object_keys(11)
        with self.assertRaises(SecurityError):
            self.validator.validate_array_items(11)

    def test_reset(self):
        self.validator.enter_structure()
        self.validator.enter_structure()
        self.validator.reset()
        self.assertEqual(self.validator.nesting_depth, 0)

    def test_violation_is_logged(self):
        with self.assertLogs("strictjson.security.limits", level="WARNING") as logs:
            with self.assertRaises(SecurityError):
                self.validator.validate_array_items(11)
        self.assertIn("Array item count 11 exceeds limit 10", logs.output[0])


class TestParserLimits(unittest.TestCase):
    """Test limits enforced while parsing."""

    def _config(self, **limits):
        return ParseConfig(limits=ParseLimits(**limits))

    def test_nesting_depth_limit(self):
        config = self._config(max_nesting_depth=3)
        self.assertEqual(strictjson.loads("[[[1]]]", config=config), [[[1.0]]])

        with self.assertRaises(SecurityError) as cm:
            strictjson.loads('[[{"a": [1]}]]', config=config)
        self.assertIn("Nesting depth 4 exceeds limit 3", str(cm.exception))
        self.assertIn("line 1, column 9", str(cm.exception))

    def test_sibling_containers_do_not_accumulate_depth(self):
        config = self._config(max_nesting_depth=2)
        result = strictjson.loads("[[1], [2], [3], {}]", config=config)
        self.assertEqual(result, [[1.0], [2.0], [3.0], {}])

    def test_parser_is_reusable_after_depth_failure(self):
        tokens = Lexer("[[[[1]]]]").get_all_tokens()
        parser = strictjson.Parser(tokens, self._config(max_nesting_depth=3))
        with self.assertRaises(SecurityError):
            parser.parse()
        parser.config.limits.structure_limits.max_nesting_depth = 4
        self.assertEqual(parser.parse(), [[[[1.0]]]])

    def test_default_depth_limit_stops_adversarial_nesting(self):
        text = "[" * 5000 + "]" * 5000
        with self.assertRaises(SecurityError) as cm:
            strictjson.loads(text)
        self.assertIn("exceeds limit 100", str(cm.exception))

    def test_recursion_limit_becomes_security_error(self):
        config = self._config(max_nesting_depth=1000000)
        tokens = Lexer("[" * 100000 + "]" * 100000).get_all_tokens()
        with self.assertRaises(SecurityError) as cm:
            parse(tokens, config)
        self.assertIn("too deeply nested", str(cm.exception))

    def test_string_and_number_length_limits(self):
        config = self._config(max_string_length=5, max_number_length=4)
        self.assertEqual(strictjson.loads('["abcde", 1234]', config=config), ["abcde", 1234.0])

        with self.assertRaises(SecurityError):
            strictjson.loads('["abcdef"]', config=config)
        with self.assertRaises(SecurityError):
            strictjson.loads('{"abcdef": 1}', config=config)
        with self.assertRaises(SecurityError):
            strictjson.loads("[12345]", config=config)

    def test_item_count_limits(self):
        config = self._config(max_array_items=3, max_object_keys=2)
        self.assertEqual(strictjson.loads("[1, 2, 3]", config=config), [1.0, 2.0, 3.0])

        with self.assertRaises(SecurityError):
            strictjson.loads("[1, 2, 3, 4]", config=config)
        with self.assertRaises(SecurityError):
            strictjson.loads('{"a": 1, "b": 2, "c": 3}', config=config)

    def test_input_size_limit(self):
        config = self._config(max_input_size=10)
        with self.assertRaises(SecurityError):
            strictjson.loads("[" + "1," * 10 + "1]", config=config)


if __name__ == '__main__':
    unittest.main()
