"""
Test cases for agreement with the standard json module on well-formed input.

strictjson returns every number as a float, so results are compared after
normalizing the standard library's ints.
"""

import json
import unittest

import strictjson


def _as_floats(value):
    if isinstance(value, bool) or value is None or isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, list):
        return [_as_floats(item) for item in value]
    return {key: _as_floats(item) for key, item in value.items()}


WELL_FORMED = [
    '{"test": "value"}',
    "[1, 2, 3]",
    '{"nested": {"array": [1, 2, {"deep": true}]}}',
    '{"number": 123, "float": 45.67, "bool": false, "null": null}',
    '{"foo":{"bar":1234}}',
    '[[], {}, [[]], [{}], ""]',
    '{"unicode": "caf\\u00e9 \\ud83d\\ude00", "escapes": "a\\"b\\\\c\\/d\\n"}',
    '[-0, 0.5, -1.5e-3, 2E+2, 1e400]',
    '"just a string"',
    "3.25",
    "true",
    "null",
    '{"a": [1, {"b": [2, {"c": [3, {"d": null}]}]}]}',
    '{"": "empty key", " ": "space key"}',
]


class TestLoadsCompatibility(unittest.TestCase):
    """Test loads() against json.loads() for standard documents."""

    def test_well_formed_documents(self):
        for test_case in WELL_FORMED:
            with self.subTest(test_case=test_case):
                expected = _as_floats(json.loads(test_case))
                self.assertEqual(strictjson.loads(test_case), expected)

    def test_round_trip_of_dumped_data(self):
        data = {
            "users": [
                {"id": 1, "name": "Ann", "tags": ["a", "b"], "active": True},
                {"id": 2, "name": "Bo\nb", "tags": [], "active": False},
            ],
            "meta": {"count": 2, "next": None, "ratio": 0.25},
        }
        for indent in (None, 2, "\t"):
            with self.subTest(indent=indent):
                text = json.dumps(data, indent=indent)
                self.assertEqual(strictjson.loads(text), _as_floats(data))

    def test_bytes_input(self):
        self.assertEqual(strictjson.loads(b'{"k": [true]}'), {"k": [True]})
        self.assertEqual(strictjson.loads(bytearray(b"[1]")), [1.0])

    def test_rejects_non_text(self):
        with self.assertRaises(TypeError):
            strictjson.loads(123)


class TestWhitespaceInvariance(unittest.TestCase):
    """Whitespace between tokens never changes the result."""

    def _spaced(self, text, gap):
        tokens = strictjson.tokenize(text)
        pieces = []
        last = 0
        for token in tokens:
            start = token.position.offset
            pieces.append(text[last:start].strip())
            last = start
        pieces.append(text[last:])
        return gap + gap.join(piece for piece in pieces if piece) + gap

    def test_whitespace_between_tokens(self):
        for text in WELL_FORMED:
            expected = strictjson.loads(text)
            for gap in (" ", "\n", "\t\r\n  ", "\n\n\n"):
                with self.subTest(text=text, gap=gap):
                    self.assertEqual(strictjson.loads(self._spaced(text, gap)), expected)

    def test_whitespace_does_not_change_errors(self):
        compact = "[1,2,3,]"
        spread = "[\n  1 ,\n  2 ,\n  3 ,\n\n]"
        for text in (compact, spread):
            with self.subTest(text=text):
                with self.assertRaises(strictjson.ParseError) as cm:
                    strictjson.loads(text)
                self.assertIs(cm.exception.kind, strictjson.ParseErrorKind.TRAILING_COMMA)
                self.assertEqual(cm.exception.token.value, ",")


if __name__ == '__main__':
    unittest.main()
