import unittest

from pyshape import Destructured, MultipleInvalid, Schema, array, number, string


class TestInvocationModes(unittest.TestCase):

    def setUp(self):
        self.validator = Schema({
            "name": string.min(2),
            "tags": array.of(string).optional(),
            "age": number.gte(0).optional(),
        })

    def test_throwing_mode_returns_value(self):
        payload = {"name": "Ann", "tags": ["x"], "age": 3}
        self.assertEqual(self.validator(payload), payload)

    def test_throwing_mode_raises_every_error(self):
        with self.assertRaises(MultipleInvalid) as ctx:
            self.validator({"name": "A", "tags": ["x", 2], "age": -1})
        self.assertEqual(
            [e.path for e in ctx.exception.errors],
            [("name",), ("tags", 1), ("age",)],
        )

    def test_destructuring_exclusivity(self):
        """Exactly one slot is meaningful: error is None iff validation passed."""
        destruct = self.validator.destruct()
        inputs = [
            {"name": "Ann"},
            {"name": "A"},
            {"name": "Ann", "tags": None},
            "not an object",
            None,
            {},
        ]
        for payload in inputs:
            result = destruct(payload)
            self.assertIsInstance(result, Destructured)
            error, value = result
            if error is None:
                self.assertIsInstance(value, dict)
            else:
                self.assertIsInstance(error, MultipleInvalid)
                self.assertIsNone(value)
                self.assertTrue(error.errors)

    def test_destructuring_never_raises(self):
        error, value = number.destruct()()
        self.assertEqual(error.errors[0].message, "Expect value to be defined")
        self.assertIsNone(value)

    def test_destructuring_reports_same_errors_as_throwing(self):
        payload = {"name": 5}
        error, _ = self.validator.destruct()(payload)
        with self.assertRaises(MultipleInvalid) as ctx:
            self.validator(payload)
        self.assertEqual(error.errors, ctx.exception.errors)

    def test_round_trip_without_transforms(self):
        payload = {"name": "Ann", "tags": ["a", "b"], "age": 30}
        error, value = self.validator.destruct()(payload)
        self.assertIsNone(error)
        self.assertEqual(value, payload)
        self.assertIsNot(value, payload)


if __name__ == '__main__':
    unittest.main()
