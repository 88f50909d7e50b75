import unittest

from pyshape import ErrorCollector, Invalid, MultipleInvalid, ValidationError, ValidationResult, format_path


class TestValidationResult(unittest.TestCase):

    def test_success(self):
        result = ValidationResult.success({"a": 1})
        self.assertTrue(result.ok)
        self.assertEqual(result.errors, [])
        self.assertEqual(result.unwrap(), {"a": 1})

    def test_failure(self):
        error = ValidationError(("a",), Invalid("Expect value to be string"))
        result = ValidationResult.failure([error])
        self.assertFalse(result.ok)
        self.assertIsNone(result.value)
        with self.assertRaises(MultipleInvalid) as ctx:
            result.unwrap()
        self.assertEqual(ctx.exception.errors, [error])

    def test_failure_needs_errors(self):
        with self.assertRaises(ValueError):
            ValidationResult.failure([])


class TestErrorCollector(unittest.TestCase):

    def test_collect_prefixes_child_paths(self):
        child = ValidationResult.failure([
            ValidationError(("amount",), Invalid("Expect value to be number")),
            ValidationError((), Invalid("Expect value to be object")),
        ])
        collector = ErrorCollector()
        self.assertIsNone(collector.collect(0, child))
        self.assertEqual([e.path for e in collector.errors], [(0, "amount"), (0,)])

        outer = ErrorCollector()
        outer.collect("items", ValidationResult.failure(collector.errors))
        self.assertEqual(outer.errors[0].path, ("items", 0, "amount"))

    def test_collect_returns_successful_values(self):
        collector = ErrorCollector()
        self.assertEqual(collector.collect("a", ValidationResult.success("x")), "x")
        self.assertFalse(collector.has_errors)
        collector.raise_if_any()

    def test_add_and_raise(self):
        collector = ErrorCollector()
        collector.add(Invalid("Unexpected field"), "extra")
        self.assertTrue(collector.has_errors)
        with self.assertRaises(MultipleInvalid) as ctx:
            collector.raise_if_any()
        self.assertEqual(ctx.exception.errors[0].path, ("extra",))

    def test_collectors_are_independent(self):
        first, second = ErrorCollector(), ErrorCollector()
        first.add(Invalid("a"))
        self.assertEqual(second.errors, [])


class TestErrorRendering(unittest.TestCase):

    def test_format_path(self):
        self.assertEqual(format_path(("items", 0, "amount")), "items[0].amount")
        self.assertEqual(format_path((0, "a")), "[0].a")
        self.assertEqual(format_path(()), "")

    def test_validation_error_str(self):
        self.assertEqual(str(ValidationError((), Invalid("bad"))), "bad")
        self.assertEqual(str(ValidationError(("a", 1), Invalid("bad"))), "a[1]: bad")

    def test_multiple_invalid_summary(self):
        errors = [ValidationError(("a",), Invalid("bad")), ValidationError(("b",), Invalid("worse"))]
        self.assertEqual(str(MultipleInvalid(errors[:1])), "a: bad")
        self.assertEqual(str(MultipleInvalid(errors)), "a: bad (and 1 more error(s))")
        self.assertEqual(list(MultipleInvalid(errors)), errors)


if __name__ == '__main__':
    unittest.main()
