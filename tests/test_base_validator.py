import unittest

from pyshape import MISSING, Invalid, MultipleInvalid, Validator, number, string, unknown


class TestValidatorChain(unittest.TestCase):

    def test_bare_validator_is_identity_for_its_kind(self):
        """A validator without chain methods returns valid input unchanged."""
        self.assertEqual(string("hello"), "hello")
        self.assertEqual(number(42), 42)
        value = {"nested": [1, 2]}
        self.assertIs(unknown(value), value)

    def test_empty_pipe_keeps_behavior(self):
        """Appending no steps behaves exactly like the base validator."""
        chained = string.pipe()
        for value in ("abc", "", 5, None):
            self.assertEqual(string.validate(value).errors, chained.validate(value).errors)
            self.assertEqual(string.validate(value).value, chained.validate(value).value)

    def test_chains_do_not_mutate_the_base(self):
        """Two chains built from one base validate independently."""
        base = string
        at_least_three = base.min(3)
        at_most_two = base.max(2)

        self.assertEqual(len(base.steps), 1)
        self.assertEqual(base("abcd"), "abcd")
        self.assertEqual(base("ab"), "ab")
        self.assertEqual(at_least_three("abcd"), "abcd")
        self.assertEqual(at_most_two("ab"), "ab")
        with self.assertRaises(MultipleInvalid):
            at_least_three("ab")
        with self.assertRaises(MultipleInvalid):
            at_most_two("abcd")

    def test_steps_run_in_declaration_order(self):
        """Transforms feed the checks chained after them."""
        validator = string.trim().min(3)
        self.assertEqual(validator("  abc  "), "abc")
        with self.assertRaises(MultipleInvalid) as ctx:
            validator("  ab  ")
        self.assertEqual(ctx.exception.errors[0].message, "Expect length to be at least 3 characters")

    def test_first_failing_step_stops_the_chain(self):
        """Later steps never see a value that failed an earlier one."""
        calls = []
        validator = number.gt(0).transform(lambda value: calls.append(value) or value)
        result = validator.validate(-1)
        self.assertFalse(result.ok)
        self.assertEqual(len(result.errors), 1)
        self.assertEqual(calls, [])

    def test_transform_ordering(self):
        """Coercion, range check and formatting run in chain order."""
        validator = unknown.number().gt(0).to_fixed(2)
        self.assertEqual(validator("123.4567"), "123.46")

        with self.assertRaises(MultipleInvalid) as ctx:
            validator("-5")
        self.assertEqual(ctx.exception.errors[0].message, "Expect value to be greater than 0")

    def test_custom_step_with_test(self):
        """Arbitrary predicates can be appended with their own message."""
        even = number.integer().test(lambda value: value % 2 == 0, "Expect value to be even")
        self.assertEqual(even(4), 4)
        with self.assertRaises(MultipleInvalid) as ctx:
            even(3)
        self.assertEqual(ctx.exception.errors[0].message, "Expect value to be even")

    def test_pipe_accepts_steps_raising_invalid(self):
        def no_spaces(value):
            if " " in value:
                raise Invalid("Expect value to have no spaces")
            return value

        validator = string.pipe(no_spaces)
        self.assertEqual(validator("abc"), "abc")
        self.assertEqual(validator.validate("a b").errors[0].message, "Expect value to have no spaces")


class TestOptional(unittest.TestCase):

    def test_optional_accepts_missing_and_none(self):
        validator = string.min(3).optional()
        self.assertIsNone(validator())
        self.assertIsNone(validator(MISSING))
        self.assertIsNone(validator(None))
        self.assertEqual(validator("abcd"), "abcd")

    def test_optional_skips_every_step(self):
        """An absent value short-circuits to success without running any step."""
        calls = []
        validator = unknown.transform(lambda value: calls.append(value) or value).optional()
        self.assertIsNone(validator())
        self.assertEqual(calls, [])

    def test_optional_still_checks_present_values(self):
        with self.assertRaises(MultipleInvalid) as ctx:
            string.min(3).optional()("ab")
        self.assertEqual(ctx.exception.errors[0].message, "Expect length to be at least 3 characters")

    def test_required_value_must_be_present(self):
        with self.assertRaises(MultipleInvalid) as ctx:
            string()
        self.assertEqual(ctx.exception.errors[0].message, "Expect value to be defined")

    def test_none_is_rejected_by_type_checks(self):
        """Without optional(), None is a present value of the wrong type."""
        with self.assertRaises(MultipleInvalid) as ctx:
            string(None)
        self.assertEqual(ctx.exception.errors[0].message, "Expect value to be string")
        self.assertIsNone(unknown(None))


class TestStepFailures(unittest.TestCase):

    def test_unexpected_exceptions_become_validation_errors(self):
        """A step raising an arbitrary exception never escapes as that exception."""
        validator = number.transform(lambda value: 1 / value)
        result = validator.validate(0)
        self.assertFalse(result.ok)
        error = result.errors[0]
        self.assertEqual(error.path, ())
        self.assertIn("division by zero", error.message)
        self.assertIsInstance(error.error.cause, ZeroDivisionError)

    def test_error_replaces_messages(self):
        validator = number.gt(0).error("Amount must be positive")
        with self.assertRaises(MultipleInvalid) as ctx:
            validator(-1)
        self.assertEqual(len(ctx.exception.errors), 1)
        self.assertEqual(ctx.exception.errors[0].message, "Amount must be positive")
        self.assertEqual(ctx.exception.errors[0].error.cause.message, "Expect value to be greater than 0")

    def test_empty_multiple_invalid_is_still_a_failure(self):
        def reject_silently(value):
            raise MultipleInvalid([])

        error, value = Validator().pipe(reject_silently).destruct()(1)
        self.assertIsNone(value)
        self.assertEqual(error.errors[0].path, ())
        self.assertEqual(error.errors[0].message, "Validator unknown failed without errors")

        error, _ = unknown.pipe(reject_silently).error("Rejected").destruct()(1)
        self.assertEqual([item.message for item in error.errors], ["Rejected"])

    def test_repr_mentions_kind(self):
        self.assertIn("string", repr(string))
        self.assertIn("optional", repr(string.optional()))
        self.assertIsInstance(string, Validator)


if __name__ == '__main__':
    unittest.main()
