"""Tests for the ValidationResult combinator."""
from app.domain.validation import ErrorKind, ValidationError, ValidationResult


class TestValidationResult:

    def test_success_has_no_errors(self):
        result = ValidationResult.success()

        assert result.is_valid
        assert not result.has_errors()
        assert result.get_errors() == []

    def test_fail_holds_single_error(self):
        result = ValidationResult.fail("Boom", {"a": 1}, kind=ErrorKind.BALANCE_COUNT)

        assert result.has_errors()
        assert result.get_errors() == [ValidationError("Boom", {"a": 1}, ErrorKind.BALANCE_COUNT)]

    def test_fail_without_details(self):
        error = ValidationResult.fail("Boom").get_errors()[0]

        assert error.details is None
        assert error.kind is None

    def test_success_is_identity(self):
        failed = ValidationResult.fail("Boom")

        assert ValidationResult.success().combine(failed) == failed
        assert failed.combine(ValidationResult.success()) == failed
        assert ValidationResult.success().combine(ValidationResult.success()).is_valid

    def test_combine_concatenates_in_order(self):
        first = ValidationResult.fail("first")
        second = ValidationResult.fail("second")

        combined = first.combine(second)

        assert [e.message for e in combined.get_errors()] == ["first", "second"]

    def test_combine_is_associative(self):
        a, b, c = (ValidationResult.fail(m) for m in "abc")

        assert a.combine(b).combine(c) == a.combine(b.combine(c))

    def test_combine_all_skips_successes(self):
        combined = ValidationResult.combine_all([
            ValidationResult.success(),
            ValidationResult.fail("x"),
            ValidationResult.success(),
            ValidationResult.fail("y"),
        ])

        assert [e.message for e in combined.get_errors()] == ["x", "y"]

    def test_combine_all_of_nothing_is_success(self):
        assert ValidationResult.combine_all([]).is_valid

    def test_get_errors_returns_a_copy(self):
        result = ValidationResult.fail("Boom")

        result.get_errors().append(ValidationError("other"))

        assert len(result.get_errors()) == 1
