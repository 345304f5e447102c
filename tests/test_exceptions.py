"""Tests for custom exception hierarchy."""

from random_oo.core.exceptions import (
    AbstractMethodError,
    InvalidArgumentError,
    LimitError,
    RandomOOError,
    SeedError,
    UnknownGeneratorError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_base_is_exception(self):
        assert isinstance(RandomOOError("test"), Exception)

    def test_subclasses_are_random_oo_errors(self):
        errors = [
            AbstractMethodError("next"),
            InvalidArgumentError("uniform", "bad"),
            UnknownGeneratorError("gamma", []),
            SeedError(object(), "bad"),
            LimitError("sample size", 11, 10),
        ]
        for err in errors:
            assert isinstance(err, RandomOOError)

    def test_codes_and_phases(self):
        assert AbstractMethodError.code == "ABSTRACT_METHOD"
        assert InvalidArgumentError.phase == "construct"
        assert UnknownGeneratorError.phase == "resolve"
        assert SeedError.code == "SEED_ERROR"
        assert LimitError.phase == "sample"


class TestExceptionMessages:
    """Test messages and serialization."""

    def test_abstract_method_message(self):
        err = AbstractMethodError("seed", generator="Generator")
        assert str(err) == "call to abstract method 'seed'"

    def test_invalid_argument_to_dict(self):
        err = InvalidArgumentError("bootstrap", "requires at least one data item")
        assert err.to_dict() == {
            "error": {
                "code": "INVALID_ARGUMENT",
                "message": "Invalid argument for 'bootstrap': requires at least one data item",
                "phase": "construct",
                "generator": "bootstrap",
                "details": {"reason": "requires at least one data item"},
            }
        }

    def test_to_dict_omits_empty_fields(self):
        assert RandomOOError("boom").to_dict() == {
            "error": {"code": "UNKNOWN_ERROR", "message": "boom", "phase": "unknown"}
        }

    def test_limit_message(self):
        err = LimitError("sample size", 11, 10)
        assert str(err) == "Exceeded sample size limit: 11 > 10"
