"""Tests for custom exception hierarchy."""

import pytest

from compwire.exceptions import (
    CompwireCircularLiteralError,
    CompwireComponentNotFoundError,
    CompwireEnvironmentInvalidError,
    CompwireError,
    CompwireInvalidReferenceError,
    CompwireInvalidRegistrationError,
    CompwireMalformedRequestError,
)


@pytest.mark.parametrize(
    "error_type",
    [
        CompwireCircularLiteralError,
        CompwireComponentNotFoundError,
        CompwireEnvironmentInvalidError,
        CompwireInvalidReferenceError,
        CompwireInvalidRegistrationError,
        CompwireMalformedRequestError,
    ],
)
def test_all_errors_derive_from_base(error_type: type[Exception]) -> None:
    assert issubclass(error_type, CompwireError)


class TestCompwireComponentNotFoundError:
    def test_carries_name(self) -> None:
        error = CompwireComponentNotFoundError("card")

        assert error.name == "card"
        assert str(error) == "Component 'card' is not registered."

    def test_catchable_as_base(self) -> None:
        with pytest.raises(CompwireError):
            raise CompwireComponentNotFoundError("card")
