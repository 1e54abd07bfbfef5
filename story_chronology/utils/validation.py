"""Input validation utilities for services.

This module provides reusable validation functions that raise clear
ValueError or TypeError exceptions for invalid inputs.
"""


def validate_not_none(value, param_name: str):
    """Validate that a required parameter is not None.

    Args:
        value: The value to validate
        param_name: Name of the parameter for error messages

    Raises:
        ValueError: If value is None
    """
    if value is None:
        raise ValueError(f"Parameter '{param_name}' cannot be None")


def validate_type(value, param_name: str, expected_type: type | tuple[type, ...]) -> None:
    """Validate that a parameter is of the expected type.

    Args:
        value: The value to validate
        param_name: Name of the parameter for error messages
        expected_type: The expected type, or a tuple of accepted types

    Raises:
        TypeError: If value is not of expected_type
    """
    if not isinstance(value, expected_type):
        if isinstance(expected_type, tuple):
            expected_name = " or ".join(t.__name__ for t in expected_type)
        else:
            expected_name = expected_type.__name__
        raise TypeError(
            f"Parameter '{param_name}' must be {expected_name}, got {type(value).__name__}"
        )
