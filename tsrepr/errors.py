"""
Representation Errors — Input and Contract Violations

Invalid inputs fail fast. Empty run partitions are NOT errors
(they resolve to 0 in the feature vectors).
"""


class InvalidLengthError(ValueError):
    """Raised when a series is too short for the requested operation."""
    pass


class InvalidParameterError(ValueError):
    """Raised for malformed series or out-of-range parameters."""
    pass


class InvalidAggregateError(RuntimeError):
    """
    Raised when an aggregation is invoked on an empty sequence.

    Callers guard against empty partitions before aggregating, so this
    signals a programming error and is never caught internally.
    """
    pass
