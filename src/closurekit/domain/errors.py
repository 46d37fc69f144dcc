"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class EmptySequenceError(ValueError):
    """A fold was asked to reduce a sequence with no elements.

    Unseeded folds start from the first element, so an empty input has no
    defined result. Raised instead of returning a default; the caller must
    either pass a non-empty sequence or use a seeded fold.

    Example:
        >>> from closurekit.domain.errors import EmptySequenceError
        >>> err = EmptySequenceError("cannot fold an empty sequence")
        >>> str(err)
        'cannot fold an empty sequence'
        >>> isinstance(err, ValueError)
        True
    """


class UnsatisfiableConstraintError(ValueError):
    """A generator cannot produce a value that differs from its previous one.

    Raised on invocation when the generator's range holds a single value,
    so the "never repeat the previous value" rule can never be met.

    Example:
        >>> from closurekit.domain.errors import UnsatisfiableConstraintError
        >>> err = UnsatisfiableConstraintError("range 5..5 has only one value")
        >>> str(err)
        'range 5..5 has only one value'
    """


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when settings loaded from the configuration layers are malformed
    or logically inconsistent. Typically caught at CLI boundaries to provide
    user-friendly error messages.

    Example:
        >>> from closurekit.domain.errors import ConfigurationError
        >>> err = ConfigurationError("generator.low must not exceed generator.high")
        >>> str(err)
        'generator.low must not exceed generator.high'
    """


__all__ = [
    "ConfigurationError",
    "EmptySequenceError",
    "UnsatisfiableConstraintError",
]
