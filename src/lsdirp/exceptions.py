class InvalidArgumentError(ValueError):
    """
    Exception raised when an argument passed to lsdirp is unusable.

    This covers root specifications that are not non-empty strings, a bare string
    passed where a sequence of specifications is expected, and option values that
    fail validation (e.g. a negative depth).

    Example:
        >>> error = InvalidArgumentError("Root specification must be a non-empty string: ''")
        >>> str(error)
        "Root specification must be a non-empty string: ''"
    """

    pass


class PatternError(ValueError):
    """
    Exception raised when a glob or ignore pattern cannot be compiled.

    A pattern error is fatal for the whole call, not only for the root that
    carries the offending pattern.

    Attributes:
        pattern (object): The pattern that failed to compile.

    Example:
        >>> error = PatternError(42, "patterns must be strings")
        >>> str(error)
        'Invalid pattern: 42 (patterns must be strings)'
        >>> error.pattern
        42
    """

    def __init__(self, pattern: object, reason: str = "") -> None:
        """
        Initialize the exception with the offending pattern.

        Args:
            pattern: The pattern that failed to compile.
            reason (str, optional): Extra detail appended to the message.
        """
        self.pattern = pattern
        message = f"Invalid pattern: {pattern!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class NegatedRootWarning(UserWarning):
    """
    Warning emitted when a root specification starts with the negation character.

    Negation is only meaningful in the ignore list, so a negated root is skipped
    and the remaining roots are still processed.

    Attributes:
        spec (str): The skipped root specification.

    Example:
        >>> warning = NegatedRootWarning("!src/**")
        >>> str(warning)
        "Skipping negated root specification '!src/**'; use ignore_paths to exclude paths"
    """

    def __init__(self, spec: str) -> None:
        self.spec = spec
        super().__init__(f"Skipping negated root specification {spec!r}; use ignore_paths to exclude paths")
