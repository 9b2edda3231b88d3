"""Domain exceptions for the fixture users context."""


class FixtureConfigError(ValueError):
    """Raised when a fixture user declaration cannot be turned into a user.

    Indicates a test-authoring mistake in the suite configuration (for
    example an entry without a name), not an environmental condition.
    """

    pass


class FixtureUserNotFoundError(LookupError):
    """Raised when a test step asks for a fixture user that was never declared.

    There is no fallback: callers are expected to handle the miss explicitly.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"Fixture user '{name}' is not declared")
        self.name = name
