"""Domain-layer error definitions."""

# ============================================================================
#                           General helper errors
# ============================================================================


class HelperError(Exception):
    """Base class for helper-layer errors."""


# ============================================================================
#                           Registry related errors
# ============================================================================


class UnknownHelperError(LookupError, HelperError):
    """Raised when a helper name is not present in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No helper registered under the name '{name}'.")
        self.name = name


class DuplicateHelperError(HelperError):
    """Raised when registering a helper under a name that is already taken."""

    def __init__(self, name: str) -> None:
        super().__init__(f"A helper named '{name}' is already registered.")
        self.name = name
