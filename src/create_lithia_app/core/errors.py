"""
Error types for project scaffolding.
"""


class LithiaError(Exception):
    """Base exception for all create-lithia-app errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigError(LithiaError):
    """
    Raised when the requested configuration cannot be resolved.

    Examples:
    - Conflicting flags (--install with --no-install)
    - Unknown template or package manager
    - Invalid project name
    - Requested package manager not installed
    """

    pass


class ScaffoldError(LithiaError):
    """
    Raised when a scaffolding step fails.

    Examples:
    - git clone exits non-zero
    - package.json missing or not valid JSON
    - Package manager not found at install time
    """

    pass


class OperationCancelled(LithiaError):
    """Raised when the user cancels a prompt or declines to overwrite."""

    def __init__(self, message: str = "Operation cancelled"):
        super().__init__(message)
