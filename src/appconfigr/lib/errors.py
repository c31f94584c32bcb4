"""Custom exception hierarchy for appconfigr loading and variable resolution."""


class AppConfigrError(Exception):
    """Base exception for all appconfigr errors.

    All appconfigr-specific exceptions inherit from this class, enabling
    callers to handle every library failure with a single except clause.
    """

    pass


class ConfigError(AppConfigrError):
    """Exception raised when a loader is configured incorrectly.

    Raised at build time, e.g. when the base directory does not exist or an
    unknown format name is requested.

    Attributes:
        field: The configuration setting that caused the error
        message: Human-readable error message describing the issue
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize ConfigError with field and message.

        Args:
            field: Name of the setting where the error occurred
            message: Descriptive error message
        """
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")


class VariableResolutionError(AppConfigrError):
    """Exception raised when no resolver in a chain can supply a variable.

    The string form is the resolver diagnostic verbatim, so a chain failure
    reads as every attempted source in resolution order.

    Attributes:
        variable: Name of the variable that could not be resolved
        message: Combined diagnostic of every resolver that was asked
    """

    def __init__(self, variable: str, message: str) -> None:
        """Initialize VariableResolutionError.

        Args:
            variable: Name of the unresolved variable
            message: Diagnostic produced by the resolver chain
        """
        self.variable = variable
        self.message = message
        super().__init__(message)


class FileNotFoundError(AppConfigrError):
    """Exception raised when a configuration file is not found.

    Attributes:
        path: Path to the file that was not found
        message: Human-readable error message
    """

    def __init__(self, path: str, message: str) -> None:
        """Initialize FileNotFoundError with path and message.

        Args:
            path: Path to the file that was not found
            message: Descriptive error message, optionally with suggestions
        """
        self.path = path
        self.message = message
        super().__init__(f"File not found: {path}\n{message}")
