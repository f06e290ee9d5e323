"""
Custom exception hierarchy for the Doctrine entity generator.

Only configuration problems, filesystem failures and user cancellation are
raised. An incomplete model (missing types, empty names, absent multiplicities)
is never an error: it is resolved through defaults while emitting.
"""

from typing import Dict, Any, Optional, List


class DoctrineGeneratorError(Exception):
    """
    Base exception for all Doctrine entity generator errors.

    Provides context and recovery suggestions alongside the message.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        error_code: Optional[str] = None
    ):
        """
        Initialize the exception with context and recovery suggestions.

        Args:
            message: Human-readable error message
            context: Additional context about where/why the error occurred
            suggestions: List of potential solutions or next steps
            error_code: Unique error code for programmatic handling
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.suggestions = suggestions or []
        self.error_code = error_code

    def __str__(self) -> str:
        """Return formatted error message with context."""
        lines = [self.message]

        if self.error_code:
            lines.append(f"Error Code: {self.error_code}")

        if self.context:
            lines.append("Context:")
            for key, value in self.context.items():
                lines.append(f"  {key}: {value}")

        if self.suggestions:
            lines.append("Suggestions:")
            for suggestion in self.suggestions:
                lines.append(f"  • {suggestion}")

        return "\n".join(lines)


class ConfigurationError(DoctrineGeneratorError):
    """Raised when generation options are invalid or cannot be loaded."""

    def __init__(self, message: str, config_file: str = None, **kwargs):
        context = kwargs.get('context', {})
        if config_file:
            context['config_file'] = config_file

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check the configuration file syntax",
                "Use either snake_case option names or the camelCase preference keys",
                "Make sure indentSpaces is a non-negative integer",
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="CONFIG_ERROR"
        )


class FileSystemError(DoctrineGeneratorError):
    """Raised when a directory or file cannot be created."""

    def __init__(self, message: str, path: str = None, operation: str = None, **kwargs):
        context = kwargs.get('context', {})
        if path:
            context['path'] = path
        if operation:
            context['operation'] = operation

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check that the destination folder exists and is writable",
                "Check for a file with the same name as a generated directory",
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="FILESYSTEM_ERROR"
        )
        self.path = path
        self.operation = operation


class UserCancelledError(DoctrineGeneratorError):
    """Raised when no base model or destination folder was chosen."""

    def __init__(self, message: str = "Generation cancelled by user", **kwargs):
        super().__init__(
            message,
            context=kwargs.get('context'),
            suggestions=kwargs.get('suggestions'),
            error_code="USER_CANCELED"
        )


def raise_configuration_error(message: str, config_file: str = None, **kwargs):
    """Convenience function to raise configuration errors."""
    raise ConfigurationError(message, config_file=config_file, **kwargs)
