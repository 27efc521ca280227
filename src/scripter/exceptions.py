"""Custom exception hierarchy for Scripter with helpful error messages."""

from __future__ import annotations

from typing import Any


class ScripterError(Exception):
    """Base exception with helpful formatting for all Scripter errors.

    Provides structured error messages with hints and details to help users
    understand and fix problems.
    """

    def __init__(
        self,
        message: str,
        hint: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize exception with structured error information.

        Args:
            message: Primary error message describing what went wrong
            hint: Optional hint suggesting how to fix the problem
            details: Optional dictionary with additional debugging information
        """
        self.message = message
        self.hint = hint
        self.details = details
        super().__init__(self.format_error())

    def format_error(self) -> str:
        """Format the error message with hint and details.

        Returns:
            Formatted error string with all available information
        """
        output = f"Error: {self.message}"
        if self.hint:
            output += f"\nHint: {self.hint}"
        if self.details:
            details_str = "\n".join(
                f"  {key}: {value}" for key, value in self.details.items()
            )
            output += f"\nDetails:\n{details_str}"
        return output


class ConfigurationError(ScripterError):
    """Configuration errors including invalid settings and missing config files."""

    pass


class PDFReadError(ScripterError):
    """PDF extraction errors raised while reading a source file."""

    pass


class PDFNotFoundError(PDFReadError):
    """The source PDF does not exist."""

    def __init__(self, path: Any) -> None:
        """Initialize with the missing path.

        Args:
            path: Path that was requested
        """
        super().__init__(
            message=f"PDF file not found: {path}",
            hint="Check that the file path is correct",
            details={"file": str(path)},
        )


class PDFPasswordError(PDFReadError):
    """The source PDF is encrypted and no password was supplied."""

    def __init__(self, path: Any) -> None:
        """Initialize with the protected path.

        Args:
            path: Path of the encrypted PDF
        """
        super().__init__(
            message=f"PDF is password-protected and cannot be read: {path}",
            hint="Remove the password protection and try again",
            details={"file": str(path)},
        )


class PDFCorruptedError(PDFReadError):
    """The source file could not be parsed as a PDF."""

    def __init__(self, path: Any, reason: str | None = None) -> None:
        """Initialize with the unreadable path.

        Args:
            path: Path of the damaged file
            reason: Underlying parser message, if any
        """
        details: dict[str, Any] = {"file": str(path)}
        if reason:
            details["parser_error"] = reason
        super().__init__(
            message=f"Invalid or corrupted PDF file: {path}",
            hint="Make sure the file is a valid, text-based PDF",
            details=details,
        )


class EmptyDocumentError(ScripterError):
    """Extracted content holds no text to classify."""

    pass


class FileSystemError(ScripterError):
    """File system operation errors."""

    pass


def check_config_keys(config: dict[str, Any]) -> None:
    """Check for common configuration mistakes.

    Args:
        config: Configuration dictionary to validate

    Raises:
        ConfigurationError: With hints about correct configuration keys
    """
    # Keys that mirror CLI flag names rather than setting names
    wrong_keys = {
        "scene_detection": "detect_scene_headings",
        "character_detection": "detect_character_names",
        "strict": "strict_mode",
        "metadata": "include_metadata",
    }

    for wrong, correct in wrong_keys.items():
        if wrong in config:
            raise ConfigurationError(
                message=f"Invalid configuration key '{wrong}'",
                hint=f"Use '{correct}' instead of '{wrong}'",
                details={
                    "found_keys": list(config.keys()),
                    "invalid_key": wrong,
                    "correct_key": correct,
                },
            )
