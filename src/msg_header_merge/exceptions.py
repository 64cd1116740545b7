"""Custom exceptions for msg-header-merge."""


class MsgHeaderMergeError(Exception):
    """Base exception for all msg-header-merge errors."""


class UnsupportedItemTypeError(MsgHeaderMergeError):
    """Exception raised when an item type has no header template."""


class ConversionFailedError(MsgHeaderMergeError):
    """Exception raised when the external RTF to HTML conversion fails."""


class MissingRequiredFieldError(MsgHeaderMergeError):
    """Exception raised for a missing required header field in strict mode."""

    def __init__(self, label: str) -> None:
        super().__init__(f"Required header field is missing: {label}")
        self.label = label


class ConfigurationError(MsgHeaderMergeError):
    """Exception raised for configuration related errors."""


class ValidationError(MsgHeaderMergeError):
    """Exception raised for item metadata validation errors."""
