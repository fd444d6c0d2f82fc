"""Exception hierarchy for formpress."""


class FormPressError(Exception):
    """Base exception for all formpress errors."""


class ConfigurationError(FormPressError):
    """Raised when layout settings are internally inconsistent."""


class PageAllocationError(FormPressError):
    """Raised when a new page cannot be allocated for the document."""


class DocumentGenerationError(FormPressError):
    """Raised when rendering or serializing the document fails.

    The message is deliberately generic; the original cause is chained
    via ``__cause__`` and logged, never surfaced to the caller.
    """

    def __init__(self, message: str = "document generation failed") -> None:
        super().__init__(message)
