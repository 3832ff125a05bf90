class ResumeGenerationError(Exception):
    """Base class for resume pipeline errors."""


class ConfigurationError(ResumeGenerationError):
    """Generation credentials are missing; no model call can be attempted."""


class InputValidationError(ResumeGenerationError):
    """Required caller input is missing or blank."""


class GenerationFailure(ResumeGenerationError):
    """The model call failed, timed out or returned nothing."""
