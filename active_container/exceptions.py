"""active-container exceptions."""


class ActiveContainerError(Exception):
    """Abstract active-container error."""


class ConfigError(ActiveContainerError):
    """Raised when an active-container configuration is invalid."""


class ResolutionError(ActiveContainerError, NameError):
    """Raised when a class name cannot be resolved to a class."""


class RecordError(ActiveContainerError):
    """Raised when a record cannot be built from a mapping."""
