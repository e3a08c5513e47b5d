"""
Exception types raised by the pyimdct transforms.
Both are contract violations: they signal a programming error in the caller
and are never recovered from inside the package.
"""


class ImdctError(Exception):
    """Base class for all pyimdct errors."""


class ConfigurationError(ImdctError):
    """Raised at construction when a transform size is not supported."""


class PreconditionViolation(ImdctError):
    """Raised when buffers passed to a transform have the wrong length."""
