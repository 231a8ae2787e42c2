"""Errors raised by the shop URL helpers."""


class UrlHelperError(Exception):
    """Base class for URL helper failures."""


class PreconditionError(UrlHelperError, RuntimeError):
    """An operation was called outside the runtime context it requires."""


class InvalidArgumentError(UrlHelperError, ValueError):
    """A caller-supplied identifier failed validation."""


class RequestEnvironmentError(UrlHelperError, LookupError):
    """A value the request environment must always provide is missing."""
