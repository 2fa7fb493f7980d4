class EngineError(Exception):
    """Base class for recoverable engine errors."""


class NotFoundError(EngineError):
    """An id did not resolve to a proposal, validator or delegator."""


class InvalidArgumentError(EngineError):
    """Input outside the accepted domain (unknown vote value, negative stake, ...)."""
