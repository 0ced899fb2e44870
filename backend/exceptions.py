# backend/exceptions.py


class InvalidArgumentError(ValueError):
    """Caller passed the wrong kind of value (a programming error, not bad upstream data)."""


class AIClientError(RuntimeError):
    """The LLM call failed or returned nothing usable."""


class DreamRoleAnalysisError(RuntimeError):
    pass


class ResumeTextError(ValueError):
    """No meaningful text could be extracted from the uploaded resume."""


class ProfileLookupError(RuntimeError):
    """A profile service (GitHub, Proxycurl) could not be reached or answered unexpectedly."""
