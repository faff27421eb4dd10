"""
Exception taxonomy for the verification service.
Expected outcomes (validation, not-found) are rendered per channel by the
route handlers; store and config errors never reach a caller verbatim.
"""


class VerificationError(Exception):
    """Base class for every error raised by the verification service"""


class ValidationError(VerificationError):
    """Identifier missing, oversized or containing disallowed characters"""

    def __init__(self, kind, value, message=None):
        self.kind = kind
        self.value = value
        super().__init__(message or f"{kind}: {value!r}")


class MalformedRequestError(VerificationError):
    """Telephony body could not be parsed"""


class NotFoundError(VerificationError):
    """No person record matches the identifier"""

    def __init__(self, identifier):
        self.identifier = identifier
        super().__init__(f"No person found for {identifier!r}")


class StoreError(VerificationError):
    """Connectivity or query failure in the person store"""


class IntegrityFault(StoreError):
    """A stored record violates the data model (e.g. unknown category)"""


class ConfigError(VerificationError):
    """Required startup configuration is missing"""

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__("Missing required configuration: " + ", ".join(self.missing))
