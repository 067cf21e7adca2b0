"""Error taxonomy for field protection."""


class ProtectionError(Exception):
    """Base class for all field protection errors."""


class ConfigurationError(ProtectionError):
    """Key or pepper material is missing or malformed."""


class UnsupportedTierError(ProtectionError, ValueError):
    """The requested protection tier is not recognized."""


class UnsupportedFieldKindError(ProtectionError, ValueError):
    """The requested field kind is not recognized."""


class UnsupportedOperationError(ProtectionError):
    """The operation is not allowed for the given tier or field."""


class MalformedInputError(ProtectionError):
    """A value does not have the format its tier requires."""


class IntegrityError(ProtectionError):
    """Authenticated decryption failed; the value was altered or the key is wrong."""
