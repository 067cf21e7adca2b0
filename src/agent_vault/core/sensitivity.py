"""Data protection tier classification system.

Defines the protection tiers applied to agent PII before it is persisted and
the field kinds that map onto them. Tiers are declared per field at the schema
level with :func:`protection_tier`; they are never inferred from the value.
"""

import enum
from typing import Any


class ProtectionTier(enum.StrEnum):
    """Field protection tiers, strongest first."""

    HIGHEST = "highest"
    STRONG = "strong"
    BASIC = "basic"
    SYSTEM_CODE = "system-code"

    @property
    def reversible(self) -> bool:
        """Whether values protected under this tier can be decrypted."""
        return self is not ProtectionTier.SYSTEM_CODE


class FieldKind(enum.StrEnum):
    """Kinds of sensitive agent fields."""

    GOVERNMENT_ID = "government-id"
    PHONE = "phone"
    EMAIL = "email"
    NAME = "name"
    LOCATION = "location"
    SYSTEM_CODE = "system-code"


_KIND_TIERS: dict[FieldKind, ProtectionTier] = {
    FieldKind.GOVERNMENT_ID: ProtectionTier.HIGHEST,
    FieldKind.PHONE: ProtectionTier.STRONG,
    FieldKind.EMAIL: ProtectionTier.STRONG,
    FieldKind.NAME: ProtectionTier.BASIC,
    FieldKind.LOCATION: ProtectionTier.BASIC,
    FieldKind.SYSTEM_CODE: ProtectionTier.SYSTEM_CODE,
}


def tier_for_kind(kind: FieldKind) -> ProtectionTier:
    """Return the protection tier a field kind is stored under.

    Args:
        kind: The field kind.

    Returns:
        The tier for that kind.
    """
    return _KIND_TIERS[FieldKind(kind)]


def protection_tier(
    tier: ProtectionTier,
    kind: FieldKind | None = None,
    *,
    searchable: bool = False,
) -> dict[str, Any]:
    """Field metadata marker for protection tier classification.

    Use as Pydantic Field ``json_schema_extra`` to tag schema fields with the
    tier they are persisted under.

    Args:
        tier: The protection tier for the field.
        kind: Optional field kind, used for fingerprint normalization.
        searchable: Whether a search fingerprint is stored alongside.

    Returns:
        A dict suitable for use as Pydantic Field metadata.
    """
    metadata: dict[str, Any] = {"protection_tier": ProtectionTier(tier).value}
    if kind is not None:
        metadata["field_kind"] = FieldKind(kind).value
    if searchable:
        metadata["searchable"] = True
    return metadata
