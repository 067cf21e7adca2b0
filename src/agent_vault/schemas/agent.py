"""Agent enrollment and profile Pydantic v2 schemas.

Every sensitive field declares the protection tier it is persisted under via
``protection_tier`` metadata. Record protection reads these declarations, so
the tier is fixed per field here and never chosen at call time.
"""

from pydantic import BaseModel, EmailStr, Field

from agent_vault.core.sensitivity import FieldKind, ProtectionTier, protection_tier

_PHONE_PATTERN = r"^\+?[\d\s-]{10,}$"
_NIN_PATTERN = r"^\d{11}$"


class AgentEnrollmentRequest(BaseModel):
    """Agent sign-up request."""

    surname: str = Field(
        min_length=1,
        max_length=100,
        json_schema_extra=protection_tier(ProtectionTier.BASIC, FieldKind.NAME),
    )
    first_name: str = Field(
        min_length=1,
        max_length=100,
        json_schema_extra=protection_tier(ProtectionTier.BASIC, FieldKind.NAME),
    )
    other_name: str | None = Field(
        default=None,
        max_length=100,
        json_schema_extra=protection_tier(ProtectionTier.BASIC, FieldKind.NAME),
    )
    email: EmailStr = Field(
        json_schema_extra=protection_tier(ProtectionTier.STRONG, FieldKind.EMAIL, searchable=True),
    )
    phone: str = Field(
        pattern=_PHONE_PATTERN,
        json_schema_extra=protection_tier(ProtectionTier.STRONG, FieldKind.PHONE, searchable=True),
    )
    nin: str = Field(
        pattern=_NIN_PATTERN,
        description="National Identification Number",
        json_schema_extra=protection_tier(ProtectionTier.HIGHEST, FieldKind.GOVERNMENT_ID),
    )
    state: str = Field(
        min_length=1,
        json_schema_extra=protection_tier(ProtectionTier.BASIC, FieldKind.LOCATION),
    )
    lga: str = Field(
        min_length=1,
        description="Local Government Area",
        json_schema_extra=protection_tier(ProtectionTier.BASIC, FieldKind.LOCATION),
    )
    address: str = Field(
        min_length=1,
        json_schema_extra=protection_tier(ProtectionTier.BASIC, FieldKind.LOCATION),
    )
    password: str = Field(
        min_length=8,
        json_schema_extra=protection_tier(ProtectionTier.SYSTEM_CODE, FieldKind.SYSTEM_CODE),
    )


class AgentProfileUpdate(BaseModel):
    """Partial profile update (all fields optional)."""

    surname: str | None = Field(
        default=None,
        max_length=100,
        json_schema_extra=protection_tier(ProtectionTier.BASIC, FieldKind.NAME),
    )
    first_name: str | None = Field(
        default=None,
        max_length=100,
        json_schema_extra=protection_tier(ProtectionTier.BASIC, FieldKind.NAME),
    )
    other_name: str | None = Field(
        default=None,
        max_length=100,
        json_schema_extra=protection_tier(ProtectionTier.BASIC, FieldKind.NAME),
    )
    email: EmailStr | None = Field(
        default=None,
        json_schema_extra=protection_tier(ProtectionTier.STRONG, FieldKind.EMAIL, searchable=True),
    )
    phone: str | None = Field(
        default=None,
        pattern=_PHONE_PATTERN,
        json_schema_extra=protection_tier(ProtectionTier.STRONG, FieldKind.PHONE, searchable=True),
    )
    state: str | None = Field(
        default=None,
        json_schema_extra=protection_tier(ProtectionTier.BASIC, FieldKind.LOCATION),
    )
    lga: str | None = Field(
        default=None,
        json_schema_extra=protection_tier(ProtectionTier.BASIC, FieldKind.LOCATION),
    )
    address: str | None = Field(
        default=None,
        json_schema_extra=protection_tier(ProtectionTier.BASIC, FieldKind.LOCATION),
    )


class AgentSignInRequest(BaseModel):
    """Sign-in with an email address or phone number."""

    identifier: str = Field(min_length=1, description="Email address or phone number")
    password: str = Field(min_length=8)
