"""Record-level protection driven by schema field metadata.

Schemas declare each sensitive field's tier with
:func:`agent_vault.core.sensitivity.protection_tier`. These helpers read that
metadata and apply the engine to a whole record, emitting a ``{field}_hash``
fingerprint column next to every searchable field.
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from agent_vault.core.sensitivity import FieldKind, ProtectionTier
from agent_vault.lib.protection.engine import FieldProtectionEngine
from agent_vault.lib.protection.errors import UnsupportedOperationError
from agent_vault.lib.protection.fingerprint import is_email_like

HASH_SUFFIX = "_hash"


@dataclass(frozen=True)
class FieldPolicy:
    """Declared protection for one schema field."""

    name: str
    tier: ProtectionTier
    kind: FieldKind | None = None
    searchable: bool = False

    @property
    def hash_column(self) -> str:
        return f"{self.name}{HASH_SUFFIX}"


def field_policies(schema_class: type[BaseModel]) -> dict[str, FieldPolicy]:
    """Collect the protection policies declared on a Pydantic schema.

    Fields without ``protection_tier`` metadata are not included.

    Args:
        schema_class: The Pydantic schema class with field metadata.

    Returns:
        Mapping of field name to its FieldPolicy.

    Raises:
        UnsupportedOperationError: If a ``highest`` tier field is marked
            searchable.
    """
    policies: dict[str, FieldPolicy] = {}
    for field_name, field_info in schema_class.model_fields.items():
        extra = field_info.json_schema_extra
        metadata = extra if isinstance(extra, dict) else {}
        tier = metadata.get("protection_tier")
        if tier is None:
            continue

        kind = metadata.get("field_kind")
        policy = FieldPolicy(
            name=field_name,
            tier=ProtectionTier(tier),
            kind=FieldKind(kind) if kind is not None else None,
            searchable=bool(metadata.get("searchable", False)),
        )
        if policy.searchable and policy.tier is ProtectionTier.HIGHEST:
            msg = f"Field '{field_name}' is under the highest tier and cannot be searchable"
            raise UnsupportedOperationError(msg)
        policies[field_name] = policy
    return policies


def protect_record(
    engine: FieldProtectionEngine,
    data: dict[str, Any],
    schema_class: type[BaseModel],
) -> dict[str, Any]:
    """Protect every declared field of a record before persistence.

    Undeclared fields pass through unchanged and ``None`` values are skipped.
    Searchable fields also get a ``{field}_hash`` fingerprint column.

    Args:
        engine: The protection engine.
        data: Plaintext record, keyed by schema field name.
        schema_class: Schema declaring the protection tiers.

    Returns:
        The record with protected values and fingerprint columns.
    """
    policies = field_policies(schema_class)
    stored: dict[str, Any] = {}
    for name, value in data.items():
        policy = policies.get(name)
        if policy is None:
            stored[name] = value
            continue
        if value is None:
            continue

        stored[name] = engine.protect(value, policy.tier)
        if policy.searchable:
            stored[policy.hash_column] = engine.fingerprint(value, policy.kind)
    return stored


def reveal_record(
    engine: FieldProtectionEngine,
    stored: dict[str, Any],
    schema_class: type[BaseModel],
) -> dict[str, Any]:
    """Decrypt the reversible fields of a stored record for display.

    ``system-code`` fields and fingerprint columns are dropped, since neither
    has a recoverable plaintext.

    Args:
        engine: The protection engine.
        stored: Record as persisted by :func:`protect_record`.
        schema_class: Schema declaring the protection tiers.

    Returns:
        The record with plaintext values.
    """
    policies = field_policies(schema_class)
    hash_columns = {p.hash_column for p in policies.values() if p.searchable}
    revealed: dict[str, Any] = {}
    for name, value in stored.items():
        if name in hash_columns:
            continue
        policy = policies.get(name)
        if policy is None:
            revealed[name] = value
        elif policy.tier.reversible:
            revealed[name] = engine.unprotect(value, policy.tier) if value is not None else None
    return revealed


def lookup_fingerprints(engine: FieldProtectionEngine, identifier: str) -> set[str]:
    """Fingerprints to query when an agent signs in with an email or phone.

    Args:
        engine: The protection engine.
        identifier: The submitted email address or phone number.

    Returns:
        Fingerprints matching the ``email_hash`` or ``phone_hash`` columns.
    """
    kind = FieldKind.EMAIL if is_email_like(identifier) else FieldKind.PHONE
    fingerprint = engine.fingerprint(identifier, kind)
    return {fingerprint} if fingerprint else set()
