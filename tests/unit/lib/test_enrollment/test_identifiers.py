"""Unit tests for agent ID and access code generation."""

from datetime import UTC, datetime

import pytest

from agent_vault.lib.enrollment import generate_access_code, generate_agent_id
from agent_vault.lib.enrollment.identifiers import ACCESS_CODE_ALPHABET


class TestGenerateAgentId:
    """Tests for agent field IDs."""

    def test_format(self) -> None:
        """ID is the prefix, two-digit year and random suffix, 15 characters long."""
        agent_id = generate_agent_id(datetime(2025, 3, 1, tzinfo=UTC))
        assert len(agent_id) == 15
        assert agent_id.startswith("JCGNIMCAC25")
        assert agent_id[11:].isalnum()
        assert agent_id[11:] == agent_id[11:].upper()

    def test_defaults_to_current_year(self) -> None:
        year = datetime.now(UTC).strftime("%y")
        assert generate_agent_id().startswith(f"JCGNIMCAC{year}")

    def test_random_suffix(self) -> None:
        assert len({generate_agent_id() for _ in range(20)}) > 1


class TestGenerateAccessCode:
    """Tests for access codes."""

    def test_random_length_in_range(self) -> None:
        for _ in range(50):
            assert 8 <= len(generate_access_code()) <= 12

    @pytest.mark.parametrize("length", [8, 10, 12])
    def test_explicit_length(self, length: int) -> None:
        assert len(generate_access_code(length)) == length

    def test_unambiguous_alphabet(self) -> None:
        """Codes never contain 0, O, 1 or I."""
        code = "".join(generate_access_code(12) for _ in range(20))
        assert set(code) <= set(ACCESS_CODE_ALPHABET)
        assert not set(code) & set("0O1I")

    @pytest.mark.parametrize("length", [0, 7, 13])
    def test_length_out_of_range(self, length: int) -> None:
        with pytest.raises(ValueError, match="between 8 and 12"):
            generate_access_code(length)
