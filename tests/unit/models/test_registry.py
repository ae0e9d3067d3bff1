"""ファイル種別レジストリのユニットテスト。"""

import pytest
from pydantic import ValidationError

from adfvalidator.models.registry import ENTRIES_BY_TYPE, FILE_TYPES, FileTypeEntry, entries_for_tier


class TestFileTypeRegistry:
    def test_registry_has_ten_entries(self) -> None:
        assert len(FILE_TYPES) == 10

    @pytest.mark.parametrize(
        ("filename", "code", "type_", "tier"),
        [
            ("llms.txt", "ADF-001", "llms-txt", "essential"),
            ("llm.txt", "ADF-002", "llm-txt", "complete"),
            ("llms.html", "ADF-003", "llms-html", "complete"),
            ("ai.txt", "ADF-004", "ai-txt", "essential"),
            ("ai.json", "ADF-005", "ai-json", "recommended"),
            ("identity.json", "ADF-006", "identity-json", "recommended"),
            ("brand.txt", "ADF-007", "brand-txt", "recommended"),
            ("faq-ai.txt", "ADF-008", "faq-ai-txt", "recommended"),
            ("developer-ai.txt", "ADF-009", "developer-ai-txt", "complete"),
            ("robots-ai.txt", "ADF-010", "robots-ai-txt", "complete"),
        ],
    )
    def test_registry_entry(self, filename: str, code: str, type_: str, tier: str) -> None:
        entry = FILE_TYPES[filename]
        assert entry.filename == filename
        assert entry.code == code
        assert entry.type == type_
        assert entry.tier == tier

    def test_registry_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            FILE_TYPES["new.txt"] = FILE_TYPES["llms.txt"]  # type: ignore[index]

    def test_entry_is_frozen(self) -> None:
        with pytest.raises(ValidationError):
            FILE_TYPES["llms.txt"].tier = "complete"  # type: ignore[misc]

    def test_entries_by_type(self) -> None:
        assert ENTRIES_BY_TYPE["faq-ai-txt"].filename == "faq-ai.txt"

    def test_essential_tier(self) -> None:
        assert [e.type for e in entries_for_tier("essential")] == ["llms-txt", "ai-txt"]

    def test_invalid_tier_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FileTypeEntry(filename="x.txt", code="ADF-999", type="x", tier="optional")  # type: ignore[arg-type]
