"""AI Discovery Filesのファイル種別レジストリ。"""

from types import MappingProxyType
from typing import Literal

from pydantic import BaseModel

Tier = Literal["essential", "recommended", "complete"]


class FileTypeEntry(BaseModel):
    """ファイル種別の定義。"""

    model_config = {"frozen": True}

    filename: str
    code: str
    type: str
    tier: Tier


def _entry(filename: str, code: str, type_: str, tier: Tier) -> tuple[str, FileTypeEntry]:
    return filename, FileTypeEntry(filename=filename, code=code, type=type_, tier=tier)


# 正規ファイル名 → 種別定義。挿入順がディレクトリスキャン順となる
FILE_TYPES: MappingProxyType[str, FileTypeEntry] = MappingProxyType(
    dict(
        [
            _entry("llms.txt", "ADF-001", "llms-txt", "essential"),
            _entry("llm.txt", "ADF-002", "llm-txt", "complete"),
            _entry("llms.html", "ADF-003", "llms-html", "complete"),
            _entry("ai.txt", "ADF-004", "ai-txt", "essential"),
            _entry("ai.json", "ADF-005", "ai-json", "recommended"),
            _entry("identity.json", "ADF-006", "identity-json", "recommended"),
            _entry("brand.txt", "ADF-007", "brand-txt", "recommended"),
            _entry("faq-ai.txt", "ADF-008", "faq-ai-txt", "recommended"),
            _entry("developer-ai.txt", "ADF-009", "developer-ai-txt", "complete"),
            _entry("robots-ai.txt", "ADF-010", "robots-ai-txt", "complete"),
        ]
    )
)

# 種別タグ → 種別定義
ENTRIES_BY_TYPE: MappingProxyType[str, FileTypeEntry] = MappingProxyType(
    {entry.type: entry for entry in FILE_TYPES.values()}
)

FILE_TYPE_TAGS: tuple[str, ...] = tuple(ENTRIES_BY_TYPE)


def entries_for_tier(tier: Tier) -> list[FileTypeEntry]:
    """指定ティアに属する種別定義をレジストリ順に返す。"""
    return [entry for entry in FILE_TYPES.values() if entry.tier == tier]
