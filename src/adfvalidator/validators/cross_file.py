"""複数ファイルの検証結果に対するクロスファイル整合性チェック。"""

from collections.abc import Iterable

from adfvalidator.models.registry import ENTRIES_BY_TYPE, entries_for_tier
from adfvalidator.models.result import CROSS_VALIDATION_TYPE, ValidationResult

CROSS_FILE_NAME = "(cross-file)"


def _label(file_type: str) -> str:
    entry = ENTRIES_BY_TYPE[file_type]
    return f"{entry.filename} ({entry.code})"


def cross_validate(results: Iterable[ValidationResult]) -> ValidationResult:
    """検証結果の集合からクロスファイルの勧告を生成する。

    勧告はすべて警告であり、実行全体の合否には影響しない。
    """
    cross_result = ValidationResult(file=CROSS_FILE_NAME, type=CROSS_VALIDATION_TYPE)
    present = {r.type for r in results}

    for entry in entries_for_tier("essential"):
        if entry.type not in present:
            cross_result.warn(f"Essential tier: {_label(entry.type)} is missing")

    if {"ai-txt", "ai-json"} <= present:
        cross_result.warn(
            "Both ai.txt and ai.json present — ensure permissions are consistent (manual check required)"
        )

    # llms.txt から組織名を確実に抽出できないため、確認を促すのみ
    if {"llms-txt", "identity-json"} <= present:
        cross_result.warn(
            "Both llms.txt and identity.json present — "
            "ensure organisation name is consistent (manual check required)"
        )

    return cross_result
