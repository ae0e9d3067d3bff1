"""ファイル名からADFファイル種別を判定する。"""

from pathlib import PurePath

from adfvalidator.models.registry import FILE_TYPES, FileTypeEntry

# 長いファイル名から順に照合する（faq-ai.txt を ai.txt より先に判定）
_ENTRIES_LONGEST_FIRST: tuple[tuple[str, FileTypeEntry], ...] = tuple(
    sorted(FILE_TYPES.items(), key=lambda item: len(item[0]), reverse=True)
)


def detect_type(filename: str) -> str | None:
    """ファイル名からADF種別タグを判定する。

    正規ファイル名との完全一致を最優先し、一致しない場合は
    テストベクタの命名規則（"minimal-llms.txt" など）に合わせて
    ファイル名長の降順で接尾辞・部分一致を試みる。

    Args:
        filename: ファイル名またはファイルパス。

    Returns:
        種別タグ。判定できない場合はNone。
    """
    base = PurePath(filename).name

    entry = FILE_TYPES.get(base)
    if entry is not None:
        return entry.type

    for known_name, candidate in _ENTRIES_LONGEST_FIRST:
        if base.endswith(f"-{known_name}") or known_name in base:
            return candidate.type

    return None
