"""ファイル種別の解決と各バリデータへの振り分けを行うサービス。"""

import logging
from collections.abc import Callable
from pathlib import Path

from adfvalidator.models.errors import DirectoryNotFoundError, SourceFileNotFoundError, SourceReadError
from adfvalidator.models.registry import FILE_TYPES
from adfvalidator.models.result import (
    UNKNOWN_TYPE,
    DirectoryReport,
    ValidationResult,
    VectorOutcome,
    VectorReport,
)
from adfvalidator.storage.schemas import SchemaStore
from adfvalidator.validators import text
from adfvalidator.validators.cross_file import cross_validate
from adfvalidator.validators.detector import detect_type
from adfvalidator.validators.json_files import validate_ai_json, validate_identity_json

logger = logging.getLogger(__name__)

TextValidator = Callable[[str, ValidationResult], None]

# 種別タグ → テキストバリデータ
_TEXT_VALIDATORS: dict[str, TextValidator] = {
    "llms-txt": text.validate_llms_txt,
    "llm-txt": text.validate_llm_txt,
    "llms-html": text.validate_llms_html,
    "ai-txt": text.validate_ai_txt,
    "brand-txt": text.validate_brand_txt,
    "faq-ai-txt": text.validate_faq_ai_txt,
    "developer-ai-txt": text.validate_developer_ai_txt,
    "robots-ai-txt": text.validate_robots_ai_txt,
}

# テストベクタディレクトリで無視するファイル
_IGNORED_VECTOR_NAMES = frozenset({"readme.md"})


class ValidationService:
    """ADFファイルのバリデーションを行う。"""

    def __init__(self, schemas: SchemaStore) -> None:
        self._schemas = schemas

    def validate_content(
        self,
        filename: str,
        content: str,
        type_override: str | None = None,
    ) -> ValidationResult:
        """読み込み済みの内容を検証する。

        Args:
            filename: 結果に記録するファイル名。種別判定にも使用する。
            content: ファイル内容。
            type_override: 種別タグの明示指定。指定時は判定をスキップする。

        Returns:
            バリデーション結果。判定できない種別はエラー1件の結果となる。
        """
        file_type = type_override or detect_type(filename)
        if not file_type:
            result = ValidationResult(file=filename, type=UNKNOWN_TYPE)
            result.error(f'Cannot detect file type from filename "{Path(filename).name}". Use --type flag.')
            return result

        result = ValidationResult(file=filename, type=file_type)
        text_validator = _TEXT_VALIDATORS.get(file_type)
        if text_validator is not None:
            text_validator(content, result)
        elif file_type == "ai-json":
            validate_ai_json(content, result, self._schemas)
        elif file_type == "identity-json":
            validate_identity_json(content, result, self._schemas)
        else:
            result.error(f"Unknown file type: {file_type}")

        logger.debug(
            "Validated %s as %s: %d error(s), %d warning(s)",
            filename,
            file_type,
            len(result.errors),
            len(result.warnings),
        )
        return result

    def validate_file(self, file_path: Path | str, type_override: str | None = None) -> ValidationResult:
        """ファイルを読み込んで検証する。

        Raises:
            SourceFileNotFoundError: ファイルが存在しない場合。
            SourceReadError: ファイルを読み込めない場合。
        """
        path = Path(file_path)
        if not path.is_file():
            raise SourceFileNotFoundError(str(file_path))
        try:
            content = path.read_bytes().decode("utf-8", errors="replace")
        except OSError as e:
            raise SourceReadError(str(file_path), str(e)) from e
        return self.validate_content(str(file_path), content, type_override)

    def validate_directory(self, directory: Path | str) -> DirectoryReport:
        """ディレクトリ内の正規ファイル名を持つADFファイルをすべて検証する。

        1件以上見つかった場合はクロスファイルチェックの結果も付与する。

        Raises:
            DirectoryNotFoundError: ディレクトリが存在しない場合。
        """
        dir_path = Path(directory)
        if not dir_path.is_dir():
            raise DirectoryNotFoundError(str(directory))

        report = DirectoryReport(directory=str(directory), searched=list(FILE_TYPES))
        for filename in FILE_TYPES:
            file_path = dir_path / filename
            if file_path.is_file():
                report.results.append(self.validate_file(file_path))

        if report.results:
            report.cross_result = cross_validate(report.results)
        else:
            logger.info("No AI Discovery Files found in %s", dir_path)
        return report

    def run_test_vectors(self, path: Path | str) -> VectorReport:
        """テストベクタ（valid/ と invalid/）を検証し、期待結果と照合する。

        valid/ 配下はすべて合格、invalid/ 配下はすべて不合格が期待値。
        存在しないサブディレクトリは空として扱う。

        Raises:
            DirectoryNotFoundError: テストベクタのルートが存在しない場合。
        """
        root = Path(path)
        if not root.is_dir():
            raise DirectoryNotFoundError(str(path))

        report = VectorReport(path=str(path))
        report.valid_vectors.extend(self._run_vector_dir(root / "valid", expected=True))
        report.invalid_vectors.extend(self._run_vector_dir(root / "invalid", expected=False))
        return report

    def _run_vector_dir(self, vector_dir: Path, expected: bool) -> list[VectorOutcome]:
        if not vector_dir.is_dir():
            return []

        outcomes: list[VectorOutcome] = []
        for file_path in sorted(vector_dir.iterdir()):
            if file_path.name.startswith(".") or file_path.name.lower() in _IGNORED_VECTOR_NAMES:
                continue
            if not file_path.is_file():
                continue
            outcome = VectorOutcome(result=self.validate_file(file_path), expected=expected)
            if outcome.unexpected:
                logger.info("Unexpected outcome for test vector %s", file_path)
            outcomes.append(outcome)
        return outcomes
