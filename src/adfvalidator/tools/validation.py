"""バリデーション系のMCPツール定義。"""

from typing import Any

from fastmcp import FastMCP

from adfvalidator.models.errors import AdfValidatorError
from adfvalidator.models.registry import ENTRIES_BY_TYPE
from adfvalidator.services.validation import ValidationService
from adfvalidator.validators.detector import detect_type


def register_validation_tools(mcp: FastMCP, validation_service: ValidationService) -> None:
    """バリデーション関連のMCPツールを登録する。"""

    @mcp.tool()
    async def validate_file(file_path: str, file_type: str | None = None) -> dict[str, Any]:
        """ADFファイルを検証する。

        ファイル名から種別（llms-txt, ai-json など）を判定し、仕様に基づく
        エラー（MUST違反）と警告（SHOULD違反）を返します。

        Args:
            file_path: 検証するファイルのパス。
            file_type: 種別タグの明示指定（任意）。ファイル名から判定できない場合に使用します。
        """
        try:
            result = validation_service.validate_file(file_path, file_type)
            return result.model_dump()
        except AdfValidatorError as e:
            return {"error": type(e).__name__, "message": str(e)}

    @mcp.tool()
    async def validate_content(filename: str, content: str, file_type: str | None = None) -> dict[str, Any]:
        """ファイル内容を直接検証する。

        ファイルを配置する前の下書きを検証する場合に使用します。
        種別はfilenameから判定されます。

        Args:
            filename: 想定するファイル名（例: "llms.txt"）。
            content: ファイル内容。
            file_type: 種別タグの明示指定（任意）。
        """
        result = validation_service.validate_content(filename, content, file_type)
        return result.model_dump()

    @mcp.tool()
    async def validate_directory(directory: str) -> dict[str, Any]:
        """ディレクトリ内のADFファイルをまとめて検証する。

        正規ファイル名（llms.txt, ai.txt など）を持つファイルを検証し、
        必須ティアの欠落やファイル間の整合性に関する勧告も返します。

        Args:
            directory: スキャンするディレクトリのパス。
        """
        try:
            report = validation_service.validate_directory(directory)
            return report.model_dump()
        except AdfValidatorError as e:
            return {"error": type(e).__name__, "message": str(e)}

    @mcp.tool()
    async def run_test_vectors(path: str) -> dict[str, Any]:
        """テストベクタを実行する。

        valid/ 配下のファイルは合格、invalid/ 配下のファイルは不合格となることを確認します。

        Args:
            path: valid/ と invalid/ を含むディレクトリのパス。
        """
        try:
            report = validation_service.run_test_vectors(path)
            return report.model_dump()
        except AdfValidatorError as e:
            return {"error": type(e).__name__, "message": str(e)}

    @mcp.tool()
    async def detect_file_type(filename: str) -> dict[str, Any]:
        """ファイル名からADF種別を判定する。

        Args:
            filename: 判定するファイル名。
        """
        file_type = detect_type(filename)
        if file_type is None:
            return {"filename": filename, "type": None}
        return {"filename": filename, **ENTRIES_BY_TYPE[file_type].model_dump(exclude={"filename"})}
