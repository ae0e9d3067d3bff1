"""FastMCPベースのMCPサーバーエントリポイント。"""

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from adfvalidator.config import ValidatorConfig
from adfvalidator.prompts.review import register_review_prompts
from adfvalidator.resources.registry import register_registry_resources
from adfvalidator.services.validation import ValidationService
from adfvalidator.storage.schemas import SchemaStore
from adfvalidator.tools.validation import register_validation_tools


def create_server(config: ValidatorConfig | None = None) -> FastMCP:
    """ADF Validator MCPサーバーを作成し、ツール・リソース・プロンプトを登録する。

    Args:
        config: バリデータ設定。Noneの場合はデフォルト設定を使用。

    Returns:
        設定済みのFastMCPインスタンス。
    """
    if config is None:
        config = ValidatorConfig()

    mcp = FastMCP("adf-validator")

    schemas = SchemaStore(schema_dir=config.schema_dir)
    validation_service = ValidationService(schemas=schemas)

    register_validation_tools(mcp, validation_service)
    register_registry_resources(mcp, schemas)
    register_review_prompts(mcp)

    # ヘルスチェックエンドポイント
    @mcp.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> JSONResponse:
        return JSONResponse({"status": "ok"})

    return mcp
