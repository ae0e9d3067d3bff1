"""ファイル種別とスキーマのMCPリソース定義。"""

import yaml
from fastmcp import FastMCP

from adfvalidator.models.registry import FILE_TYPES
from adfvalidator.storage.schemas import SchemaStore


def register_registry_resources(mcp: FastMCP, schemas: SchemaStore) -> None:
    """レジストリ関連のMCPリソースを登録する。"""

    @mcp.resource("adf://registry/file-types")
    async def file_types() -> str:
        """サポートするADFファイル種別の一覧を取得する。

        各種別には正規ファイル名、仕様コード（ADF-NNN）、種別タグ、ティアが含まれます。
        """
        data = {"file_types": [entry.model_dump() for entry in FILE_TYPES.values()]}
        return yaml.dump(data, allow_unicode=True, default_flow_style=False, sort_keys=False)

    @mcp.resource("adf://schemas/{file_type}")
    async def json_schema(file_type: str) -> str:
        """JSON形式のADFファイルに適用されるJSON Schemaを取得する。

        file_typeには "ai-json" または "identity-json" を指定します。
        """
        return schemas.read_text(file_type)
