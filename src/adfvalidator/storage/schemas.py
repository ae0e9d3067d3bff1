"""ローカルファイルシステム上のJSON Schemaを読み込むストア。"""

import json
import logging
from pathlib import Path
from typing import Any

from adfvalidator.models.errors import SchemaLoadError

logger = logging.getLogger(__name__)

# JSON Schemaを持つファイル種別
SCHEMA_TYPES: tuple[str, ...] = ("ai-json", "identity-json")


def schema_filename(file_type: str) -> str:
    return f"{file_type}.schema.json"


class SchemaStore:
    """スキーマディレクトリからJSON Schemaを読み込み、パス単位でキャッシュする。

    読み込みに失敗したスキーマはキャッシュせず、次回呼び出し時に再試行する。
    """

    def __init__(self, schema_dir: Path) -> None:
        self._schema_dir = schema_dir
        self._cache: dict[Path, dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def schema_path(self, file_type: str) -> Path:
        # ディレクトリトラバーサル防止
        name = schema_filename(file_type)
        if Path(name).name != name:
            raise SchemaLoadError(name, f"Invalid file type: {file_type}")
        return self._schema_dir / name

    def load(self, file_type: str) -> dict[str, Any] | None:
        """ファイル種別に対応するスキーマを返す。

        Returns:
            スキーマ文書。スキーマファイルが存在しない場合はNone。

        Raises:
            SchemaLoadError: 読み込みまたはJSONパースに失敗した場合。
        """
        path = self.schema_path(file_type)
        cached = self._cache.get(path)
        if cached is not None:
            return cached

        if not path.is_file():
            return None

        logger.debug("Loading JSON Schema: %s", path)
        try:
            schema = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Could not load JSON Schema %s: %s", path, e)
            raise SchemaLoadError(str(path), str(e)) from e

        if not isinstance(schema, dict):
            raise SchemaLoadError(str(path), "Schema root MUST be a JSON object")

        self._cache[path] = schema
        return schema

    def read_text(self, file_type: str) -> str:
        """スキーマファイルの生テキストを返す。

        Raises:
            SchemaLoadError: スキーマファイルが存在しない、または読み込めない場合。
        """
        path = self.schema_path(file_type)
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise SchemaLoadError(str(path), f"Schema not available for {file_type}: {e}") from e
