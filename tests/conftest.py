"""テスト共通フィクスチャ。"""

from pathlib import Path

import pytest

from adfvalidator.config import ValidatorConfig
from adfvalidator.services.validation import ValidationService
from adfvalidator.storage.schemas import SchemaStore

_REPO_ROOT = Path(__file__).parent.parent


@pytest.fixture
def schema_dir() -> Path:
    """同梱のJSON Schemaディレクトリ。"""
    return _REPO_ROOT / "config" / "schemas"


@pytest.fixture
def fixtures_dir() -> Path:
    """テスト用ADFファイルのディレクトリ。"""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def schema_store(schema_dir: Path) -> SchemaStore:
    """同梱スキーマを読み込むSchemaStore。"""
    return SchemaStore(schema_dir=schema_dir)


@pytest.fixture
def empty_schema_store(tmp_path: Path) -> SchemaStore:
    """スキーマが1つも存在しないSchemaStore。"""
    return SchemaStore(schema_dir=tmp_path / "no-schemas")


@pytest.fixture
def validation_service(schema_store: SchemaStore) -> ValidationService:
    """テスト用ValidationService。"""
    return ValidationService(schemas=schema_store)


@pytest.fixture
def validator_config(schema_dir: Path) -> ValidatorConfig:
    """テスト用ValidatorConfig。"""
    return ValidatorConfig(schema_dir=schema_dir)
