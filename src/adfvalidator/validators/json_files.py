"""JSON形式のADFファイル（ai.json / identity.json）のバリデーション。"""

import json
from typing import Any

from adfvalidator.models.errors import InvalidSchemaError, SchemaLoadError
from adfvalidator.models.result import ValidationResult
from adfvalidator.storage.schemas import SchemaStore
from adfvalidator.validators.json_schema import validate_json_schema

# スキーマの有無に関係なく必須とするプロパティ
_AI_JSON_REQUIRED = ("permissions", "restrictions", "name", "url")
_IDENTITY_JSON_REQUIRED = ("name", "url", "type", "description")

# 形の崩れたスキーマ（"minLength": "1" や自己参照する $ref など）は評価中にこれらを送出する
_MALFORMED_SCHEMA_ERRORS = (TypeError, AttributeError, RecursionError)


def _parse_object(content: str, result: ValidationResult) -> dict[str, Any] | None:
    """JSONをパースし、ルートがオブジェクトであれば返す。"""
    try:
        data = json.loads(content)
    except (json.JSONDecodeError, RecursionError) as e:
        result.error(f"Invalid JSON: {e}")
        return None

    if not isinstance(data, dict):
        result.error("Root value MUST be a JSON object")
        return None
    return data


def _apply_schema(data: dict[str, Any], file_type: str, result: ValidationResult, schemas: SchemaStore) -> None:
    """スキーマが存在すれば適用する。読み込みや評価に失敗した場合は警告に留める。"""
    try:
        schema = schemas.load(file_type)
        if schema is None:
            return
        schema_errors = validate_json_schema(data, schema, schema)
    except (SchemaLoadError, InvalidSchemaError, *_MALFORMED_SCHEMA_ERRORS) as e:
        result.warn(f"Could not load JSON Schema: {e}")
        return
    result.add_schema_errors(schema_errors)


def _require(data: dict[str, Any], keys: tuple[str, ...], result: ValidationResult) -> None:
    # null は値が存在するものとして扱う。キーが無い場合のみ欠落
    for key in keys:
        if key not in data:
            result.error(f'Property "{key}" is REQUIRED')


def validate_ai_json(content: str, result: ValidationResult, schemas: SchemaStore) -> None:
    """ai.json (ADF-005) を検証する。"""
    data = _parse_object(content, result)
    if data is None:
        return

    _apply_schema(data, "ai-json", result, schemas)
    _require(data, _AI_JSON_REQUIRED, result)
    if data.get("permissions") == []:
        result.error('Property "permissions" MUST NOT be empty')


def validate_identity_json(content: str, result: ValidationResult, schemas: SchemaStore) -> None:
    """identity.json (ADF-006) を検証する。"""
    data = _parse_object(content, result)
    if data is None:
        return

    _apply_schema(data, "identity-json", result, schemas)
    _require(data, _IDENTITY_JSON_REQUIRED, result)
