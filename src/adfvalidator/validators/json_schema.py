"""JSON Schema 2020-12 のサブセットを評価する軽量バリデータ。

対応キーワード: oneOf, $ref ($defs), type, const, enum, minLength, pattern,
required, properties, additionalProperties(false), minItems, items。
"""

import json
import re
from functools import lru_cache
from typing import Any

from adfvalidator.models.errors import InvalidSchemaError
from adfvalidator.models.result import SchemaError

ROOT_PATH = "(root)"
_DEFS_PREFIX = "#/$defs/"


def json_type_name(value: Any) -> str:
    """Pythonの値に対応するJSON型名を返す。"""
    # boolはintのサブクラスのため先に判定する
    if isinstance(value, bool):
        return "boolean"
    if value is None:
        return "null"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, list):
        return "array"
    if isinstance(value, str):
        return "string"
    if isinstance(value, int | float):
        return "number"
    return type(value).__name__


def _is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def _json_equal(left: Any, right: Any) -> bool:
    """JSON値として等しいかを判定する（True と 1 は区別する）。"""
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    return bool(left == right)


def _display(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def _child_path(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


@lru_cache(maxsize=256)
def _compile_pattern(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidSchemaError(f'Invalid pattern "{pattern}": {e}') from e


def validate_json_schema(
    data: Any,
    schema: Any,
    root_schema: dict[str, Any] | None = None,
    path: str = "",
) -> list[SchemaError]:
    """データをスキーマに照らして検証し、違反のリストを返す。

    Args:
        data: 検証対象のJSON値。
        schema: 適用するスキーマ（サブスキーマ）。
        root_schema: $ref解決に使うルートスキーマ。Noneの場合はschema自身。
        path: 診断用のフィールドパス。ルートは空文字列。

    Returns:
        検出されたSchemaErrorのリスト。問題がなければ空リスト。

    Raises:
        InvalidSchemaError: pattern がコンパイルできない場合。
    """
    if not isinstance(schema, dict):
        return []
    if root_schema is None:
        root_schema = schema

    here = path or ROOT_PATH
    errors: list[SchemaError] = []

    # oneOf: いずれか1つ以上のサブスキーマに適合すればよい。個々の違反は捨てる
    if "oneOf" in schema:
        matched = any(
            not validate_json_schema(data, sub, root_schema, path) for sub in schema["oneOf"]
        )
        if not matched:
            return [SchemaError(path=here, message="Value does not match any oneOf schema")]

    if "$ref" in schema:
        ref = schema["$ref"]
        resolved = None
        if isinstance(ref, str) and ref.startswith(_DEFS_PREFIX):
            resolved = root_schema.get("$defs", {}).get(ref[len(_DEFS_PREFIX) :])
        if resolved is None:
            return [SchemaError(path=here, message=f"Unresolved $ref: {ref}")]
        return validate_json_schema(data, resolved, root_schema, path)

    declared_type = schema.get("type")
    actual_type = json_type_name(data)
    if declared_type is not None:
        if declared_type == "integer":
            if not _is_integer(data):
                return [SchemaError(path=here, message=f"Expected integer, got {actual_type}")]
        elif declared_type != actual_type:
            return [SchemaError(path=here, message=f"Expected {declared_type}, got {actual_type}")]

    if "const" in schema and not _json_equal(data, schema["const"]):
        errors.append(
            SchemaError(
                path=here,
                message=f'Expected constant "{_display(schema["const"])}", got "{_display(data)}"',
            )
        )

    if "enum" in schema and not any(_json_equal(data, option) for option in schema["enum"]):
        options = ", ".join(_display(option) for option in schema["enum"])
        errors.append(SchemaError(path=here, message=f'Value "{_display(data)}" not in enum [{options}]'))

    if isinstance(data, str):
        min_length = schema.get("minLength")
        if min_length is not None and len(data) < min_length:
            errors.append(
                SchemaError(path=here, message=f"String length {len(data)} < minLength {min_length}")
            )
        pattern = schema.get("pattern")
        if pattern and not _compile_pattern(pattern).search(data):
            errors.append(SchemaError(path=here, message=f'String does not match pattern "{pattern}"'))

    if declared_type in ("object", None) and isinstance(data, dict):
        errors.extend(_validate_object(data, schema, root_schema, path))

    if declared_type in ("array", None) and isinstance(data, list):
        errors.extend(_validate_array(data, schema, root_schema, path))

    return errors


def _validate_object(
    data: dict[str, Any],
    schema: dict[str, Any],
    root_schema: dict[str, Any],
    path: str,
) -> list[SchemaError]:
    errors: list[SchemaError] = []
    properties: dict[str, Any] = schema.get("properties") or {}

    for key in schema.get("required", []):
        if key not in data:
            errors.append(
                SchemaError(path=_child_path(path, key), message=f'Required property "{key}" is missing')
            )

    for key, prop_schema in properties.items():
        if key in data:
            errors.extend(validate_json_schema(data[key], prop_schema, root_schema, _child_path(path, key)))

    if schema.get("additionalProperties") is False and properties:
        for key in data:
            if key not in properties:
                errors.append(
                    SchemaError(
                        path=_child_path(path, key),
                        message=f'Additional property "{key}" is not allowed',
                    )
                )

    return errors


def _validate_array(
    data: list[Any],
    schema: dict[str, Any],
    root_schema: dict[str, Any],
    path: str,
) -> list[SchemaError]:
    errors: list[SchemaError] = []

    min_items = schema.get("minItems")
    if min_items is not None and len(data) < min_items:
        errors.append(
            SchemaError(path=path or ROOT_PATH, message=f"Array length {len(data)} < minItems {min_items}")
        )

    items_schema = schema.get("items")
    if items_schema:
        for index, item in enumerate(data):
            errors.extend(validate_json_schema(item, items_schema, root_schema, f"{path}[{index}]"))

    return errors
