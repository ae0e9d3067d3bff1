"""ADF Validatorのカスタム例外クラス。"""


class AdfValidatorError(Exception):
    """ADF Validatorの基底例外クラス。"""


class SourceFileNotFoundError(AdfValidatorError):
    """検証対象ファイルが見つからない場合の例外。"""

    def __init__(self, file_path: str) -> None:
        super().__init__(f"File not found: {file_path}")
        self.file_path = file_path


class SourceReadError(AdfValidatorError):
    """検証対象ファイルの読み込みに失敗した場合の例外。"""

    def __init__(self, file_path: str, reason: str) -> None:
        super().__init__(f"Could not read {file_path}: {reason}")
        self.file_path = file_path
        self.reason = reason


class DirectoryNotFoundError(AdfValidatorError):
    """スキャン対象ディレクトリが見つからない場合の例外。"""

    def __init__(self, directory: str) -> None:
        super().__init__(f"Directory not found: {directory}")
        self.directory = directory


class SchemaLoadError(AdfValidatorError):
    """JSON Schemaファイルの読み込み・パースに失敗した場合の例外。"""

    def __init__(self, schema_path: str, reason: str) -> None:
        super().__init__(reason)
        self.schema_path = schema_path
        self.reason = reason


class InvalidSchemaError(AdfValidatorError):
    """JSON Schema自体が不正で評価できない場合の例外。"""
