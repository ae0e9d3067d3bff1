"""ADF Validatorの設定管理。"""

from pathlib import Path

from pydantic_settings import BaseSettings

_PACKAGE_ROOT = Path(__file__).parent
_REPO_ROOT = _PACKAGE_ROOT.parent.parent


class ValidatorConfig(BaseSettings):
    """バリデータ設定。環境変数（ADF_ 接頭辞）から読み込み可能。"""

    model_config = {"env_prefix": "ADF_"}

    schema_dir: Path = _REPO_ROOT / "config" / "schemas"
    log_level: str = "WARNING"

    # MCPサーバー
    host: str = "0.0.0.0"
    port: int = 8000
