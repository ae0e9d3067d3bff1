"""バリデーション結果関連のデータモデル。"""

from pydantic import BaseModel, Field, computed_field

CROSS_VALIDATION_TYPE = "cross-validation"
UNKNOWN_TYPE = "unknown"


class Issue(BaseModel):
    """エラーまたは警告の個別レコード。"""

    message: str
    line: int | None = Field(default=None, ge=1)

    def render(self, label: str) -> str:
        location = f" (line {self.line})" if self.line else ""
        return f"  {label} {self.message}{location}"


class SchemaError(BaseModel):
    """JSON Schemaバリデーションで検出された違反。"""

    path: str
    message: str


class ValidationResult(BaseModel):
    """1ファイル分のバリデーション結果。

    errorsが空の場合のみ valid となる。warningsは妥当性に影響しない。
    """

    file: str
    type: str
    errors: list[Issue] = Field(default_factory=list)
    warnings: list[Issue] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def valid(self) -> bool:
        return not self.errors

    def error(self, message: str, line: int | None = None) -> None:
        """仕様違反（MUST）を記録する。"""
        self.errors.append(Issue(message=message, line=line))

    def warn(self, message: str, line: int | None = None) -> None:
        """推奨事項違反（SHOULD）を記録する。"""
        self.warnings.append(Issue(message=message, line=line))

    def add_schema_errors(self, schema_errors: list[SchemaError]) -> None:
        for err in schema_errors:
            self.error(f"Schema: {err.path} — {err.message}")

    def render(self) -> str:
        """人間向けのテキスト表現を返す。"""
        status = "PASS" if self.valid else "FAIL"
        parts = [f"[{status}] {self.file} ({self.type})"]
        parts.extend(e.render("ERROR:") for e in self.errors)
        parts.extend(w.render("WARN: ") for w in self.warnings)
        return "\n".join(parts)

    def __str__(self) -> str:
        return self.render()


class DirectoryReport(BaseModel):
    """ディレクトリスキャンの集計結果。"""

    directory: str
    searched: list[str]
    results: list[ValidationResult] = Field(default_factory=list)
    cross_result: ValidationResult | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        return len(self.results)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.valid)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def valid(self) -> bool:
        # クロスファイル結果は警告のみのため判定に含めない
        return all(r.valid for r in self.results)


class VectorOutcome(BaseModel):
    """テストベクタ1件の判定結果。"""

    result: ValidationResult
    expected: bool

    @computed_field  # type: ignore[prop-decorator]
    @property
    def unexpected(self) -> bool:
        return self.result.valid != self.expected


class VectorReport(BaseModel):
    """テストベクタ実行の集計結果。"""

    path: str
    valid_vectors: list[VectorOutcome] = Field(default_factory=list)
    invalid_vectors: list[VectorOutcome] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def all_passed(self) -> bool:
        return not any(o.unexpected for o in [*self.valid_vectors, *self.invalid_vectors])
