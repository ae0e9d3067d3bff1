"""ADFファイルレビューのMCPプロンプト定義。"""

from fastmcp import FastMCP


def register_review_prompts(mcp: FastMCP) -> None:
    """レビュー系のMCPプロンプトを登録する。"""

    @mcp.prompt()
    def review_discovery_files(directory: str) -> str:
        """サイトのAI Discovery Filesをレビューする手順を提示する。"""
        return (
            f"# AI Discovery Files レビュー: {directory}\n\n"
            "## 1. 検証\n\n"
            f"1. `validate_directory` ツールを directory=`{directory}` で実行してください。\n"
            "2. 結果の `results` に各ファイルの検証結果、`cross_result` にファイル間の勧告が含まれます。\n\n"
            "## 2. 結果の読み方\n\n"
            "- `errors` は仕様の MUST 違反です。1件でもあればそのファイルは不合格（`valid: false`）です。\n"
            "- `warnings` は SHOULD 違反です。合否には影響しませんが、改善を提案してください。\n"
            "- `cross_result` の警告（必須ティアの欠落、ai.txt と ai.json の整合性など）は"
            "手動確認が必要な勧告です。\n\n"
            "## 3. 修正案\n\n"
            "1. エラーを優先し、ファイルごとに修正案を提示してください。\n"
            "2. 修正後の内容は `validate_content` ツールで再検証してから利用者に提示してください。\n"
            "3. JSONファイルの期待構造は `adf://schemas/ai-json` と `adf://schemas/identity-json` "
            "リソースで確認できます。\n"
        )
