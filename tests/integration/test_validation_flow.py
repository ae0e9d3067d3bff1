"""バリデーションフローのMCPプロトコル経由統合テスト。"""

import json
from pathlib import Path

import pytest
from fastmcp import Client

from adfvalidator.config import ValidatorConfig
from adfvalidator.server import create_server


@pytest.fixture
def mcp_server(validator_config: ValidatorConfig) -> object:
    """テスト用MCPサーバー。"""
    return create_server(validator_config)


def parse_tool_result(result: object) -> dict:
    """CallToolResultからJSONデータを抽出する。"""
    content = result.content  # type: ignore[union-attr]
    assert len(content) > 0
    return json.loads(content[0].text)  # type: ignore[union-attr]


class TestValidationToolsViaMCP:
    async def test_validate_file(self, mcp_server: object, fixtures_dir: Path) -> None:
        async with Client(mcp_server) as client:  # type: ignore[arg-type]
            result = await client.call_tool("validate_file", {"file_path": str(fixtures_dir / "site" / "llms.txt")})
            data = parse_tool_result(result)
            assert data["type"] == "llms-txt"
            assert data["valid"] is True

    async def test_validate_missing_file_returns_error(self, mcp_server: object, tmp_path: Path) -> None:
        async with Client(mcp_server) as client:  # type: ignore[arg-type]
            result = await client.call_tool("validate_file", {"file_path": str(tmp_path / "ai.txt")})
            data = parse_tool_result(result)
            assert data["error"] == "SourceFileNotFoundError"

    async def test_validate_content(self, mcp_server: object) -> None:
        async with Client(mcp_server) as client:  # type: ignore[arg-type]
            result = await client.call_tool(
                "validate_content",
                {"filename": "faq-ai.txt", "content": "Q: one?\nA: yes\nQ: two?"},
            )
            data = parse_tool_result(result)
            assert data["valid"] is False
            assert data["errors"] == [
                {"message": "Question at line 3 has no corresponding answer (A:)", "line": 3}
            ]

    async def test_validate_content_with_type(self, mcp_server: object) -> None:
        async with Client(mcp_server) as client:  # type: ignore[arg-type]
            result = await client.call_tool(
                "validate_content",
                {"filename": "draft.json", "content": "{}", "file_type": "identity-json"},
            )
            data = parse_tool_result(result)
            assert data["type"] == "identity-json"
            assert 'Property "name" is REQUIRED' in [e["message"] for e in data["errors"]]

    async def test_validate_directory(self, mcp_server: object, fixtures_dir: Path) -> None:
        async with Client(mcp_server) as client:  # type: ignore[arg-type]
            result = await client.call_tool("validate_directory", {"directory": str(fixtures_dir / "site")})
            data = parse_tool_result(result)
            assert data["total"] == 10
            assert data["passed"] == 10
            assert data["cross_result"]["type"] == "cross-validation"

    async def test_validate_missing_directory(self, mcp_server: object, tmp_path: Path) -> None:
        async with Client(mcp_server) as client:  # type: ignore[arg-type]
            result = await client.call_tool("validate_directory", {"directory": str(tmp_path / "nope")})
            data = parse_tool_result(result)
            assert data["error"] == "DirectoryNotFoundError"

    async def test_run_test_vectors(self, mcp_server: object, fixtures_dir: Path) -> None:
        async with Client(mcp_server) as client:  # type: ignore[arg-type]
            result = await client.call_tool("run_test_vectors", {"path": str(fixtures_dir / "test-vectors")})
            data = parse_tool_result(result)
            assert data["all_passed"] is True
            assert len(data["invalid_vectors"]) == 3

    async def test_detect_file_type(self, mcp_server: object) -> None:
        async with Client(mcp_server) as client:  # type: ignore[arg-type]
            result = await client.call_tool("detect_file_type", {"filename": "custom-faq-ai.txt"})
            data = parse_tool_result(result)
            assert data == {
                "filename": "custom-faq-ai.txt",
                "code": "ADF-008",
                "type": "faq-ai-txt",
                "tier": "recommended",
            }


class TestRegistryResourcesViaMCP:
    async def test_file_types_resource(self, mcp_server: object) -> None:
        async with Client(mcp_server) as client:  # type: ignore[arg-type]
            contents = await client.read_resource("adf://registry/file-types")
            text = contents[0].text  # type: ignore[union-attr]
            assert "ADF-010" in text
            assert "robots-ai-txt" in text

    async def test_schema_resource(self, mcp_server: object) -> None:
        async with Client(mcp_server) as client:  # type: ignore[arg-type]
            contents = await client.read_resource("adf://schemas/ai-json")
            schema = json.loads(contents[0].text)  # type: ignore[union-attr]
            assert "permissions" in schema["required"]


class TestReviewPromptViaMCP:
    async def test_review_prompt(self, mcp_server: object) -> None:
        async with Client(mcp_server) as client:  # type: ignore[arg-type]
            result = await client.get_prompt("review_discovery_files", {"directory": "/var/www/html"})
            text = result.messages[0].content.text  # type: ignore[union-attr]
            assert "validate_directory" in text
            assert "/var/www/html" in text
