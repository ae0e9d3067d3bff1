"""detect_typeのユニットテスト。"""

import pytest

from adfvalidator.models.registry import FILE_TYPES
from adfvalidator.validators.detector import detect_type


class TestDetectType:
    @pytest.mark.parametrize("filename", list(FILE_TYPES))
    def test_canonical_filenames(self, filename: str) -> None:
        assert detect_type(filename) == FILE_TYPES[filename].type

    def test_uses_base_name_of_path(self) -> None:
        assert detect_type("/var/www/html/identity.json") == "identity-json"

    @pytest.mark.parametrize(
        ("filename", "expected"),
        [
            ("minimal-llms.txt", "llms-txt"),
            ("missing-h1-llms.txt", "llms-txt"),
            ("custom-faq-ai.txt", "faq-ai-txt"),
            ("full-ai.txt", "ai-txt"),
            ("broken-robots-ai.txt", "robots-ai-txt"),
            ("valid-developer-ai.txt", "developer-ai-txt"),
            ("no-url-identity.json", "identity-json"),
            ("full-llm.txt", "llm-txt"),
            ("minimal-llms.html", "llms-html"),
        ],
    )
    def test_prefixed_test_vector_names(self, filename: str, expected: str) -> None:
        assert detect_type(filename) == expected

    def test_substring_match_is_permissive(self) -> None:
        assert detect_type("myfaq-ai.txt-notes") == "faq-ai-txt"

    def test_unknown_filename(self) -> None:
        assert detect_type("sitemap.xml") is None
        assert detect_type("README.md") is None
