"""プレーンテキスト形式のADFファイルに対する構造バリデーション。

各バリデータは生テキストと結果オブジェクトを受け取り、仕様の MUST 違反を
エラー、SHOULD 違反を警告として記録する。行番号は1始まり。
"""

import re

from adfvalidator.models.result import ValidationResult

EMPTY_FILE_MESSAGE = "File is empty"

_LLMS_RECOMMENDED_SECTIONS = ("about", "services", "contact")

_DEVELOPER_KEYWORDS = (
    "api",
    "stack",
    "framework",
    "language",
    "architecture",
    "endpoint",
    "technical",
    "developer",
)

_ROBOTS_KEYWORDS = (
    "crawler",
    "bot",
    "agent",
    "gptbot",
    "claudebot",
    "googlebot",
    "allow",
    "disallow",
    "block",
)

_HTML_TAG_RE = re.compile(r"<html[^>]*>", re.IGNORECASE)
_TITLE_RE = re.compile(r"<title>[^<]+</title>", re.IGNORECASE)
_H1_RE = re.compile(r"<h1[^>]*>[^<]+", re.IGNORECASE)
_META_DESCRIPTION_RE = re.compile(r"""<meta[^>]*name=["']description["'][^>]*>""", re.IGNORECASE)


def _first_non_empty(lines: list[str]) -> int | None:
    """最初の空でない行のインデックス（0始まり）を返す。"""
    for index, line in enumerate(lines):
        if line.strip():
            return index
    return None


def _has_blockquote(lines: list[str]) -> bool:
    return any(line.strip().startswith("> ") for line in lines)


def _is_section_header(trimmed: str) -> bool:
    return trimmed.startswith("[") and trimmed.endswith("]")


def _has_section(lines: list[str], name: str) -> bool:
    header = f"[{name}]"
    return any(line.strip().lower() == header for line in lines)


def _section_lines(lines: list[str], name: str) -> list[str]:
    """指定セクションに属する行を返す。

    セクションはヘッダ行の次から、次の [...] 行の直前までとする。
    同名セクションが複数ある場合はすべて連結する。
    """
    header = f"[{name}]"
    in_section = False
    collected: list[str] = []
    for line in lines:
        trimmed = line.strip().lower()
        if trimmed == header:
            in_section = True
            continue
        if _is_section_header(trimmed):
            in_section = False
            continue
        if in_section:
            collected.append(line)
    return collected


def validate_llms_txt(content: str, result: ValidationResult) -> None:
    """llms.txt (ADF-001) を検証する。"""
    lines = content.split("\n")

    first = _first_non_empty(lines)
    if first is None:
        result.error(EMPTY_FILE_MESSAGE)
        return

    first_line = lines[first].strip()
    if first_line == "#":
        result.error('H1 heading MUST contain text after the "# " prefix', first + 1)
    elif not first_line.startswith("# "):
        result.error("File MUST begin with a Markdown H1 heading (# Title)", first + 1)

    if not _has_blockquote(lines):
        result.error("File MUST contain a blockquote description (> ...) immediately after the H1")

    h2_titles = [line.strip()[3:].lower() for line in lines if line.strip().startswith("## ")]
    if not h2_titles:
        result.warn("File SHOULD contain at least one H2 section (## Section Name)")

    for name in _LLMS_RECOMMENDED_SECTIONS:
        if not any(name in title for title in h2_titles):
            result.warn(f'Recommended section "## {name.capitalize()}" not found')


def validate_llm_txt(content: str, result: ValidationResult) -> None:
    """llm.txt (ADF-002) を検証する。"""
    lines = content.split("\n")

    first = _first_non_empty(lines)
    if first is None:
        result.error(EMPTY_FILE_MESSAGE)
        return

    if not lines[first].strip().startswith("# "):
        result.error("File MUST begin with a Markdown H1 heading (# Page Title)", first + 1)

    # llms.txt と異なり blockquote は推奨扱い
    if not _has_blockquote(lines):
        result.warn("File SHOULD contain a blockquote description")


def validate_llms_html(content: str, result: ValidationResult) -> None:
    """llms.html (ADF-003) を検証する。"""
    if not content.strip().lower().startswith("<!doctype html"):
        result.error("File MUST begin with <!DOCTYPE html>")

    html_tag = _HTML_TAG_RE.search(content)
    if html_tag is None:
        result.error("File MUST contain an <html> element")
    elif "lang=" not in html_tag.group(0):
        result.warn("The <html> element SHOULD include a lang attribute")

    if not _TITLE_RE.search(content):
        result.error("File MUST contain a non-empty <title> element")

    if not _H1_RE.search(content):
        result.error("File MUST contain an <h1> element with the organisation name")

    if not _META_DESCRIPTION_RE.search(content):
        result.warn('File SHOULD contain a <meta name="description"> element')


def _count_list_items(lines: list[str]) -> int:
    return sum(1 for line in lines if line.strip().startswith("- "))


def validate_ai_txt(content: str, result: ValidationResult) -> None:
    """ai.txt (ADF-004) を検証する。"""
    if not content.strip():
        result.error(EMPTY_FILE_MESSAGE)
        return

    lines = content.split("\n")

    if not _has_section(lines, "identity"):
        result.error("File MUST contain an [identity] section with name and url fields")
    else:
        identity = [line.strip().lower() for line in _section_lines(lines, "identity")]
        if not any(line.startswith("name:") for line in identity):
            result.error('[identity] section MUST contain a "name:" field')
        if not any(line.startswith("url:") for line in identity):
            result.error('[identity] section MUST contain a "url:" field')

    for name in ("permissions", "restrictions"):
        if not _has_section(lines, name):
            result.error(f"File MUST contain a [{name}] section")
        elif _count_list_items(_section_lines(lines, name)) == 0:
            result.error(f"[{name}] section MUST contain at least one item")


# ブランドファイルの必須セクションと、内容が空の場合の要素名
_BRAND_SECTIONS = (
    ("official-names", "an", "name"),
    ("incorrect-names", "an", "entry"),
    ("naming-rules", "a", "rule"),
)


def validate_brand_txt(content: str, result: ValidationResult) -> None:
    """brand.txt (ADF-007) を検証する。"""
    if not content.strip():
        result.error(EMPTY_FILE_MESSAGE)
        return

    lines = content.split("\n")

    for name, article, noun in _BRAND_SECTIONS:
        if not _has_section(lines, name):
            result.error(f"File MUST contain {article} [{name}] section")
            continue
        entries = [
            line for line in _section_lines(lines, name) if line.strip() and not line.strip().startswith("#")
        ]
        if not entries:
            result.error(f"[{name}] section MUST contain at least one {noun}")


def _is_faq_heading(trimmed: str) -> bool:
    if _is_section_header(trimmed) and not trimmed.startswith("[//"):
        return True
    return trimmed.startswith("## ") or trimmed.startswith("# ")


def validate_faq_ai_txt(content: str, result: ValidationResult) -> None:
    """faq-ai.txt (ADF-008) を検証する。

    各質問（Q:）には、次の質問より前に回答（A:）が必要。
    """
    if not content.strip():
        result.error(EMPTY_FILE_MESSAGE)
        return

    lines = content.split("\n")
    questions: list[int] = []
    answers: list[int] = []

    for number, line in enumerate(lines, start=1):
        trimmed = line.strip()
        if trimmed.startswith(("Q:", "**Q:")):
            questions.append(number)
        if trimmed.startswith(("A:", "**A:")):
            answers.append(number)

    if not questions:
        result.error("File MUST contain at least one question (Q: prefix)")
        return

    for index, q_line in enumerate(questions):
        next_q_line = questions[index + 1] if index + 1 < len(questions) else float("inf")
        if not any(q_line < a_line < next_q_line for a_line in answers):
            result.error(f"Question at line {q_line} has no corresponding answer (A:)", q_line)

    if not any(_is_faq_heading(line.strip()) for line in lines):
        result.warn("File SHOULD organise FAQs into sections using headings")


def validate_developer_ai_txt(content: str, result: ValidationResult) -> None:
    """developer-ai.txt (ADF-009) を検証する。"""
    if not content.strip():
        result.error(EMPTY_FILE_MESSAGE)
        return

    lower = content.lower()
    if not any(keyword in lower for keyword in _DEVELOPER_KEYWORDS):
        result.warn("File SHOULD contain technical context (APIs, stack, architecture)")


def validate_robots_ai_txt(content: str, result: ValidationResult) -> None:
    """robots-ai.txt (ADF-010) を検証する。"""
    if not content.strip():
        result.error(EMPTY_FILE_MESSAGE)
        return

    lower = content.lower()
    if not any(keyword in lower for keyword in _ROBOTS_KEYWORDS):
        result.warn("File SHOULD reference AI crawlers or define access policies")
