"""
AEO content checks.

Each check is a pure function of a ParsedDocument returning a CheckResult.
CHECKS maps every CheckId to its evaluator in reporting order.
"""
import re
from typing import Callable, Dict

from app.features.scan.schemas.scan import CheckId, CheckResult
from app.features.scan.services.extraction.document import HEADING_TAGS, ParsedDocument

MAX_SCORE = 20

MAX_REPORTED_HEADINGS = 10
MAX_REPORTED_SCHEMAS = 5
MAX_REPORTED_CONTENT = 200

META_DESCRIPTION_MIN_LENGTH = 120
META_DESCRIPTION_MAX_LENGTH = 160
META_DESCRIPTION_PARTIAL_SCORE = 15

FAQ_SCHEMA_TYPES = frozenset({"FAQPage", "Question"})
FAQ_HEADING_PATTERN = re.compile(r"frequently\s+asked\s+questions?|faq", re.IGNORECASE)
QUESTION_PATTERN = re.compile(
    r"\b(?:what|how|why|when|where|who|can|do|does|is|are)\b[^.?]*\?", re.IGNORECASE
)
MIN_QUESTION_COUNT = 3

MIN_WORD_COUNT = 300


def plural(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


def check_heading_hierarchy(document: ParsedDocument) -> CheckResult:
    levels = [int(el.name[1]) for el in document.select_all(*HEADING_TAGS)]
    h1_count = levels.count(1)
    has_skipped_levels = any(
        current - previous > 1 for previous, current in zip(levels, levels[1:])
    )
    passed = h1_count == 1 and not has_skipped_levels

    if passed:
        message = "Perfect heading structure with exactly 1 H1 and no skipped levels"
    elif h1_count != 1:
        message = f"Found {plural(h1_count, 'H1 tag')} (should be exactly 1)"
        if has_skipped_levels:
            message += " and skipped heading levels"
    else:
        message = "Skipped heading levels detected (e.g., H1 -> H3)"

    return CheckResult(
        passed=passed,
        score=MAX_SCORE if passed else 0,
        max_score=MAX_SCORE,
        details={
            "h1Count": h1_count,
            "hasSkippedLevels": has_skipped_levels,
            "headings": [f"H{level}" for level in levels[:MAX_REPORTED_HEADINGS]],
        },
        message=message,
    )


def check_meta_description(document: ParsedDocument) -> CheckResult:
    content = (document.get_attribute('meta[name="description"]', "content") or "").strip()
    length = len(content)
    exists = length > 0
    ideal_length = META_DESCRIPTION_MIN_LENGTH <= length <= META_DESCRIPTION_MAX_LENGTH

    if not exists:
        score, message = 0, "No meta description found"
    elif ideal_length:
        score, message = MAX_SCORE, f"Meta description is well-optimized ({length} characters)"
    elif length < META_DESCRIPTION_MIN_LENGTH:
        score = META_DESCRIPTION_PARTIAL_SCORE
        message = f"Meta description is too short ({length} chars, aim for 120-160)"
    else:
        score = META_DESCRIPTION_PARTIAL_SCORE
        message = f"Meta description is too long ({length} chars, aim for 120-160)"

    return CheckResult(
        passed=exists and ideal_length,
        score=score,
        max_score=MAX_SCORE,
        details={
            "exists": exists,
            "length": length,
            "content": content[:MAX_REPORTED_CONTENT],
        },
        message=message,
    )


def check_schema_markup(document: ParsedDocument) -> CheckResult:
    schemas = [block.label for block in document.json_ld_blocks()]
    passed = len(schemas) > 0

    return CheckResult(
        passed=passed,
        score=MAX_SCORE if passed else 0,
        max_score=MAX_SCORE,
        details={
            "hasJsonLd": passed,
            "schemaCount": len(schemas),
            "schemas": schemas[:MAX_REPORTED_SCHEMAS],
        },
        message=(
            f"Found {plural(len(schemas), 'schema')}: {', '.join(schemas[:3])}"
            if passed
            else "No structured data (JSON-LD) detected"
        ),
    )


def check_faq_section(document: ParsedDocument) -> CheckResult:
    has_faq_schema = any(
        block.types & FAQ_SCHEMA_TYPES for block in document.json_ld_blocks()
    )

    has_faq_heading = FAQ_HEADING_PATTERN.search(document.get_text("h1", "h2", "h3", "h4")) is not None
    question_count = sum(1 for _ in QUESTION_PATTERN.finditer(document.visible_text().lower()))
    has_faq_content = has_faq_heading or question_count >= MIN_QUESTION_COUNT

    passed = has_faq_schema or has_faq_content
    if has_faq_schema:
        message = "FAQPage schema detected"
    elif has_faq_content:
        message = f"FAQ content patterns found ({question_count} questions detected)"
    else:
        message = "No FAQ section or FAQPage schema found"

    return CheckResult(
        passed=passed,
        score=MAX_SCORE if passed else 0,
        max_score=MAX_SCORE,
        details={
            "hasFaqSchema": has_faq_schema,
            "hasFaqContent": has_faq_content,
            "questionCount": question_count,
        },
        message=message,
    )


def check_content_structure(document: ParsedDocument) -> CheckResult:
    list_count = len(document.select_all("ul", "ol"))
    table_count = len(document.select_all("table"))
    has_lists = list_count > 0
    has_tables = table_count > 0
    word_count = len(document.visible_text().split())

    passed = (has_lists or has_tables) and word_count >= MIN_WORD_COUNT
    if passed:
        message = (
            f"Good content structure with {plural(list_count, 'list')}, "
            f"{plural(table_count, 'table')}, and {word_count} words"
        )
    elif not has_lists and not has_tables:
        message = f"No lists or tables found (has {word_count} words)"
    else:
        message = f"Insufficient content: only {word_count} words (need 300+)"

    return CheckResult(
        passed=passed,
        score=MAX_SCORE if passed else 0,
        max_score=MAX_SCORE,
        details={
            "hasLists": has_lists,
            "listCount": list_count,
            "hasTables": has_tables,
            "tableCount": table_count,
            "wordCount": word_count,
        },
        message=message,
    )


CHECKS: Dict[CheckId, Callable[[ParsedDocument], CheckResult]] = {
    CheckId.heading_hierarchy: check_heading_hierarchy,
    CheckId.meta_description: check_meta_description,
    CheckId.schema_markup: check_schema_markup,
    CheckId.faq_section: check_faq_section,
    CheckId.content_structure: check_content_structure,
}


def run_checks(document: ParsedDocument) -> Dict[CheckId, CheckResult]:
    return {check_id: evaluate(document) for check_id, evaluate in CHECKS.items()}
