"""
Recommendation engine.

Failed checks come first, ordered by how much fixing them is worth. Remaining
slots are filled with advice for checks that already pass. The text lives in
two lookup tables keyed by CheckId; only the summaries depend on the measured
check details.
"""
from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping

from app.features.scan.schemas.scan import CheckId, CheckResult, Effort, Impact, Recommendation
from app.features.scan.services.analysis.checks import plural
from app.platform.config import settings


@dataclass(frozen=True)
class RecommendationTemplate:
    title: str
    impact: Impact
    effort: Effort
    summary: Callable[[Dict], str]
    details: str


def _heading_fix_summary(details: Dict) -> str:
    h1_count = details["h1Count"]
    if h1_count != 1:
        return f"You have {plural(h1_count, 'H1 tag')}, but AI systems expect exactly one."
    return "Your headings skip levels, which confuses AI systems."


def _meta_fix_summary(details: Dict) -> str:
    if details["exists"]:
        return f"Your meta description is {details['length']} characters (aim for 120-160)."
    return "Your page is missing a meta description."


def _content_fix_summary(details: Dict) -> str:
    if not details["hasLists"] and not details["hasTables"]:
        return "Your page lacks structured content like lists or tables."
    return f"Your page only has {details['wordCount']} words (need 300+)."


# Ordered by static priority: dict order is the ranking.
FAILED_CHECK_TEMPLATES: Dict[CheckId, RecommendationTemplate] = {
    CheckId.heading_hierarchy: RecommendationTemplate(
        title="Fix Your Heading Structure",
        impact=Impact.high,
        effort=Effort.low,
        summary=_heading_fix_summary,
        details=(
            "Use a single H1 for your main topic, then H2s for major sections, H3s for "
            "subsections. Never skip levels (e.g., H1 -> H3). This single change improves "
            "AI citation likelihood by 2.8x."
        ),
    ),
    CheckId.schema_markup: RecommendationTemplate(
        title="Add Structured Data (Schema Markup)",
        impact=Impact.high,
        effort=Effort.medium,
        summary=lambda details: "No JSON-LD schema detected on your page.",
        details=(
            "Add Organization or LocalBusiness schema with your name, address, phone, and "
            "services. This helps AI systems understand and cite your business accurately. "
            "Pages with schema are cited 30-36% more often."
        ),
    ),
    CheckId.faq_section: RecommendationTemplate(
        title="Add an FAQ Section",
        impact=Impact.high,
        effort=Effort.medium,
        summary=lambda details: "No FAQ content or FAQPage schema found.",
        details=(
            "Add a section answering 5-7 common questions about your business or services. "
            "Use FAQPage schema markup for maximum impact. This doubles your likelihood of "
            "AI citation."
        ),
    ),
    CheckId.meta_description: RecommendationTemplate(
        title="Add or Improve Your Meta Description",
        impact=Impact.medium,
        effort=Effort.low,
        summary=_meta_fix_summary,
        details=(
            "Add a meta description that summarizes your page in 120-160 characters. AI "
            "systems use this for context when deciding whether to cite your content."
        ),
    ),
    CheckId.content_structure: RecommendationTemplate(
        title="Improve Content Structure",
        impact=Impact.medium,
        effort=Effort.medium,
        summary=_content_fix_summary,
        details=(
            "Add bullet lists, numbered lists, or comparison tables. Include at least 300 "
            "words of substantive content. 78% of AI Overviews contain lists or tables."
        ),
    ),
}

PASSED_CHECK_TEMPLATES: Dict[CheckId, RecommendationTemplate] = {
    CheckId.heading_hierarchy: RecommendationTemplate(
        title="Maintain Strong Heading Structure",
        impact=Impact.maintaining,
        effort=Effort.none,
        summary=lambda details: "Your heading structure is well-optimized.",
        details=(
            "You have exactly one H1 and proper heading hierarchy. Continue following this "
            "pattern on all pages for consistent AI recognition."
        ),
    ),
    CheckId.meta_description: RecommendationTemplate(
        title="Keep Your Meta Description Strong",
        impact=Impact.maintaining,
        effort=Effort.none,
        summary=lambda details: (
            f"Your meta description is well-optimized at {details['length']} characters."
        ),
        details=(
            "Your current meta description effectively summarizes your content. Consider A/B "
            "testing variations that include your unique value proposition."
        ),
    ),
    CheckId.schema_markup: RecommendationTemplate(
        title="Expand Your Schema Markup",
        impact=Impact.optimizing,
        effort=Effort.none,
        summary=lambda details: f"You have {plural(details['schemaCount'], 'schema')} implemented.",
        details=(
            "Consider adding more schema types like FAQPage, HowTo, or Review schema to "
            "increase AI citation opportunities."
        ),
    ),
    CheckId.faq_section: RecommendationTemplate(
        title="Enhance Your FAQ Section",
        impact=Impact.optimizing,
        effort=Effort.none,
        summary=lambda details: "FAQ content detected on your page.",
        details=(
            "Consider adding FAQPage schema markup if not already present, and expand to "
            "7-10 questions for maximum AI visibility."
        ),
    ),
    CheckId.content_structure: RecommendationTemplate(
        title="Maintain Good Content Structure",
        impact=Impact.maintaining,
        effort=Effort.none,
        summary=lambda details: (
            f"Your page has {plural(details['listCount'], 'list')} "
            f"and {details['wordCount']} words."
        ),
        details=(
            "Your content structure is solid. Consider adding comparison tables or "
            "step-by-step guides to further improve AI extractability."
        ),
    ),
}


def generate_recommendations(
    checks: Mapping[CheckId, CheckResult],
    limit: int | None = None,
    learn_more_url: str | None = None,
) -> List[Recommendation]:
    limit = settings.MAX_RECOMMENDATIONS if limit is None else limit
    learn_more_url = learn_more_url or settings.LEARN_MORE_URL

    candidates = [
        (template, checks[check_id])
        for check_id, template in FAILED_CHECK_TEMPLATES.items()
        if check_id in checks and not checks[check_id].passed
    ]
    candidates += [
        (template, checks[check_id])
        for check_id, template in PASSED_CHECK_TEMPLATES.items()
        if check_id in checks and checks[check_id].passed
    ]

    return [
        Recommendation(
            priority=priority,
            title=template.title,
            impact=template.impact,
            effort=template.effort,
            summary=template.summary(check.details),
            details=template.details,
            learn_more_url=learn_more_url,
        )
        for priority, (template, check) in enumerate(candidates[:limit], start=1)
    ]
