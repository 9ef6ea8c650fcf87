"""
Scan Schemas

Request and response models for the AEO scan API.
Everything is serialized with camelCase aliases.
"""
import enum
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class CheckId(str, enum.Enum):
    """The five AEO checks, in the order they are run and reported."""
    heading_hierarchy = "headingHierarchy"
    meta_description = "metaDescription"
    schema_markup = "schemaMarkup"
    faq_section = "faqSection"
    content_structure = "contentStructure"


class Impact(str, enum.Enum):
    low = "Low"
    medium = "Medium"
    high = "High"
    maintaining = "Maintaining"
    optimizing = "Optimizing"


class Effort(str, enum.Enum):
    none = "None"
    low = "Low"
    medium = "Medium"


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# ============================================================================
# Request
# ============================================================================

class ScanRequest(BaseModel):
    """Request to scan a single page. A missing url is reported by the service."""
    url: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "url": "example.com",
            }
        }
    )


# ============================================================================
# Results
# ============================================================================

class CheckResult(CamelModel):
    """Outcome of one check. `passed` is check-specific, not always score == max_score."""
    passed: bool = Field(alias="pass")
    score: int = Field(ge=0)
    max_score: int = 20
    details: Dict[str, Any] = Field(default_factory=dict)
    message: str

    @model_validator(mode="after")
    def _score_within_max(self) -> "CheckResult":
        if self.score > self.max_score:
            raise ValueError(f"score {self.score} exceeds max_score {self.max_score}")
        return self


class Recommendation(CamelModel):
    priority: int = Field(ge=1)
    title: str
    impact: Impact
    effort: Effort
    summary: str
    details: str
    learn_more_url: str


class ScanReport(CamelModel):
    """Full result of one scan. Assembled once, never persisted."""
    url: str
    scanned_at: datetime
    overall_score: int = Field(ge=0, le=100)
    score_grade: str
    checks: Dict[CheckId, CheckResult]
    recommendations: List[Recommendation]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "url": "https://example.com",
                "scannedAt": "2025-01-01T12:00:00Z",
                "overallScore": 55,
                "scoreGrade": "F",
                "checks": {
                    "headingHierarchy": {
                        "pass": True,
                        "score": 20,
                        "maxScore": 20,
                        "details": {"h1Count": 1, "hasSkippedLevels": False, "headings": ["H1", "H2"]},
                        "message": "Perfect heading structure with exactly 1 H1 and no skipped levels",
                    }
                },
                "recommendations": [
                    {
                        "priority": 1,
                        "title": "Add Structured Data (Schema Markup)",
                        "impact": "High",
                        "effort": "Medium",
                        "summary": "No JSON-LD schema detected on your page.",
                        "details": "Add Organization or LocalBusiness schema ...",
                        "learnMoreUrl": "https://birminghamai.org/aeo-guide",
                    }
                ],
            }
        }
    )


class ScanResponse(ScanReport):
    """Body of a successful POST /api/scan."""
    success: bool = True


class ErrorResponse(BaseModel):
    """Body of every failed request."""
    success: bool = False
    error: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": False,
                "error": "This site blocks automated scanning. Try a different URL.",
            }
        }
    )
