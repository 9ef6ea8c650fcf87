"""
Scan orchestration: validate URL -> fetch -> parse -> checks -> score -> recommendations.
"""
from datetime import datetime, timezone
from typing import Optional

import httpx
from fastapi import status
from fastapi.concurrency import run_in_threadpool

from app.features.scan.schemas.scan import ScanReport
from app.features.scan.services.analysis.checks import run_checks
from app.features.scan.services.analysis.recommendations import generate_recommendations
from app.features.scan.services.analysis.scoring import calculate_grade, calculate_overall_score
from app.features.scan.services.extraction.document import ParsedDocument
from app.features.scan.services.scraping.fetcher import PageFetcher
from app.platform.exceptions import (
    BlockedError,
    RequestTimeoutError,
    ScanError,
    UnclassifiedError,
    UnreachableError,
    ValidationError,
)
from app.platform.logger import get_logger
from app.platform.utils.url_validator import validate_url

logger = get_logger("scan_service")


def classify_fetch_error(exc: Exception) -> ScanError:
    """Map a retrieval failure onto the user-facing error taxonomy."""
    # ConnectTimeout is a TimeoutException, not a ConnectError
    if isinstance(exc, httpx.TimeoutException):
        return RequestTimeoutError()
    if isinstance(exc, httpx.ConnectError):
        return UnreachableError()
    if isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code == status.HTTP_403_FORBIDDEN:
        return BlockedError()
    return UnclassifiedError()


class ScanService:

    def __init__(self, fetcher: Optional[PageFetcher] = None):
        self.fetcher = fetcher or PageFetcher()

    async def scan(self, url: Optional[str]) -> ScanReport:
        if not url or not url.strip():
            raise ValidationError("URL is required")

        is_valid, normalized_url, reason = validate_url(url)
        if not is_valid:
            logger.warning(f"Rejected scan URL {url!r}: {reason}")
            raise ValidationError()

        logger.info(f"Starting scan for URL: {normalized_url}")

        try:
            html = await self.fetcher.fetch(normalized_url)
        except httpx.HTTPError as e:
            error = classify_fetch_error(e)
            logger.warning(f"Fetch failed for {normalized_url}: {type(e).__name__}: {e}")
            raise error from e

        try:
            # parsing and checks are CPU-bound; keep them off the event loop
            report = await run_in_threadpool(
                self.analyze, normalized_url, html, datetime.now(timezone.utc)
            )
        except Exception as e:
            raise UnclassifiedError() from e

        logger.info(
            f"Scan complete for {normalized_url}: "
            f"score={report.overall_score} grade={report.score_grade}"
        )
        return report

    @classmethod
    def analyze(cls, url: str, html: str, scanned_at: datetime) -> ScanReport:
        return cls.build_report(url, ParsedDocument(html), scanned_at)

    @staticmethod
    def build_report(url: str, document: ParsedDocument, scanned_at: datetime) -> ScanReport:
        checks = run_checks(document)
        overall_score = calculate_overall_score(checks)

        return ScanReport(
            url=url,
            scanned_at=scanned_at,
            overall_score=overall_score,
            score_grade=calculate_grade(overall_score),
            checks=checks,
            recommendations=generate_recommendations(checks),
        )
