from fastapi import APIRouter, Depends, status

from app.features.scan.schemas.scan import ErrorResponse, ScanRequest, ScanResponse
from app.features.scan.services.scan.scan import ScanService
from app.platform.response import api_response

router = APIRouter(tags=["scan"])


def get_scan_service() -> ScanService:
    return ScanService()


@router.post(
    "/scan",
    response_model=ScanResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {
            "model": ErrorResponse,
            "description": "Missing or invalid URL, malformed body, or unreachable site",
        },
        status.HTTP_403_FORBIDDEN: {"model": ErrorResponse, "description": "Site blocks automated scanning"},
        status.HTTP_408_REQUEST_TIMEOUT: {"model": ErrorResponse, "description": "Site took too long to respond"},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse, "description": "Unexpected failure"},
    },
)
async def scan_page(
    request: ScanRequest,
    scan_service: ScanService = Depends(get_scan_service),
):
    """
    Fetch a page and grade it against the five AEO checks.

    Errors are rendered by the exception handlers as {success: false, error}.
    """
    report = await scan_service.scan(request.url)
    return api_response(data=report)
