from typing import Optional

import httpx

from app.platform.config import settings


class PageFetcher:
    """
    Retrieves the raw markup of a single page.

    Failures are left as httpx exceptions (ConnectError, TimeoutException,
    HTTPStatusError, TooManyRedirects, ...); classifying them is the
    caller's job.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        max_redirects: Optional[int] = None,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = settings.SCAN_TIMEOUT_SECONDS if timeout is None else timeout
        self.max_redirects = settings.SCAN_MAX_REDIRECTS if max_redirects is None else max_redirects
        self.user_agent = user_agent or settings.SCAN_USER_AGENT
        self.transport = transport

    async def fetch(self, url: str) -> str:
        async with httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            max_redirects=self.max_redirects,
            headers={"User-Agent": self.user_agent},
            transport=self.transport,
        ) as client:
            response = await client.get(url)
            response.raise_for_status()
            return response.text
