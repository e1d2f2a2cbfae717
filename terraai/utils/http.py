# terraai/utils/http.py
import httpx
from typing import Optional

async def head(url: str, params: Optional[dict] = None, timeout: float = 30.0, client: Optional[httpx.AsyncClient] = None):
    """
    HEAD request; returns status code and headers.
    Transport errors and timeouts propagate as httpx.HTTPError.
    """
    if client is not None:
        r = await client.head(url, params=params, timeout=timeout, follow_redirects=True)
        return {"status_code": r.status_code, "headers": dict(r.headers)}
    async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as c:
        r = await c.head(url, params=params)
        return {"status_code": r.status_code, "headers": dict(r.headers)}
