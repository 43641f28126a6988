from __future__ import annotations

from datetime import date
from urllib.parse import urlencode


def build_link_header(
    base_url: str,
    *,
    start: date,
    end: date,
    page: int,
    page_size: int,
    total_pages: int,
) -> str:
    """RFC 8288 ``Link`` value with first/last always, prev/next only when they exist."""

    def url(target: int) -> str:
        qs = urlencode(
            {
                "startDate": start.isoformat(),
                "endDate": end.isoformat(),
                "page": target,
                "pageSize": page_size,
            }
        )
        return f"{base_url}?{qs}"

    links = [
        f'<{url(1)}>; rel="first"',
        f'<{url(total_pages)}>; rel="last"',
    ]
    if page > 1:
        links.append(f'<{url(page - 1)}>; rel="prev"')
    if page < total_pages:
        links.append(f'<{url(page + 1)}>; rel="next"')
    return ", ".join(links)
