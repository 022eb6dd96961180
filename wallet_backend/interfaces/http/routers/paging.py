"""Conversion of service pages to response envelopes."""

from typing import Any

from wallet_backend.modules.common.pagination import Page
from wallet_backend.schemas import PageResponse


def to_page_response(page: Page[Any]) -> PageResponse:
    return PageResponse(
        content=page.content,
        page=page.page,
        size=page.size,
        total_elements=page.total_elements,
        total_pages=page.total_pages,
    )
