# src/authly/api/endpoints/charts.py
"""Chart endpoints. Every route requires a bearer token."""

from __future__ import annotations

import math

from fastapi import Query, Response, status

from authly.api.dependencies import ChartStoreDep, CurrentUsernameDep
from authly.api.routing import make_router
from authly.core.errors import ForbiddenError, NotFoundError
from authly.core.settings import settings
from authly.models import Chart
from authly.schemas.chart import ChartCreate, ChartCreateResponse, ChartResponse
from authly.schemas.auth import MessageResponse
from authly.schemas.common import Pagination

router = make_router(prefix="/charts", tags=["charts"])


# Ids are stored in a signed 32-bit INTEGER column.
MAX_CHART_ID = 2**31 - 1


def _parse_chart_id(raw: str) -> int | None:
    try:
        chart_id = int(raw)
    except ValueError:
        return None
    if not 1 <= chart_id <= MAX_CHART_ID:
        return None
    return chart_id


@router.get("", response_model=list[ChartResponse])
async def list_charts(
    response: Response,
    _username: CurrentUsernameDep,
    charts: ChartStoreDep,
    page: str | None = Query(None, description="1-based page number"),
    limit: str | None = Query(None, description="Charts per page (at most 50)"),
) -> list[Chart]:
    """List charts newest first.

    Args:
        response: Outgoing response, used to attach count headers
        charts: Chart store
        page: Requested page; absent or invalid values mean page 1
        limit: Requested page size; clamped to the configured maximum

    Returns:
        One page of charts. ``X-Total-Count`` carries the total number of
        charts and ``X-Total-Pages`` the number of pages at this limit.
    """
    pagination = Pagination.from_query(
        page,
        limit,
        default_limit=settings.default_page_limit,
        max_limit=settings.max_page_limit,
    )
    items = charts.get_charts(pagination)
    total = charts.get_chart_count()

    response.headers["X-Total-Count"] = str(total)
    response.headers["X-Total-Pages"] = str(math.ceil(total / pagination.limit))
    return items


@router.get("/{chart_id}", response_model=ChartResponse | None)
async def get_chart(
    chart_id: str,
    _username: CurrentUsernameDep,
    charts: ChartStoreDep,
) -> Chart | None:
    """Return a chart, or ``null`` when no chart has this id."""
    parsed = _parse_chart_id(chart_id)
    if parsed is None:
        return None
    return charts.get_chart(parsed)


@router.post("", response_model=ChartCreateResponse, status_code=status.HTTP_201_CREATED)
async def create_chart(
    payload: ChartCreate,
    username: CurrentUsernameDep,
    charts: ChartStoreDep,
) -> ChartCreateResponse:
    chart_id = charts.create_chart(
        owner_username=username,
        title=payload.title,
        audio_url=payload.audio_url,
        key_presses=payload.key_presses,
    )
    return ChartCreateResponse(id=chart_id)


@router.delete("/{chart_id}", response_model=MessageResponse)
async def delete_chart(
    chart_id: str,
    username: CurrentUsernameDep,
    charts: ChartStoreDep,
) -> MessageResponse:
    """Delete a chart owned by the caller.

    Raises:
        NotFoundError: If no chart has this id
        ForbiddenError: If the chart belongs to another user
    """
    parsed = _parse_chart_id(chart_id)
    chart = charts.get_chart(parsed) if parsed is not None else None
    if chart is None:
        raise NotFoundError("Chart not found")

    if chart.user_username != username:
        raise ForbiddenError("You can only delete your own charts")

    charts.delete_chart(chart.id)
    return MessageResponse(message="Chart deleted")
