"""Data access helpers for working with charts."""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from authly.models.chart import Chart
from authly.schemas.common import Pagination
from authly.schemas.rhythm import KeyPress

from .key_presses import dump_key_presses

__all__ = ["ChartStore"]


class ChartStore:
    """Thin wrapper around database access for chart records.

    Ownership is not enforced here; route handlers check it before deleting.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_charts(self, pagination: Pagination) -> list[Chart]:
        """Return one page of charts, newest first."""
        result = self.session.execute(
            select(Chart)
            .order_by(Chart.created_at.desc(), Chart.id.desc())
            .limit(pagination.limit)
            .offset(pagination.offset)
        )
        return list(result.scalars())

    def get_chart_count(self) -> int:
        """Return the total number of charts.

        Not read in the same transaction as ``get_charts``; the two may skew.
        """
        return int(self.session.scalar(select(func.count()).select_from(Chart)) or 0)

    def get_chart(self, chart_id: int) -> Chart | None:
        return self.session.get(Chart, chart_id)

    def create_chart(
        self,
        *,
        owner_username: str,
        title: str,
        audio_url: str,
        key_presses: Iterable[KeyPress | dict[str, Any]],
    ) -> int:
        """Insert a chart and return its server-assigned id."""
        chart = Chart(
            user_username=owner_username,
            title=title,
            audio_url=audio_url,
            key_presses=dump_key_presses(key_presses),
        )
        self.session.add(chart)
        self.session.commit()
        return chart.id

    def delete_chart(self, chart_id: int) -> None:
        """Delete a chart by id unconditionally."""
        chart = self.session.get(Chart, chart_id)
        if chart is None:
            return
        self.session.delete(chart)
        self.session.commit()
