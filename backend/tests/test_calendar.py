"""Tests for calendar summaries — service functions and ``/api/v1/calendar``."""

from __future__ import annotations

import pytest
from httpx import AsyncClient

from garden_forecast.schemas.calendar import MonthSuitability
from garden_forecast.services.calendar_service import (
    describe_month,
    suitability_css_class,
    suitability_label,
    summarize_calendar,
)


def _calendar() -> list[MonthSuitability]:
    return [
        MonthSuitability(month_number=3, suitability="optimal"),
        MonthSuitability(month_number=4, suitability="optimal"),
        MonthSuitability(month_number=5, suitability="optimal"),
        MonthSuitability(month_number=6, suitability="suitable"),
        MonthSuitability(month_number=9, suitability="suitable"),
        MonthSuitability(month_number=2, suitability="risky"),
        MonthSuitability(
            month_number=7,
            suitability="not_recommended",
            notes="Too hot for transplants.",
        ),
    ]


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


class TestSummarizeCalendar:
    def test_groups_by_tag(self) -> None:
        summary = summarize_calendar(_calendar())
        assert summary.optimal == "March to May"
        assert summary.suitable == "June, September"
        assert summary.risky == "February"

    def test_optimal_always_present(self) -> None:
        summary = summarize_calendar(
            [MonthSuitability(month_number=1, suitability="risky")],
        )
        assert summary.optimal == "None"
        assert summary.suitable is None
        assert summary.risky == "January"

    def test_empty_calendar(self) -> None:
        summary = summarize_calendar([])
        assert summary.optimal == "None"
        assert summary.suitable is None
        assert summary.risky is None


class TestDescribeMonth:
    def test_known_month_default_note(self) -> None:
        detail = describe_month(_calendar(), 4)
        assert detail.month_name == "April"
        assert detail.suitability == "optimal"
        assert detail.label == "Optimal"
        assert detail.css_class == "optimal"
        assert detail.notes == "Optimal time for planting."

    def test_record_notes_take_precedence(self) -> None:
        detail = describe_month(_calendar(), 7)
        assert detail.label == "Not Recommended"
        assert detail.css_class == "not-recommended"
        assert detail.notes == "Too hot for transplants."

    def test_missing_month_is_not_recommended(self) -> None:
        detail = describe_month(_calendar(), 12)
        assert detail.month_name == "December"
        assert detail.suitability == "not_recommended"
        assert detail.notes.startswith("Not a suitable time")


class TestLabels:
    @pytest.mark.parametrize(
        ("tag", "label", "css"),
        [
            ("optimal", "Optimal", "optimal"),
            ("suitable", "Suitable", "suitable"),
            ("risky", "Risky", "risky"),
            ("not_recommended", "Not Recommended", "not-recommended"),
            (None, "Not Recommended", "not-recommended"),
        ],
    )
    def test_label_and_css(self, tag: str | None, label: str, css: str) -> None:
        assert suitability_label(tag) == label
        assert suitability_css_class(tag) == css


# ---------------------------------------------------------------------------
# POST /api/v1/calendar/summary
# ---------------------------------------------------------------------------


class TestCalendarSummaryEndpoint:
    """POST /api/v1/calendar/summary"""

    @pytest.mark.asyncio
    async def test_summary_success(self, async_client: AsyncClient) -> None:
        resp = await async_client.post(
            "/api/v1/calendar/summary",
            json={
                "calendar": [
                    {"monthNumber": 10, "suitability": "optimal"},
                    {"monthNumber": 4, "suitability": "optimal"},
                    {"monthNumber": 5, "suitability": "optimal", "suitabilityScore": 3},
                    {"monthNumber": 12, "suitability": "risky"},
                    {"monthNumber": 1, "suitability": "risky"},
                ],
            },
        )
        assert resp.status_code == 200
        assert resp.json() == {
            "optimal": "April to May, October",
            "risky": "January, December",
        }

    @pytest.mark.asyncio
    async def test_summary_empty_calendar(self, async_client: AsyncClient) -> None:
        resp = await async_client.post("/api/v1/calendar/summary", json={"calendar": []})
        assert resp.status_code == 200
        assert resp.json() == {"optimal": "None"}

    @pytest.mark.asyncio
    async def test_summary_rejects_duplicate_months(
        self,
        async_client: AsyncClient,
    ) -> None:
        resp = await async_client.post(
            "/api/v1/calendar/summary",
            json={
                "calendar": [
                    {"month_number": 3, "suitability": "optimal"},
                    {"month_number": 3, "suitability": "risky"},
                ],
            },
        )
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_summary_rejects_out_of_range_month(
        self,
        async_client: AsyncClient,
    ) -> None:
        resp = await async_client.post(
            "/api/v1/calendar/summary",
            json={"calendar": [{"month_number": 13, "suitability": "optimal"}]},
        )
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_summary_rejects_unknown_tag(self, async_client: AsyncClient) -> None:
        resp = await async_client.post(
            "/api/v1/calendar/summary",
            json={"calendar": [{"month_number": 3, "suitability": "great"}]},
        )
        assert resp.status_code == 422


# ---------------------------------------------------------------------------
# POST /api/v1/calendar/month/{month_number}
# ---------------------------------------------------------------------------


class TestMonthDetailEndpoint:
    """POST /api/v1/calendar/month/{month_number}"""

    @pytest.mark.asyncio
    async def test_month_detail(self, async_client: AsyncClient) -> None:
        resp = await async_client.post(
            "/api/v1/calendar/month/6",
            json={"calendar": [{"monthNumber": 6, "suitability": "suitable"}]},
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["month_name"] == "June"
        assert body["label"] == "Suitable"
        assert body["notes"] == "Suitable time for planting."

    @pytest.mark.asyncio
    async def test_month_out_of_range(self, async_client: AsyncClient) -> None:
        resp = await async_client.post(
            "/api/v1/calendar/month/0",
            json={"calendar": []},
        )
        assert resp.status_code == 422
