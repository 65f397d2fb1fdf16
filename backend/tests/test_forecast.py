"""Tests for ``ForecastService`` and the ``/api/v1/forecast`` endpoint."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from httpx import AsyncClient

from garden_forecast.api.deps import get_forecast_service
from garden_forecast.core.exceptions import NotFoundError, RateLimitExceededError
from garden_forecast.main import app
from garden_forecast.schemas.forecast import ForecastRequest
from garden_forecast.services.forecast_service import (
    ForecastService,
    generate_recommendations,
)


def _request(**overrides) -> ForecastRequest:  # type: ignore[no-untyped-def]
    data = {"climate": "mediterranean", "environment": "open", "area": 10}
    data.update(overrides)
    return ForecastRequest(**data)


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


class TestCalculateForecast:
    def test_tomatoes_mediterranean(self, forecast_service: ForecastService) -> None:
        forecast = forecast_service.calculate_forecast(_request(), "tomatoes")

        assert forecast.crop_profile.name == "Tomatoes"
        assert forecast.crop_profile.yield_per_square_meter.min == pytest.approx(4.2)
        assert forecast.crop_profile.yield_per_square_meter.max == pytest.approx(8.4)
        assert forecast.production_metrics.total_yield.min == pytest.approx(42.0)
        assert forecast.production_metrics.total_yield.max == pytest.approx(84.0)
        assert forecast.production_metrics.maintenance_level == "Moderate"

        summary = forecast.planting_calendar.summary
        assert summary.optimal == "March to May"
        assert summary.suitable == "February, June"
        assert summary.risky == "January, July, September"

    def test_risks_sorted_and_mitigations_recommended(
        self,
        forecast_service: ForecastService,
    ) -> None:
        forecast = forecast_service.calculate_forecast(_request(), "tomatoes")
        scores = [risk.severity_score for risk in forecast.risk_factors]
        assert scores == sorted(scores, reverse=True)

        categories = [group.category for group in forecast.recommendations]
        assert categories[:3] == ["Variety Selection", "Planting Strategy", "Spacing"]
        assert "Disease Pressure Mitigation" in categories

    def test_unknown_crop(self, forecast_service: ForecastService) -> None:
        with pytest.raises(NotFoundError, match="Crop data not found for kale"):
            forecast_service.calculate_forecast(_request(), "kale")

    def test_unknown_climate(self, forecast_service: ForecastService) -> None:
        with pytest.raises(NotFoundError, match="Climate data not found for polar"):
            forecast_service.calculate_forecast(_request(climate="polar"), "tomatoes")

    def test_generate_forecast_defaults_to_all_crops(
        self,
        forecast_service: ForecastService,
    ) -> None:
        response = forecast_service.generate_forecast(_request())
        assert set(response.crops) == {
            "tomatoes",
            "cucumbers",
            "bellPeppers",
            "eggplant",
            "hotPeppers",
        }
        assert response.meta.params["climate"] == "mediterranean"
        assert "crops" not in response.meta.params

    def test_generate_forecast_empty_crop_list(
        self,
        forecast_service: ForecastService,
    ) -> None:
        response = forecast_service.generate_forecast(_request(crops=[]))
        assert response.crops == {}


class TestGenerateRecommendations:
    CROP = {
        "seedStartWeeks": 6,
        "protectedExtensionWeeks": 4,
        "spacing": {"min": 45, "max": 60},
    }
    CLIMATE = {"id": "arid", "name": "Arid"}

    def test_protected_strategy(self) -> None:
        recs = generate_recommendations(self.CROP, self.CLIMATE, "protected", [], "intermediate")
        assert recs[0] == {
            "category": "Planting Strategy",
            "text": "In your protected environment, you can extend growing seasons by 4 weeks.",
        }

    def test_experience_tips_fall_back_to_defaults(self) -> None:
        beginner = generate_recommendations(self.CROP, self.CLIMATE, "open", [], "beginner")
        advanced = generate_recommendations(self.CROP, self.CLIMATE, "open", [], "advanced")
        assert beginner[-1]["category"] == "Beginner Tips"
        assert beginner[-1]["text"].startswith("Start with a smaller growing area")
        assert advanced[-1]["category"] == "Advanced Techniques"
        assert "succession planting" in advanced[-1]["text"]

    def test_risk_without_mitigation_is_skipped(self) -> None:
        risks = [
            {"category": "Pest Issues", "mitigation": "Use row covers."},
            {"category": "Temperature Extremes"},
        ]
        recs = generate_recommendations(self.CROP, self.CLIMATE, "open", risks, "intermediate")
        assert [r["category"] for r in recs][-1] == "Pest Issues Mitigation"
        assert not any(r["category"].startswith("Temperature") for r in recs)


# ---------------------------------------------------------------------------
# POST /api/v1/forecast
# ---------------------------------------------------------------------------


class TestForecastEndpoint:
    """POST /api/v1/forecast"""

    @pytest.mark.asyncio
    async def test_forecast_success(self, async_client: AsyncClient) -> None:
        resp = await async_client.post(
            "/api/v1/forecast",
            json={
                "climate": "mediterranean",
                "environment": "open",
                "area": 10,
                "crops": ["tomatoes"],
            },
        )
        assert resp.status_code == 200
        body = resp.json()
        assert list(body["crops"]) == ["tomatoes"]
        calendar = body["crops"]["tomatoes"]["planting_calendar"]
        assert calendar["summary"]["optimal"] == "March to May"
        assert calendar["periods"]["optimal"] == ["March to May"]
        assert len(calendar["monthly_data"]) == 12
        assert body["meta"]["params"]["area"] == 10

    @pytest.mark.asyncio
    async def test_forecast_unknown_crop(self, async_client: AsyncClient) -> None:
        resp = await async_client.post(
            "/api/v1/forecast",
            json={
                "climate": "mediterranean",
                "environment": "open",
                "area": 10,
                "crops": ["kale"],
            },
        )
        assert resp.status_code == 404
        assert resp.json() == {"detail": "Crop data not found for kale"}

    @pytest.mark.asyncio
    async def test_forecast_missing_area(self, async_client: AsyncClient) -> None:
        resp = await async_client.post(
            "/api/v1/forecast",
            json={"climate": "mediterranean", "environment": "open"},
        )
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_forecast_invalid_environment(self, async_client: AsyncClient) -> None:
        resp = await async_client.post(
            "/api/v1/forecast",
            json={"climate": "mediterranean", "environment": "indoor", "area": 5},
        )
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_forecast_delegates_to_service(self, async_client: AsyncClient) -> None:
        service = MagicMock(spec=ForecastService)
        service.generate_forecast.side_effect = NotFoundError("Climate data not found for x")
        app.dependency_overrides[get_forecast_service] = lambda: service

        resp = await async_client.post(
            "/api/v1/forecast",
            json={"climate": "x", "environment": "cooled", "area": 1.5},
        )

        assert resp.status_code == 404
        request = service.generate_forecast.call_args.args[0]
        assert request.environment == "cooled"
        assert request.experience == "intermediate"

    @pytest.mark.asyncio
    async def test_forecast_rate_limited(self, async_client: AsyncClient) -> None:
        with patch(
            "garden_forecast.core.rate_limiter.ClientRateLimiter.acquire",
            side_effect=RateLimitExceededError(),
        ):
            resp = await async_client.post(
                "/api/v1/forecast",
                json={"climate": "arid", "environment": "open", "area": 1},
            )
        assert resp.status_code == 429
