"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from supplement_compare.api.compare_models import CompareRequest
from supplement_compare.app_logging import configure_logging
from supplement_compare.config import parse_allowed_origins
from supplement_compare.containers import AppContainer
from supplement_compare.domain.products import DerivedMetrics
from supplement_compare.services.comparison import (
    ComparisonResult,
    UnknownProductError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_allowed_origins(container.settings.cors_allowed_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "Invalid request body",
                "detail": jsonable_encoder(exc.errors()),
            },
        )

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        """Liveness banner."""
        return "Server is running"

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/products")
    async def products(request: Request) -> dict[str, object]:
        """Return derived metrics for every catalog product."""
        state_container: AppContainer = request.app.state.container
        metrics = state_container.comparison_service.list_products()
        return {"products": [_format_metrics(item) for item in metrics]}

    @app.post("/compare", response_model=None)
    async def compare(
        payload: CompareRequest, request: Request
    ) -> dict[str, object] | JSONResponse:
        """Compare two products and return a recommendation."""
        state_container: AppContainer = request.app.state.container
        if not payload.profile or not payload.product_a or not payload.product_b:
            return _error_response("profile, productA, productB are required")

        try:
            result = await state_container.comparison_service.compare(
                payload.profile.to_domain(), payload.product_a, payload.product_b
            )
        except UnknownProductError:
            supported = [key for key, _ in state_container.catalog.items()]
            return _error_response(
                "Invalid product selection. Supported products: "
                + ", ".join(supported)
            )
        except Exception as exc:
            logger.exception("Compare failed")
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "compare failed", "detail": str(exc)},
            )

        return _format_comparison(
            result,
            beta_notice=state_container.settings.beta_notice,
            profile_echo=payload.profile.model_dump(by_alias=True, exclude_none=True),
        )

    return app


def _error_response(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"error": message}
    )


def _format_metrics(metrics: DerivedMetrics) -> dict[str, object]:
    """Render derived metrics with the public field names."""
    return {
        "key": metrics.key,
        "displayName": metrics.display_name,
        "source": metrics.source,
        "price": metrics.price,
        "currency": metrics.currency,
        "softgels": metrics.softgels,
        "servingSoftgels": metrics.serving_softgels,
        "omega3PerServingMg": metrics.omega3_per_serving_mg,
        "epaPerServingMg": metrics.epa_per_serving_mg,
        "dhaPerServingMg": metrics.dha_per_serving_mg,
        "servingsPerBottle": metrics.servings_per_bottle,
        "totalOmega3MgPerBottle": metrics.total_omega3_mg_per_bottle,
        "pricePerSoftgel": metrics.price_per_softgel,
        "pricePerServing": metrics.price_per_serving,
        "pricePer1000mgOmega3": metrics.price_per_1000mg_omega3,
    }


def _format_comparison(
    result: ComparisonResult,
    *,
    beta_notice: str,
    profile_echo: dict[str, object],
) -> dict[str, object]:
    """Assemble the public comparison response."""
    recommendation = result.recommendation
    return {
        "betaNotice": beta_notice,
        "usedFallback": recommendation.used_fallback,
        "openaiError": recommendation.error,
        "profileEcho": profile_echo,
        "products": {
            result.first.key: _format_metrics(result.first.metrics),
            result.second.key: _format_metrics(result.second.metrics),
        },
        "scores": {
            result.first.key: result.first.score,
            result.second.key: result.second.score,
        },
        "winnerFromScoreModel": result.winner_from_score_model,
        "gptJson": recommendation.result.model_dump(by_alias=True),
        "gptRaw": recommendation.raw,
    }
