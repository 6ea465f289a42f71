import logging
import sys
from typing import Optional

import uvicorn
from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from sportscast.config import Settings, get_settings
from sportscast.errors import InvalidLocationError, MissingCredentialError
from sportscast.forecast import ForecastService, build_forecast_service
from sportscast.schema import ForecastSchema


logger = logging.getLogger(__name__)

MISSING_LOCATION = "Please provide a location in the request body."
INTERNAL_ERROR = "Internal Server Error"


class ForecastRequest(BaseModel):
    location: Optional[str] = None


class ForecastResponse(BaseModel):
    result: ForecastSchema


class ErrorResponse(BaseModel):
    error: str


router = APIRouter(tags=["Forecast"])


def _require_location(payload: ForecastRequest) -> str:
    location = (payload.location or "").strip()
    if not location:
        raise InvalidLocationError(MISSING_LOCATION)
    return location


@router.post(
    "/forecast",
    response_model=ForecastResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Sports-announcer 5-day forecast",
)
async def forecast_endpoint(payload: ForecastRequest, request: Request):
    location = _require_location(payload)
    service: ForecastService = request.app.state.forecast_service
    try:
        result = await service.get_forecast(location)
    except Exception as exc:
        # Details stay in the server log
        logger.error("Error: %s", exc)
        return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR})
    return ForecastResponse(result=result)


def install_exception_handlers(app: FastAPI) -> None:
    """Map rejected requests to the 400 body; nothing reaches the model."""

    @app.exception_handler(InvalidLocationError)
    async def handle_invalid_location(
        request: Request, exc: InvalidLocationError
    ) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": MISSING_LOCATION})

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info("Rejected forecast request body: %s", exc.errors())
        return JSONResponse(status_code=400, content={"error": MISSING_LOCATION})


def create_app(
    service: Optional[ForecastService] = None, settings: Optional[Settings] = None
) -> FastAPI:
    """Build the FastAPI application.

    Tests pass a ready `service`; otherwise one is built from `settings`
    (or the environment, which requires OPENAI_API_KEY).
    """
    if service is None:
        service = build_forecast_service(settings or get_settings())

    app = FastAPI(
        title="Sportscast",
        description="Weather forecasts, called like a big game.",
        version="1.0.0",
    )
    app.state.forecast_service = service
    install_exception_handlers(app)
    app.include_router(router)
    return app


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        settings = get_settings()
    except MissingCredentialError:
        logger.critical("OPENAI_API_KEY is not defined. Exiting...")
        sys.exit(1)

    app = create_app(settings=settings)
    logger.info("Server is running on http://localhost:%d", settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
