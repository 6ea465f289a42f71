import logging

from sportscast.config import Settings
from sportscast.graph import OutputRepairer
from sportscast.llm import ModelClient, build_llm
from sportscast.prompts import render_prompt
from sportscast.schema import ForecastSchema


logger = logging.getLogger(__name__)


class ForecastService:
    """Render the announcer prompt, call the model and return a validated forecast.

    Failures are logged once here and re-raised untouched; there is no fallback
    forecast.
    """

    def __init__(self, client: ModelClient) -> None:
        self._client = client
        self._repairer = OutputRepairer(client)

    async def get_forecast(self, location: str) -> ForecastSchema:
        try:
            prompt = render_prompt(location)
            raw = await self._client.invoke(prompt)
            return await self._repairer.parse_or_repair(raw)
        except Exception:
            logger.exception("Forecast failed for location=%r", location)
            raise


def build_forecast_service(settings: Settings) -> ForecastService:
    client = ModelClient(build_llm(settings), timeout_seconds=settings.timeout_seconds)
    return ForecastService(client)
