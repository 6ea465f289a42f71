"""Forecast output schema.

`ForecastSchema` is declared once and drives both the format instructions
embedded in the prompt and the validation of whatever the model sends back.
"""

import json
from collections.abc import Mapping
from functools import partial
from typing import Any

from langchain_core.output_parsers import PydanticOutputParser
from langchain_core.utils.json import parse_json_markdown
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from sportscast.errors import SchemaMismatchError


class ForecastSchema(BaseModel):
    """A JSON object with the forecast for the next 5 days."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    day1: str = Field(description="Forecast for day 1")
    day2: str = Field(description="Forecast for day 2")
    day3: str = Field(description="Forecast for day 3")
    day4: str = Field(description="Forecast for day 4")
    day5: str = Field(description="Forecast for day 5")


_PARSER = PydanticOutputParser(pydantic_object=ForecastSchema)


def format_instructions() -> str:
    return _PARSER.get_format_instructions()


def validate(candidate: Any) -> ForecastSchema:
    if not isinstance(candidate, Mapping):
        raise SchemaMismatchError(
            f"Expected a JSON object, got {type(candidate).__name__}"
        )
    try:
        return ForecastSchema.model_validate(dict(candidate))
    except ValidationError as exc:
        raise SchemaMismatchError(str(exc)) from exc


def parse(text: str) -> ForecastSchema:
    """Decode a raw completion (bare JSON or a fenced ```json block) and validate it."""
    try:
        # Strict decode: truncated completions must fail, not be auto-closed
        candidate = parse_json_markdown(text, parser=partial(json.loads, strict=False))
    except ValueError as exc:
        raise SchemaMismatchError(f"Completion is not valid JSON: {exc}") from exc
    return validate(candidate)
