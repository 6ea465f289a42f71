"""
Ad-hoc driver: run the forecast pipeline for a few locations and print the JSON.
With LangSmith tracing enabled (env vars), every run, including any repair
call, is logged under the configured project.

Env needed:
- OPENAI_API_KEY=...
- LANGCHAIN_TRACING_V2=true (optional)
- LANGCHAIN_PROJECT=sportscast (optional)
"""

import argparse
import asyncio
import json
from typing import List

from sportscast.config import get_settings
from sportscast.forecast import build_forecast_service


EXAMPLES: List[str] = ["Seattle", "Tokyo", "Buenos Aires"]


async def run(locations: List[str]) -> None:
    service = build_forecast_service(get_settings())
    for i, location in enumerate(locations, 1):
        result = await service.get_forecast(location)
        print(f"Case {i} | location={location}\n{json.dumps(result.model_dump(), indent=2)}\n")


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--location",
        action="append",
        default=None,
        help="Location to forecast (repeatable); defaults to a built-in sample",
    )
    args = parser.parse_args()
    asyncio.run(run(args.location or EXAMPLES))


if __name__ == "__main__":
    main()
