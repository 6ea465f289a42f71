from langchain_core.prompts import PromptTemplate

from sportscast.schema import format_instructions


FORECAST_TEMPLATE = (
    "You are a sports announcer. Provide an exciting and energetic play-by-play "
    "of the weather forecast for the next 5 days in {location}. Make it sound like "
    "a thrilling sport commentary! Return the forecast as a JSON object with each "
    'day\'s forecast as a property. The keys should be "day1", "day2", "day3", '
    '"day4", and "day5". The JSON should be properly formatted.\n\n'
    "{format_instructions}"
)

REPAIR_TEMPLATE = (
    "Your previous forecast could not be read as the JSON object we asked for.\n\n"
    "What you sent:\n<<<\n{completion}\n>>>\n\n"
    "Why it was rejected:\n<<<\n{error}\n>>>\n\n"
    "Send the same five-day forecast again, keeping the commentary, but reply "
    "with nothing except a JSON object that follows these formatting rules:\n\n"
    "{instructions}"
)


def build_forecast_prompt() -> PromptTemplate:
    return PromptTemplate(
        template=FORECAST_TEMPLATE,
        input_variables=["location"],
        partial_variables={"format_instructions": format_instructions()},
    )


def build_repair_prompt() -> PromptTemplate:
    return PromptTemplate(
        template=REPAIR_TEMPLATE,
        input_variables=["completion", "error"],
        partial_variables={"instructions": format_instructions()},
    )


_FORECAST_PROMPT = build_forecast_prompt()


def render_prompt(location: str) -> str:
    # Callers guarantee a non-empty location.
    return _FORECAST_PROMPT.format(location=location)
