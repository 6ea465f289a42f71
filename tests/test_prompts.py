import pytest

from sportscast.prompts import build_repair_prompt, render_prompt
from sportscast.schema import format_instructions


@pytest.mark.parametrize("location", ["Seattle", "São Paulo", "Reykjavík, Iceland", "New York {NY}"])
def test_prompt_contains_location_and_instructions_once(location):
    prompt = render_prompt(location)
    assert prompt.count(location) == 1
    assert prompt.count(format_instructions()) == 1


def test_prompt_sets_the_announcer_voice():
    prompt = render_prompt("Seattle")
    assert prompt.startswith("You are a sports announcer.")
    assert "next 5 days in Seattle" in prompt


def test_repair_prompt_carries_completion_and_error():
    prompt = build_repair_prompt().format(completion="not json {", error="bad things")
    assert "not json {" in prompt
    assert "bad things" in prompt
    assert format_instructions() in prompt
    assert prompt.startswith("Your previous forecast could not be read")
