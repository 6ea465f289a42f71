import asyncio
from typing import Any, List, Optional

import pytest
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage
from langchain_core.outputs import ChatGeneration, ChatResult
from pydantic import Field

from sportscast.forecast import ForecastService
from sportscast.llm import ModelClient


VALID_COMPLETION = '{"day1":"a","day2":"b","day3":"c","day4":"d","day5":"e"}'
VALID_RESULT = {"day1": "a", "day2": "b", "day3": "c", "day4": "d", "day5": "e"}
TRUNCATED_COMPLETION = '{"day1":"a","day2":"b","day3":"c","day4":"d","day5":"e'


class ScriptedChatModel(BaseChatModel):
    """Chat model that replays canned completions and records every prompt.

    Once the script runs out the last response repeats. `fail_on` makes the
    n-th call (1-based) raise a connection error instead of answering.
    """

    responses: List[str] = Field(default_factory=list)
    prompts: List[str] = Field(default_factory=list)
    fail_on: Optional[int] = None
    delay: float = 0.0

    @property
    def _llm_type(self) -> str:  # type: ignore[override]
        return "scripted"

    def _generate(
        self, messages: List[BaseMessage], stop: None = None, run_manager: None = None, **kwargs: Any
    ) -> ChatResult:
        self.prompts.append(messages[-1].content)
        call = len(self.prompts)
        if self.fail_on is not None and call == self.fail_on:
            raise ConnectionError("upstream refused connection (key sk-secret)")
        content = self.responses[min(call, len(self.responses)) - 1]
        return ChatResult(generations=[ChatGeneration(message=AIMessage(content=content))])

    async def _agenerate(
        self, messages: List[BaseMessage], stop: None = None, run_manager: None = None, **kwargs: Any
    ) -> ChatResult:
        if self.delay:
            await asyncio.sleep(self.delay)
        return self._generate(messages, stop=stop, **kwargs)


def make_service(chat: ScriptedChatModel, timeout_seconds: float = 5.0) -> ForecastService:
    return ForecastService(ModelClient(chat, timeout_seconds=timeout_seconds))


@pytest.fixture
def valid_chat() -> ScriptedChatModel:
    return ScriptedChatModel(responses=[VALID_COMPLETION])
