import asyncio
from typing import Any

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage
from langchain_openai import ChatOpenAI

from sportscast.config import Settings
from sportscast.errors import UpstreamError


def build_llm(settings: Settings) -> BaseChatModel:
    """Return the OpenAI chat model used for forecasts.

    Sampling is greedy (temperature 0) and the client never retries on its own;
    the only second call the service makes is the schema repair.
    """
    return ChatOpenAI(
        model=settings.openai_model,
        temperature=settings.temperature,
        api_key=settings.openai_api_key,
        timeout=settings.timeout_seconds,
        max_retries=0,
    )


def format_output(generated: Any) -> str:
    # Messages may carry a list of content blocks; .text joins the text ones
    if isinstance(generated, BaseMessage):
        return str(generated.text)
    return generated if isinstance(generated, str) else str(generated)


class ModelClient:
    """Send a prompt to the chat model and hand back the raw completion text.

    Every failure, including an expired wait, surfaces as UpstreamError with the
    provider's exception chained as its cause. Nothing is retried here.
    """

    def __init__(self, llm: BaseChatModel, timeout_seconds: float = 30.0) -> None:
        self._llm = llm
        self._timeout_seconds = float(timeout_seconds)

    @property
    def llm(self) -> BaseChatModel:
        return self._llm

    async def invoke(self, prompt: str) -> str:
        try:
            generated = await asyncio.wait_for(
                self._llm.ainvoke(prompt), timeout=self._timeout_seconds
            )
        except asyncio.TimeoutError as exc:
            raise UpstreamError(
                f"Model call timed out after {self._timeout_seconds:g}s"
            ) from exc
        except Exception as exc:
            raise UpstreamError(f"Model call failed: {exc}") from exc
        return format_output(generated)
