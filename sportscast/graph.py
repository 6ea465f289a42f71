import logging
from typing import Literal, TypedDict

from langgraph.graph import StateGraph, START, END

from sportscast.errors import SchemaMismatchError
from sportscast.llm import ModelClient
from sportscast.prompts import build_repair_prompt
from sportscast.schema import ForecastSchema, parse


logger = logging.getLogger(__name__)


class RepairState(TypedDict, total=False):
    completion: str
    result: ForecastSchema
    error: str
    status: Literal["done", "invalid", "failed"]


def parse_node(state: RepairState) -> RepairState:
    try:
        return {"result": parse(state["completion"]), "status": "done"}
    except SchemaMismatchError as exc:
        return {"error": str(exc), "status": "invalid"}


def classify_parse(state: RepairState) -> Literal["done", "repair"]:
    return "done" if state.get("status") == "done" else "repair"


def build_repair_graph(client: ModelClient):
    """Compile the bounded parse/repair machine.

    parse -> END on success, parse -> repair -> END otherwise. There is no edge
    leading back into repair, so a completion is repaired at most once.
    """
    repair_prompt = build_repair_prompt()

    async def repair_node(state: RepairState) -> RepairState:
        logger.debug("Completion failed schema validation, requesting one repair")
        prompt = repair_prompt.format(
            completion=state["completion"], error=state.get("error", "")
        )
        # UpstreamError from this call propagates out of the graph unchanged
        repaired = await client.invoke(prompt)
        try:
            return {"completion": repaired, "result": parse(repaired), "status": "done"}
        except SchemaMismatchError as exc:
            return {"completion": repaired, "error": str(exc), "status": "failed"}

    g = StateGraph(RepairState)
    g.add_node("parse", parse_node)
    g.add_node("repair", repair_node)

    g.add_edge(START, "parse")
    g.add_conditional_edges("parse", classify_parse, {"done": END, "repair": "repair"})
    g.add_edge("repair", END)
    return g.compile()


class OutputRepairer:
    def __init__(self, client: ModelClient) -> None:
        self._graph = build_repair_graph(client)

    async def parse_or_repair(self, raw_text: str) -> ForecastSchema:
        state = await self._graph.ainvoke({"completion": raw_text})
        if state.get("status") != "done":
            raise SchemaMismatchError(
                state.get("error") or "Completion does not match the forecast schema"
            )
        return state["result"]
