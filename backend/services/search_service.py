"""
Query service for Modeldex.

Turns a free-text query into a validated list of model records by asking a
generative model (Anthropic Messages API) to fill in a fixed output schema.
The provider's answer is treated as untrusted input: it is parsed and
validated in full, and any malformed entry fails the whole search.
"""

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import anthropic

from backend.config import Settings, settings
from modeldex.errors import ERROR_MESSAGES, ErrorKind, RecordValidationError
from modeldex.models import ModelRecord, parse_records_json, record_json_schema, validate_records

logger = logging.getLogger(__name__)

API_KEY_ENV = "ANTHROPIC_API_KEY"
TOOL_NAME = "record_ai_models"


@dataclass(frozen=True)
class SearchOutcome:
    """Result of one search: either records or an error kind with a message."""

    results: list[ModelRecord] = field(default_factory=list)
    error: ErrorKind | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, kind: ErrorKind) -> "SearchOutcome":
        return cls(error=kind, message=ERROR_MESSAGES[kind])


def build_prompt(query: str, max_models: int) -> str:
    """Instruction sent to the generative model for one query."""
    return (
        f'You are an AI model encyclopedia. Find AI models related to the query: "{query}". '
        "For each model, provide all the requested details in the JSON schema. "
        f"Return a list of the most relevant models (at most {max_models}), most relevant first. "
        f"Submit the list by calling the {TOOL_NAME} tool."
    )


def build_tool() -> dict[str, Any]:
    """Tool definition whose input schema is the required output shape."""
    return {
        "name": TOOL_NAME,
        "description": "Record the AI models that match the user's query.",
        "input_schema": {
            "type": "object",
            "properties": {
                "models": {
                    "type": "array",
                    "description": "Matching AI models, most relevant first.",
                    "items": record_json_schema(),
                }
            },
            "required": ["models"],
        },
    }


class QueryService:
    """Stateless search over a generative model.

    Args:
        config: Settings providing the model name and request bounds
        client_factory: Builds a provider client from an API key
    """

    def __init__(
        self,
        config: Settings = settings,
        client_factory: Callable[[str], Any] | None = None,
    ):
        self.model = config.generative_model
        self.max_tokens = config.max_tokens
        self.max_models = config.max_models
        self.client_factory = client_factory or (lambda api_key: anthropic.Anthropic(api_key=api_key))

    def search(self, query: str) -> SearchOutcome:
        """
        Search for AI models matching the query.

        Never raises; every failure is reported through the outcome.
        """
        query = (query or "").strip()
        if not query:
            logger.warning("Search rejected: empty query")
            return SearchOutcome.failure(ErrorKind.INVALID_REQUEST)

        api_key = os.environ.get(API_KEY_ENV)
        if not api_key:
            logger.error(f"Search failed: {API_KEY_ENV} is not configured")
            return SearchOutcome.failure(ErrorKind.UPSTREAM_UNAVAILABLE)

        try:
            client = self.client_factory(api_key)
            response = client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                messages=[{"role": "user", "content": build_prompt(query, self.max_models)}],
                tools=[build_tool()],
                tool_choice={"type": "tool", "name": TOOL_NAME},
            )
        except anthropic.APIStatusError as e:
            logger.error(f"Generative service returned HTTP {e.status_code} for {query!r}")
            return SearchOutcome.failure(ErrorKind.UPSTREAM_UNAVAILABLE)
        except Exception as e:
            logger.error(f"Failed to reach generative service for {query!r}: {type(e).__name__}")
            return SearchOutcome.failure(ErrorKind.UPSTREAM_UNAVAILABLE)

        try:
            results = self._parse_response(response)
        except RecordValidationError as e:
            logger.error(f"Unparseable response for {query!r}: {e}")
            return SearchOutcome.failure(ErrorKind.UPSTREAM_FORMAT_ERROR)

        logger.info(f"Search {query!r}: {len(results)} models")
        return SearchOutcome(results=results)

    @staticmethod
    def _parse_response(response: Any) -> list[ModelRecord]:
        """
        Extract records from a Messages API response.

        Prefers the forced tool call's input; falls back to JSON in text blocks.

        Raises:
            RecordValidationError: If no block holds a valid record list
        """
        content = getattr(response, "content", None) or []

        for block in content:
            if getattr(block, "type", None) == "tool_use" and getattr(block, "name", None) == TOOL_NAME:
                tool_input = block.input
                if not isinstance(tool_input, dict) or "models" not in tool_input:
                    raise RecordValidationError("Tool input is missing 'models'")
                models = tool_input["models"]
                # Some responses carry the array as a JSON-encoded string
                if isinstance(models, str):
                    return parse_records_json(models)
                return validate_records(models)

        text = "".join(getattr(block, "text", "") for block in content if getattr(block, "type", None) == "text")
        if not text.strip():
            raise RecordValidationError("Response contained no tool call and no text")

        return parse_records_json(text)


def get_query_service() -> QueryService:
    """FastAPI dependency: a fresh service per request."""
    return QueryService()
