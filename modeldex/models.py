"""Model record schema.

A ModelRecord is one AI model's encyclopedia entry as produced by the
generative service. The same schema is used to constrain the provider's
output, to validate it on the server, and to validate it again on the client.
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from modeldex.errors import RecordValidationError

RECORD_FIELDS = (
    "name",
    "description",
    "longDescription",
    "primaryFunction",
    "websiteUrl",
    "pricingModel",
)


class ModelRecord(BaseModel):
    """One AI model summary.

    Field names are snake_case in Python and camelCase on the wire.
    Values must already be strings; nothing is coerced.
    """

    model_config = ConfigDict(frozen=True, strict=True, populate_by_name=True)

    name: str = Field(..., description="The name of the AI model.")
    description: str = Field(
        ...,
        description="A brief, one-sentence summary of the AI model's capabilities for a card view.",
    )
    long_description: str = Field(
        ...,
        alias="longDescription",
        description=(
            "A detailed paragraph describing the model, its features, and common use cases "
            "for a detail page."
        ),
    )
    primary_function: str = Field(
        ...,
        alias="primaryFunction",
        description=(
            "The primary function or category of the model "
            "(e.g., Text Generation, Image Generation, Code Generation)."
        ),
    )
    website_url: str = Field(
        ..., alias="websiteUrl", description="The official URL or homepage for the AI model."
    )
    pricing_model: str = Field(
        ...,
        alias="pricingModel",
        description=(
            "The pricing structure. Common values are 'Free', 'Freemium', "
            "'Subscription', or 'One-time Purchase'."
        ),
    )

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v

    def to_wire(self) -> dict[str, str]:
        """Serialize using the camelCase wire names."""
        return self.model_dump(by_alias=True)


_records_adapter = TypeAdapter(list[ModelRecord])


def record_json_schema() -> dict[str, Any]:
    """JSON schema for a single record, using wire names.

    Every field is a required string; primaryFunction is described as a
    category hint and the rest as free text.
    """
    properties = {}
    for field_name, info in ModelRecord.model_fields.items():
        properties[info.alias or field_name] = {
            "type": "string",
            "description": info.description,
        }
    return {
        "type": "object",
        "properties": properties,
        "required": list(RECORD_FIELDS),
    }


def validate_records(payload: Any) -> list[ModelRecord]:
    """Validate a decoded JSON payload as an ordered list of records.

    The whole payload is rejected if any entry is malformed.

    Raises:
        RecordValidationError: If the payload is not a list of valid records
    """
    if not isinstance(payload, list):
        raise RecordValidationError(f"Expected a JSON array, got {type(payload).__name__}")
    try:
        return _records_adapter.validate_python(payload)
    except ValidationError as e:
        raise RecordValidationError(
            f"{e.error_count()} invalid field(s) in model records: {_first_error(e)}"
        ) from e


def strip_code_fence(text: str) -> str:
    """Remove a surrounding Markdown code fence, if any."""
    content = text.strip()
    if "```json" in content:
        content = content.split("```json")[1].split("```")[0].strip()
    elif "```" in content:
        content = content.split("```")[1].split("```")[0].strip()
    return content


def parse_records_json(text: str) -> list[ModelRecord]:
    """Parse raw response text into records.

    Raises:
        RecordValidationError: If the text is not JSON or fails validation
    """
    try:
        payload = json.loads(strip_code_fence(text))
    except json.JSONDecodeError as e:
        raise RecordValidationError(f"Response is not valid JSON: {e}") from e
    return validate_records(payload)


def _first_error(e: ValidationError) -> str:
    err = e.errors()[0]
    loc = ".".join(str(part) for part in err.get("loc", ()))
    return f"{loc}: {err.get('msg', 'invalid')}"
