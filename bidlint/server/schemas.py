from typing import Any

from pydantic import BaseModel, Field, model_validator


class ValidateRequest(BaseModel):
    payload: Any = Field(
        ...,
        examples=['{"id": "req-1", "imp": [{"id": "1", "banner": {"w": 300, "h": 250}}], "at": 1}'],
        description="Bid request as JSON text, or as an already-decoded JSON object.",
    )
    rule_groups: list[str] | None = Field(
        default=None,
        examples=[["eq", "core"]],
        description="Rule groups to run; every group when omitted.",
    )

    @model_validator(mode="before")
    @classmethod
    def _compat_bid_request(cls, data: Any) -> Any:
        """Accept ``bid_request`` as an alias of ``payload``."""
        if isinstance(data, dict) and "bid_request" in data and "payload" not in data:
            data["payload"] = data.pop("bid_request")
        return data


class JsonTextRequest(BaseModel):
    payload: Any = Field(
        ...,
        examples=['{"id":"req-1","at":1}'],
        description="JSON text to reformat; decoded JSON values are re-serialized first.",
    )
    indent: int = Field(default=2, ge=0, le=8)
