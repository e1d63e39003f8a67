"""
Shared base for API schemas.

Python code uses snake_case; the JSON wire format uses camelCase. Both
spellings are accepted on input, responses are emitted in camelCase.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def _to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


# Timestamps are stored naive in UTC; aware inputs are converted
NaiveUTCDatetime = Annotated[datetime, AfterValidator(_to_naive_utc)]


class CamelModel(BaseModel):
    """Base model with the camelCase wire format."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
