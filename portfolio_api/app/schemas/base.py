"""Shared model configuration for all resource schemas."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys.

    Input is accepted under either the camelCase alias or the Python
    field name.  Unknown keys, including a client supplied ``id``, are
    ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )
