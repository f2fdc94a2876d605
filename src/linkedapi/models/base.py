# ABOUTME: Shared pydantic base model for payloads exchanged with the Linked API.
# ABOUTME: Maps snake_case attributes to the camelCase keys used on the wire.

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base model for wire payloads.

    Attributes are snake_case in Python and camelCase on the wire. Unknown
    keys are kept so new server fields are never dropped.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_wire(self) -> dict[str, Any]:
        """Serialize to a camelCase dict, leaving out unset (None) values."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
