# ABOUTME: Base mapper contract translating typed parameters into workflow definitions.
# ABOUTME: Also decodes terminal completions into MappedResponse and validates result data.

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from linkedapi.errors import LinkedApiError
from linkedapi.models.base import ApiModel
from linkedapi.models.workflow import (
    ActionError,
    MappedResponse,
    WorkflowCompletion,
    WorkflowDefinition,
)

logger = logging.getLogger(__name__)

TParams = TypeVar("TParams")
TResult = TypeVar("TResult")

Completion = WorkflowCompletion | list[WorkflowCompletion]


def params_to_dict(params: BaseModel | Mapping[str, Any] | None) -> dict[str, Any]:
    """Convert caller parameters into a camelCase dict without None values.

    Args:
        params: A pydantic model, a plain mapping with wire keys, or None.

    Returns:
        A new dict safe to mutate.
    """
    if params is None:
        return {}
    if isinstance(params, ApiModel):
        return params.to_wire()
    if isinstance(params, BaseModel):
        return params.model_dump(by_alias=True, exclude_none=True, mode="json")
    return {
        key: value.to_wire() if isinstance(value, ApiModel) else value
        for key, value in params.items()
        if value is not None
    }


class BaseMapper(ABC, Generic[TParams, TResult]):
    """Translates one operation's parameters and completions.

    Mappers hold only immutable configuration and never raise on action-level
    errors; those are reported in MappedResponse.errors.
    """

    def __init__(self, action_type: str, result_type: Any = None) -> None:
        self.action_type = action_type
        self.result_type = result_type
        self._adapter: TypeAdapter[Any] | None = (
            TypeAdapter(result_type) if result_type is not None else None
        )

    @abstractmethod
    def map_request(self, params: TParams) -> WorkflowDefinition:
        """Build the workflow definition submitted for these parameters."""

    @abstractmethod
    def map_response(self, completion: Completion) -> MappedResponse[TResult]:
        """Decode a terminal completion into data and action errors."""

    def validate_result(self, data: Any) -> Any:
        """Coerce raw result data into the configured result type.

        Raises:
            LinkedApiError: If the server returned data of an unexpected shape.
        """
        if data is None or self._adapter is None:
            return data
        try:
            return self._adapter.validate_python(data)
        except ValidationError as e:
            logger.warning(f"Unexpected {self.action_type} result: {e}")
            raise LinkedApiError.unknown_error(
                f"Unexpected result shape for {self.action_type}"
            ) from e


def collect_list_completion(
    completion: list[WorkflowCompletion],
) -> tuple[list[Any], list[ActionError]]:
    """Split a list completion into item datas and item errors."""
    data = [item.data for item in completion if item.data is not None]
    errors = [item.error for item in completion if item.error is not None]
    return data, errors
