# ABOUTME: Mapper for actions that return a list of items, such as searches.
# ABOUTME: Normalizes list, scalar, and missing data into a list of results.

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from linkedapi.mappers.base import (
    BaseMapper,
    Completion,
    collect_list_completion,
    params_to_dict,
)
from linkedapi.models.workflow import MappedResponse, WorkflowDefinition


class ArrayWorkflowMapper(BaseMapper[Any, list[Any]]):
    """Maps a single list-returning action.

    A scalar payload is wrapped in a one-element list and missing data
    becomes an empty list, so data is always a list unless the action failed.
    """

    def __init__(self, action_type: str, item_type: Any = None) -> None:
        super().__init__(action_type, list[item_type] if item_type is not None else None)
        self.item_type = item_type

    def map_request(self, params: BaseModel | Mapping[str, Any] | None) -> WorkflowDefinition:
        return {"actionType": self.action_type, **params_to_dict(params)}

    def map_response(self, completion: Completion) -> MappedResponse[list[Any]]:
        if isinstance(completion, list):
            data, errors = collect_list_completion(completion)
            return MappedResponse(data=self.validate_result(_flatten(data)), errors=errors)
        if completion.error is not None:
            return MappedResponse(data=None, errors=[completion.error])
        return MappedResponse(data=self.validate_result(_as_list(completion.data)))


def _as_list(data: Any) -> list[Any]:
    if data is None:
        return []
    if isinstance(data, list):
        return data
    return [data]


def _flatten(datas: list[Any]) -> list[Any]:
    items: list[Any] = []
    for data in datas:
        items.extend(_as_list(data))
    return items
