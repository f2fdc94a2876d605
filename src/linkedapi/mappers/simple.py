# ABOUTME: Mappers for single-action workflows with and without result data.
# ABOUTME: Caller parameters are merged over defaults under the operation's action type.

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


class SimpleWorkflowMapper(BaseMapper[Any, Any]):
    """Maps a workflow consisting of one action returning one result."""

    def __init__(
        self,
        action_type: str,
        default_params: Mapping[str, Any] | None = None,
        result_type: Any = None,
    ) -> None:
        """Initialize the mapper.

        Args:
            action_type: Action type of the workflow root, e.g. st.openPost.
            default_params: Wire parameters sent unless the caller overrides them.
            result_type: Type the completion data is validated into.
        """
        super().__init__(action_type, result_type)
        self.default_params = dict(default_params or {})

    def map_request(self, params: BaseModel | Mapping[str, Any] | None) -> WorkflowDefinition:
        return {"actionType": self.action_type, **self.default_params, **params_to_dict(params)}

    def map_response(self, completion: Completion) -> MappedResponse[Any]:
        if isinstance(completion, list):
            data, errors = collect_list_completion(completion)
            return MappedResponse(data=[self.validate_result(item) for item in data], errors=errors)
        if completion.error is not None:
            return MappedResponse(data=None, errors=[completion.error])
        return MappedResponse(data=self.validate_result(completion.data))


class VoidWorkflowMapper(SimpleWorkflowMapper):
    """Maps a workflow whose action produces no data, only success or an error."""

    def __init__(self, action_type: str) -> None:
        super().__init__(action_type)

    def map_response(self, completion: Completion) -> MappedResponse[None]:
        if isinstance(completion, list):
            _, errors = collect_list_completion(completion)
            return MappedResponse(data=None, errors=errors)
        errors = [completion.error] if completion.error is not None else []
        return MappedResponse(data=None, errors=errors)
