# ABOUTME: Mapper for a root action followed by optional chained child actions.
# ABOUTME: Request flags select children; child results are merged back under named properties.

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from linkedapi.errors import LinkedApiError
from linkedapi.mappers.base import BaseMapper, Completion, params_to_dict
from linkedapi.models.workflow import (
    ActionError,
    MappedResponse,
    ThenAction,
    WorkflowCompletion,
    WorkflowDefinition,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionConfig:
    """A request flag that adds a child action to the chain.

    Attributes:
        param_name: Wire name of the flag, e.g. retrieveSkills.
        action_type: Action type of the child.
        config_source: Wire name of the parameter whose fields configure the child.
    """

    param_name: str
    action_type: str
    config_source: str | None = None


@dataclass(frozen=True)
class ResponseMapping:
    """Where a child's result data is placed on the root result."""

    action_type: str
    target_property: str


class ThenWorkflowMapper(BaseMapper[Any, Any]):
    """Maps a root action with a then-chain of child actions.

    A child is requested when its flag is present in the parameters, whatever
    its value. Children are matched in the response by action type, never by
    position. A child that failed contributes its error to the response
    errors and leaves its property unset.
    """

    def __init__(
        self,
        base_action_type: str,
        action_configs: Sequence[ActionConfig],
        response_mappings: Sequence[ResponseMapping],
        default_params: Mapping[str, Any] | None = None,
        result_type: Any = None,
    ) -> None:
        super().__init__(base_action_type, result_type)
        self.action_configs = tuple(action_configs)
        self.response_mappings = tuple(response_mappings)
        self.default_params = dict(default_params or {})

    def map_request(self, params: BaseModel | Mapping[str, Any] | None) -> WorkflowDefinition:
        raw = params_to_dict(params)
        then = [
            self._build_child(raw, config)
            for config in self.action_configs
            if raw.get(config.param_name) is not None
        ]
        return {
            "actionType": self.action_type,
            **self.default_params,
            **self._clear_params(raw),
            "then": then,
        }

    def map_response(self, completion: Completion) -> MappedResponse[Any]:
        if isinstance(completion, list):
            if not completion:
                return MappedResponse(data=None)
            first, *rest = completion
            response = self._map_single(first)
            response.errors.extend(item.error for item in rest if item.error is not None)
            return response
        return self._map_single(completion)

    def _map_single(self, completion: WorkflowCompletion) -> MappedResponse[Any]:
        if completion.error is not None:
            return MappedResponse(data=None, errors=[completion.error])
        if not isinstance(completion.data, Mapping):
            return MappedResponse(data=self.validate_result(completion.data))

        result = dict(completion.data)
        children = self._parse_children(result.pop("then", None))
        errors: list[ActionError] = []
        for mapping in self.response_mappings:
            child = next((c for c in children if c.action_type == mapping.action_type), None)
            if child is None:
                continue
            if child.error is not None:
                errors.append(child.error)
                continue
            result[mapping.target_property] = child.data
        return MappedResponse(data=self.validate_result(result), errors=errors)

    def _parse_children(self, raw_children: Any) -> list[ThenAction]:
        """Decode the then entries of a root result.

        Raises:
            LinkedApiError: If an entry is not a valid child action result.
        """
        try:
            return [ThenAction.model_validate(child) for child in _as_list(raw_children)]
        except ValidationError as e:
            logger.warning(f"Unexpected then entry in {self.action_type} result: {e}")
            raise LinkedApiError.unknown_error(
                f"Unexpected chained result shape for {self.action_type}"
            ) from e

    def _clear_params(self, raw: dict[str, Any]) -> dict[str, Any]:
        removed = set()
        for config in self.action_configs:
            removed.add(config.param_name)
            if config.config_source:
                removed.add(config.config_source)
        return {key: value for key, value in raw.items() if key not in removed}

    @staticmethod
    def _build_child(raw: dict[str, Any], config: ActionConfig) -> dict[str, Any]:
        child: dict[str, Any] = {"actionType": config.action_type}
        if config.config_source and isinstance(raw.get(config.config_source), Mapping):
            child.update(raw[config.config_source])
        return child


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]
