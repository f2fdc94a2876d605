# ABOUTME: Mappers package translating operation parameters and workflow completions.
# ABOUTME: Exports the generic mapper kinds and the chained page-fetch mappers.

from linkedapi.mappers.array import ArrayWorkflowMapper
from linkedapi.mappers.base import BaseMapper, params_to_dict
from linkedapi.mappers.fetch import (
    FetchCompanyMapper,
    FetchPersonMapper,
    NvFetchCompanyMapper,
    NvFetchPersonMapper,
)
from linkedapi.mappers.simple import SimpleWorkflowMapper, VoidWorkflowMapper
from linkedapi.mappers.then import ActionConfig, ResponseMapping, ThenWorkflowMapper

__all__ = [
    "ActionConfig",
    "ArrayWorkflowMapper",
    "BaseMapper",
    "FetchCompanyMapper",
    "FetchPersonMapper",
    "NvFetchCompanyMapper",
    "NvFetchPersonMapper",
    "ResponseMapping",
    "SimpleWorkflowMapper",
    "ThenWorkflowMapper",
    "VoidWorkflowMapper",
    "params_to_dict",
]
