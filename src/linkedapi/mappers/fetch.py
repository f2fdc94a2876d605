# ABOUTME: Chained mappers for opening person and company pages.
# ABOUTME: Declare which retrieval flags map to which child actions and result properties.

from linkedapi.mappers.then import ActionConfig, ResponseMapping, ThenWorkflowMapper
from linkedapi.models.actions import (
    FetchCompanyResult,
    FetchPersonResult,
    NvFetchCompanyResult,
    NvFetchPersonResult,
)

BASIC_INFO = {"basicInfo": True}


class FetchPersonMapper(ThenWorkflowMapper):
    """st.openPersonPage with optional profile section retrievals."""

    def __init__(self) -> None:
        super().__init__(
            "st.openPersonPage",
            action_configs=[
                ActionConfig("retrieveExperience", "st.retrievePersonExperience"),
                ActionConfig("retrieveEducation", "st.retrievePersonEducation"),
                ActionConfig("retrieveSkills", "st.retrievePersonSkills"),
                ActionConfig("retrieveLanguages", "st.retrievePersonLanguages"),
                ActionConfig("retrievePosts", "st.retrievePersonPosts", "postsRetrievalConfig"),
                ActionConfig(
                    "retrieveComments", "st.retrievePersonComments", "commentsRetrievalConfig"
                ),
                ActionConfig(
                    "retrieveReactions", "st.retrievePersonReactions", "reactionsRetrievalConfig"
                ),
            ],
            response_mappings=[
                ResponseMapping("st.retrievePersonExperience", "experiences"),
                ResponseMapping("st.retrievePersonEducation", "education"),
                ResponseMapping("st.retrievePersonSkills", "skills"),
                ResponseMapping("st.retrievePersonLanguages", "languages"),
                ResponseMapping("st.retrievePersonPosts", "posts"),
                ResponseMapping("st.retrievePersonComments", "comments"),
                ResponseMapping("st.retrievePersonReactions", "reactions"),
            ],
            default_params=BASIC_INFO,
            result_type=FetchPersonResult,
        )


class FetchCompanyMapper(ThenWorkflowMapper):
    """st.openCompanyPage with optional employees, decision makers and posts."""

    def __init__(self) -> None:
        super().__init__(
            "st.openCompanyPage",
            action_configs=[
                ActionConfig(
                    "retrieveEmployees", "st.retrieveCompanyEmployees", "employeesRetrievalConfig"
                ),
                ActionConfig("retrieveDMs", "st.retrieveCompanyDMs", "dmsRetrievalConfig"),
                ActionConfig("retrievePosts", "st.retrieveCompanyPosts", "postsRetrievalConfig"),
            ],
            response_mappings=[
                ResponseMapping("st.retrieveCompanyEmployees", "employees"),
                ResponseMapping("st.retrieveCompanyDMs", "dms"),
                ResponseMapping("st.retrieveCompanyPosts", "posts"),
            ],
            default_params=BASIC_INFO,
            result_type=FetchCompanyResult,
        )


class NvFetchCompanyMapper(ThenWorkflowMapper):
    """nv.openCompanyPage with optional employees and decision makers."""

    def __init__(self) -> None:
        super().__init__(
            "nv.openCompanyPage",
            action_configs=[
                ActionConfig(
                    "retrieveEmployees", "nv.retrieveCompanyEmployees", "employeesRetrievalConfig"
                ),
                ActionConfig("retrieveDMs", "nv.retrieveCompanyDMs", "dmsRetrievalConfig"),
            ],
            response_mappings=[
                ResponseMapping("nv.retrieveCompanyEmployees", "employees"),
                ResponseMapping("nv.retrieveCompanyDMs", "dms"),
            ],
            default_params=BASIC_INFO,
            result_type=NvFetchCompanyResult,
        )


class NvFetchPersonMapper(ThenWorkflowMapper):
    """nv.openPersonPage; no child retrievals are offered."""

    def __init__(self) -> None:
        super().__init__(
            "nv.openPersonPage",
            action_configs=[],
            response_mappings=[],
            default_params=BASIC_INFO,
            result_type=NvFetchPersonResult,
        )
