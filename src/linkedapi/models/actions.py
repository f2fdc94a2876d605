# ABOUTME: Parameter and result models for the LinkedIn actions exposed by the client.
# ABOUTME: Pure data shapes; request/response translation lives in linkedapi.mappers.

from typing import Annotated, Literal

from pydantic import Field

from linkedapi.models.base import ApiModel

ConnectionStatus = Literal["connected", "pending", "notConnected"]
ReactionType = Literal["like", "celebrate", "support", "love", "insightful", "funny"]
PostType = Literal["original", "repost"]


class LimitParams(ApiModel):
    """Limit on the number of items a retrieval returns."""

    limit: int | None = None


class LimitSinceParams(LimitParams):
    """Limit plus a lower bound on item time (ISO 8601)."""

    since: str | None = None


class PeopleFilter(ApiModel):
    """Filter shared by people searches and connection/employee retrievals."""

    first_name: str | None = None
    last_name: str | None = None
    position: str | None = None
    locations: list[str] | None = None
    industries: list[str] | None = None
    current_companies: list[str] | None = None
    previous_companies: list[str] | None = None
    schools: list[str] | None = None
    years_of_experience: list[str] | None = None


class CompanyFilter(ApiModel):
    """Filter for company searches."""

    sizes: list[str] | None = None
    locations: list[str] | None = None
    industries: list[str] | None = None
    annual_revenue: dict[str, str] | None = None


class EmployeesRetrievalConfig(LimitParams):
    """Configuration of a company employees retrieval."""

    filter: PeopleFilter | None = None


# Posts, comments, reactions


class Post(ApiModel):
    url: str | None = None
    time: str | None = None
    type: PostType | None = None
    repost_text: str | None = None
    text: str | None = None
    images: list[str] | None = None
    has_video: bool | None = None
    has_poll: bool | None = None
    reaction_count: int | None = None
    comment_count: int | None = None


class Comment(ApiModel):
    post_url: str | None = None
    time: str | None = None
    text: str | None = None
    image: str | None = None
    reaction_count: int | None = None


class Reaction(ApiModel):
    post_url: str | None = None
    time: str | None = None
    reaction_type: ReactionType | None = None


class FetchPostParams(ApiModel):
    post_url: str


class ReactToPostParams(ApiModel):
    post_url: str
    type: ReactionType


class CommentOnPostParams(ApiModel):
    post_url: str
    text: str


class CreatePostParams(ApiModel):
    text: str


class CreatePostResult(ApiModel):
    url: str | None = None


# People


class PersonExperience(ApiModel):
    position: str | None = None
    company_name: str | None = None
    company_hashed_url: str | None = None
    employment_type: str | None = None
    location_type: str | None = None
    description: str | None = None
    duration: int | None = None
    start_time: str | None = None
    end_time: str | None = None
    location: str | None = None


class PersonEducation(ApiModel):
    school_name: str | None = None
    school_hashed_url: str | None = None
    details: str | None = None


class PersonSkill(ApiModel):
    name: str | None = None


class PersonLanguage(ApiModel):
    name: str | None = None
    proficiency: str | None = None


class Person(ApiModel):
    """Basic profile information shared by standard and Sales Navigator pages."""

    name: str | None = None
    public_url: str | None = None
    hashed_url: str | None = None
    headline: str | None = None
    location: str | None = None
    country_code: str | None = None
    position: str | None = None
    company_name: str | None = None
    company_hashed_url: str | None = None


class FetchPersonParams(ApiModel):
    """Open a person page, optionally chaining retrievals of profile sections.

    Each retrieve_* flag that is set (True or False) adds the matching
    child action to the workflow.
    """

    person_url: str
    retrieve_experience: bool | None = None
    retrieve_education: bool | None = None
    retrieve_skills: bool | None = None
    retrieve_languages: bool | None = None
    retrieve_posts: bool | None = None
    retrieve_comments: bool | None = None
    retrieve_reactions: bool | None = None
    posts_retrieval_config: LimitSinceParams | None = None
    comments_retrieval_config: LimitSinceParams | None = None
    reactions_retrieval_config: LimitSinceParams | None = None


class FetchPersonResult(Person):
    experiences: list[PersonExperience] | None = None
    education: list[PersonEducation] | None = None
    skills: list[PersonSkill] | None = None
    languages: list[PersonLanguage] | None = None
    posts: list[Post] | None = None
    comments: list[Comment] | None = None
    reactions: list[Reaction] | None = None


class NvFetchPersonParams(ApiModel):
    person_hashed_url: str


class NvFetchPersonResult(Person):
    pass


class SearchPeopleParams(ApiModel):
    term: str | None = None
    limit: int | None = None
    filter: PeopleFilter | None = None


class SearchPeopleResult(ApiModel):
    name: str | None = None
    public_url: str | None = None
    headline: str | None = None
    location: str | None = None


class NvSearchPeopleResult(ApiModel):
    name: str | None = None
    hashed_url: str | None = None
    position: str | None = None
    location: str | None = None


# Companies


class CompanyEmployee(ApiModel):
    name: str | None = None
    public_url: str | None = None
    hashed_url: str | None = None
    headline: str | None = None
    position: str | None = None
    location: str | None = None
    country_code: str | None = None


class FetchCompanyParams(ApiModel):
    company_url: str
    retrieve_employees: bool | None = None
    retrieve_dms: Annotated[bool | None, Field(alias="retrieveDMs")] = None
    retrieve_posts: bool | None = None
    employees_retrieval_config: EmployeesRetrievalConfig | None = None
    dms_retrieval_config: LimitParams | None = None
    posts_retrieval_config: LimitSinceParams | None = None


class FetchCompanyResult(ApiModel):
    name: str | None = None
    public_url: str | None = None
    description: str | None = None
    location: str | None = None
    headquarters: str | None = None
    industry: str | None = None
    specialties: str | None = None
    website: str | None = None
    employee_count: int | None = None
    year_founded: int | None = None
    venture_financing: bool | None = None
    jobs_count: int | None = None
    employees: list[CompanyEmployee] | None = None
    dms: list[CompanyEmployee] | None = None
    posts: list[Post] | None = None


class NvFetchCompanyParams(ApiModel):
    company_hashed_url: str
    retrieve_employees: bool | None = None
    retrieve_dms: Annotated[bool | None, Field(alias="retrieveDMs")] = None
    employees_retrieval_config: EmployeesRetrievalConfig | None = None
    dms_retrieval_config: LimitParams | None = None


class NvFetchCompanyResult(ApiModel):
    name: str | None = None
    public_url: str | None = None
    description: str | None = None
    location: str | None = None
    headquarters: str | None = None
    industry: str | None = None
    website: str | None = None
    employee_count: int | None = None
    year_founded: int | None = None
    employees: list[CompanyEmployee] | None = None
    dms: list[CompanyEmployee] | None = None


class SearchCompaniesParams(ApiModel):
    term: str | None = None
    limit: int | None = None
    filter: CompanyFilter | None = None


class SearchCompanyResult(ApiModel):
    name: str | None = None
    public_url: str | None = None
    industry: str | None = None
    location: str | None = None


class NvSearchCompanyResult(ApiModel):
    name: str | None = None
    hashed_url: str | None = None
    industry: str | None = None
    employee_count: int | None = None


# Connections


class SendConnectionRequestParams(ApiModel):
    person_url: str
    note: str | None = None
    email: str | None = None


class CheckConnectionStatusParams(ApiModel):
    person_url: str


class CheckConnectionStatusResult(ApiModel):
    connection_status: ConnectionStatus


class WithdrawConnectionRequestParams(ApiModel):
    person_url: str
    unfollow: bool | None = None


class RemoveConnectionParams(ApiModel):
    person_url: str


class RetrieveConnectionsParams(LimitParams):
    filter: PeopleFilter | None = None


class RetrieveConnectionsResult(ApiModel):
    name: str | None = None
    public_url: str | None = None
    headline: str | None = None
    location: str | None = None


class RetrievePendingRequestsResult(ApiModel):
    name: str | None = None
    public_url: str | None = None
    headline: str | None = None


# Messaging


class SendMessageParams(ApiModel):
    person_url: str
    text: str


class NvSendMessageParams(SendMessageParams):
    subject: str


class SyncConversationParams(ApiModel):
    person_url: str


class NvSyncConversationParams(SyncConversationParams):
    pass


# Account statistics


class RetrieveSSIResult(ApiModel):
    ssi: float | None = None
    industry_top: float | None = None
    network_top: float | None = None


class RetrievePerformanceResult(ApiModel):
    followers_count: int | None = None
    post_views_last_7_days: int | None = None
    profile_views_last_90_days: int | None = None
    search_appearances_previous_week: int | None = None
