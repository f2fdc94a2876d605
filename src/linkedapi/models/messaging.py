# ABOUTME: Models for conversation polling and API usage statistics.
# ABOUTME: These endpoints bypass workflows and return results synchronously.

from typing import Literal

from linkedapi.models.base import ApiModel

ConversationType = Literal["st", "nv"]
MessageSender = Literal["us", "them"]


class ConversationPollRequest(ApiModel):
    """One conversation to poll for new messages."""

    person_url: str
    type: ConversationType
    since: str | None = None


class Message(ApiModel):
    id: str
    sender: MessageSender
    text: str | None = None
    time: str | None = None


class ConversationPollResult(ApiModel):
    """Messages of one polled conversation."""

    person_url: str
    type: ConversationType
    since: str | None = None
    messages: list[Message] = []


class ApiUsageAction(ApiModel):
    """One action executed on the account within the requested window."""

    action_type: str
    success: bool
    time: str
