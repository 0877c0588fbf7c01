"""Event models.

The ``data`` payload of an event depends on its type and is kept as raw
JSON; callers that need typed payloads validate it themselves.
"""

from __future__ import annotations

import enum
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from workos.known_or_unknown import KnownOrUnknown


class EventName(str, enum.Enum):
    """Event types known to this library.

    Event names the API adds later are still accepted wherever
    ``KnownOrUnknown[EventName]`` is used; they are kept as raw strings.
    """

    AUTHENTICATION_EMAIL_VERIFICATION_SUCCEEDED = "authentication.email_verification_succeeded"
    AUTHENTICATION_MAGIC_AUTH_FAILED = "authentication.magic_auth_failed"
    AUTHENTICATION_MAGIC_AUTH_SUCCEEDED = "authentication.magic_auth_succeeded"
    AUTHENTICATION_MFA_SUCCEEDED = "authentication.mfa_succeeded"
    AUTHENTICATION_OAUTH_SUCCEEDED = "authentication.oauth_succeeded"
    AUTHENTICATION_PASSWORD_FAILED = "authentication.password_failed"
    AUTHENTICATION_PASSWORD_SUCCEEDED = "authentication.password_succeeded"
    AUTHENTICATION_SSO_SUCCEEDED = "authentication.sso_succeeded"
    CONNECTION_ACTIVATED = "connection.activated"
    CONNECTION_DEACTIVATED = "connection.deactivated"
    CONNECTION_DELETED = "connection.deleted"
    DSYNC_ACTIVATED = "dsync.activated"
    DSYNC_DELETED = "dsync.deleted"
    DSYNC_GROUP_CREATED = "dsync.group.created"
    DSYNC_GROUP_DELETED = "dsync.group.deleted"
    DSYNC_GROUP_UPDATED = "dsync.group.updated"
    DSYNC_GROUP_USER_ADDED = "dsync.group.user_added"
    DSYNC_GROUP_USER_REMOVED = "dsync.group.user_removed"
    DSYNC_USER_CREATED = "dsync.user.created"
    DSYNC_USER_DELETED = "dsync.user.deleted"
    DSYNC_USER_UPDATED = "dsync.user.updated"
    EMAIL_VERIFICATION_CREATED = "email_verification.created"
    INVITATION_CREATED = "invitation.created"
    MAGIC_AUTH_CREATED = "magic_auth.created"
    ORGANIZATION_CREATED = "organization.created"
    ORGANIZATION_DELETED = "organization.deleted"
    ORGANIZATION_UPDATED = "organization.updated"
    ORGANIZATION_DOMAIN_VERIFICATION_FAILED = "organization_domain.verification_failed"
    ORGANIZATION_DOMAIN_VERIFIED = "organization_domain.verified"
    ORGANIZATION_MEMBERSHIP_CREATED = "organization_membership.created"
    ORGANIZATION_MEMBERSHIP_DELETED = "organization_membership.deleted"
    ORGANIZATION_MEMBERSHIP_UPDATED = "organization_membership.updated"
    PASSWORD_RESET_CREATED = "password_reset.created"
    ROLE_CREATED = "role.created"
    ROLE_DELETED = "role.deleted"
    ROLE_UPDATED = "role.updated"
    SESSION_CREATED = "session.created"
    USER_CREATED = "user.created"
    USER_DELETED = "user.deleted"
    USER_UPDATED = "user.updated"


class Event(BaseModel):
    """An entry of the events stream."""

    model_config = ConfigDict(extra="allow")

    object: str = "event"
    id: str
    event: KnownOrUnknown[EventName]
    data: dict[str, Any] = Field(default_factory=dict)
    created_at: Optional[datetime] = None
