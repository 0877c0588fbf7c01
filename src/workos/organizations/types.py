"""Organization models."""

from __future__ import annotations

import enum
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from workos.known_or_unknown import KnownOrUnknown


class OrganizationDomainState(str, enum.Enum):
    """Verification state of a domain attached to an organization."""

    PENDING = "pending"
    VERIFIED = "verified"
    FAILED = "failed"
    LEGACY_VERIFIED = "legacy_verified"


class OrganizationDomain(BaseModel):
    """A domain attached to an :class:`Organization`."""

    model_config = ConfigDict(extra="allow")

    object: str = "organization_domain"
    id: str
    domain: str
    state: Optional[KnownOrUnknown[OrganizationDomainState]] = None


class Organization(BaseModel):
    """An organization, the top-level resource that groups users and connections."""

    model_config = ConfigDict(extra="allow")

    object: str = "organization"
    id: str
    name: str
    domains: list[OrganizationDomain] = Field(default_factory=list)
    allow_profiles_outside_organization: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
