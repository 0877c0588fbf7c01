"""A module for interacting with the WorkOS Organizations API.

`WorkOS Docs: Organizations <https://workos.com/docs/reference/organization>`_
"""

from workos.organizations.operations import (
    AsyncOrganizations,
    ListOrganizationsParams,
    Organizations,
)
from workos.organizations.types import (
    Organization,
    OrganizationDomain,
    OrganizationDomainState,
)

__all__ = [
    "AsyncOrganizations",
    "ListOrganizationsParams",
    "Organization",
    "OrganizationDomain",
    "OrganizationDomainState",
    "Organizations",
]
