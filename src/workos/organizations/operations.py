"""List Organizations.

``GET /organizations`` follows the same cursor protocol as
:mod:`workos.events.operations`: one page per call, resumed by echoing
``page.next_cursor`` as ``pagination.after``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict, Field

from workos.client.response import parse_model
from workos.models import PaginatedList, PaginationParams
from workos.organizations.types import Organization
from workos.query import compose_query

if TYPE_CHECKING:
    from workos.client import AsyncWorkOs, WorkOs


class ListOrganizationsParams(BaseModel):
    """Parameters for :meth:`Organizations.list_organizations`."""

    model_config = ConfigDict(populate_by_name=True)

    pagination: PaginationParams = Field(default_factory=PaginationParams)
    domains: list[str] = Field(
        default_factory=list,
        serialization_alias="domains[]",
        description="Only return organizations with any of these domains",
    )


class Organizations:
    """Organizations API handle bound to a :class:`~workos.client.WorkOs` client.

    `WorkOS Docs: Organizations <https://workos.com/docs/reference/organization>`_
    """

    def __init__(self, workos: WorkOs) -> None:
        self._workos = workos

    def list_organizations(
        self, params: Optional[ListOrganizationsParams] = None
    ) -> PaginatedList[Organization]:
        """Fetch one page of organizations.

        Raises:
            UnauthorizedError: If the API key is rejected.
            ApiError: On any other error status.
            ConnectionError_: On network failure.
            DeserializationError: If the body is not a paginated list.
        """
        query = compose_query(params or ListOrganizationsParams())
        body = self._workos.get_json("/organizations", params=query)
        return parse_model(PaginatedList[Organization], body)


class AsyncOrganizations:
    """Organizations API handle bound to an :class:`~workos.client.AsyncWorkOs` client."""

    def __init__(self, workos: AsyncWorkOs) -> None:
        self._workos = workos

    async def list_organizations(
        self, params: Optional[ListOrganizationsParams] = None
    ) -> PaginatedList[Organization]:
        query = compose_query(params or ListOrganizationsParams())
        body = await self._workos.get_json("/organizations", params=query)
        return parse_model(PaginatedList[Organization], body)
