from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any
from uuid import UUID

import strawberry

from ...logging import get_logger

if TYPE_CHECKING:
    from ..types.company import Company

logger = get_logger(__name__)

# Arguments forwarded to company creation, in schema order
COMPANY_FIELDS = (
    "name",
    "url",
    "logo",
    "employees",
    "tranch",
    "description",
    "location",
    "address",
    "jobs",
    "jobslink",
    "sector",
    "twitter",
    "facebook",
    "instagram",
    "youtube",
)


async def post(info: strawberry.Info, args: Mapping[str, Any]) -> Company:
    """
    Create a company from the fixed set of company fields.

    Only the names in ``COMPANY_FIELDS`` are forwarded; anything else is
    dropped and absent fields are sent as ``None``. Values pass through as is.
    """
    data = {field: args.get(field) for field in COMPANY_FIELDS}
    company = await info.context["db"].mutation.create_company(data=data, info=info)

    logger.info("Company created", company_id=getattr(company, "id", None))
    return company


async def resolve_company_by_id(info: strawberry.Info, id: UUID) -> Company | None:
    company = await info.context["db"].query.company(id)
    if company is None:
        logger.info("Company not found", company_id=str(id))
    return company


async def resolve_companies(info: strawberry.Info, limit: int, offset: int) -> list[Company]:
    if limit < 0 or offset < 0:
        raise ValueError("limit and offset must not be negative")

    return await info.context["db"].query.companies(limit=limit, offset=offset)
