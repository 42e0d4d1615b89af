"""
Company GraphQL type definitions
"""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

import strawberry

if TYPE_CHECKING:
    from ...dbmodels import Companies


@strawberry.type
class Company:
    """Company type for GraphQL API."""

    id: UUID
    name: str
    url: str | None
    logo: str | None
    employees: int | None
    tranch: str | None
    description: str | None
    location: str | None
    address: str | None
    jobs: str | None
    jobslink: str | None
    sector: str | None
    twitter: str | None
    facebook: str | None
    instagram: str | None
    youtube: str | None
    created_at: datetime

    @classmethod
    def from_model(cls, company: "Companies") -> "Company":
        return cls(
            id=company.id,
            name=company.name,
            url=company.url,
            logo=company.logo,
            employees=company.employees,
            tranch=company.tranch,
            description=company.description,
            location=company.location,
            address=company.address,
            jobs=company.jobs,
            jobslink=company.jobslink,
            sector=company.sector,
            twitter=company.twitter,
            facebook=company.facebook,
            instagram=company.instagram,
            youtube=company.youtube,
            created_at=company.created_at,
        )
