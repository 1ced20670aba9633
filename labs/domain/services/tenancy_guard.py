"""
Domain Service - Tenancy guard

Every request addressed to a company (or to one employee) is checked against
the caller's session before any data is read or written.
"""

from uuid import UUID

import structlog

from labs.domain.entities.errors import NotFoundError, TenancyError
from labs.domain.entities.organization import User
from labs.domain.entities.session import UserSession
from labs.domain.repositories.organization import IUserRepository

logger = structlog.get_logger(__name__)


class TenancyGuard:
    """Confirms that a session may act on a company or on a user."""

    def __init__(self, user_repository: IUserRepository):
        self.user_repository = user_repository

    async def check_employee_belonging(
        self, company_id: UUID, session: UserSession
    ) -> None:
        """
        Ensure the session user is an employee of the addressed company.

        Args:
            company_id: Company taken from the request path
            session: Decoded caller session

        Raises:
            TenancyError: If the session company differs from the path company
                or the session user is not (or no longer) part of it
        """
        if company_id != session.company_id:
            logger.warning(
                "tenancy.company_mismatch",
                company_id=str(company_id),
                session_company_id=str(session.company_id),
                user_id=str(session.user_id),
            )
            raise TenancyError(details={"company_id": str(company_id)})

        user = await self.user_repository.find_one(
            id=session.user_id, company_id=company_id
        )
        if user is None:
            logger.warning(
                "tenancy.user_not_in_company",
                company_id=str(company_id),
                user_id=str(session.user_id),
            )
            raise TenancyError(details={"company_id": str(company_id)})

    async def check_employee_session(self, user_id: UUID, session: UserSession) -> None:
        """
        Ensure the addressed user is the session user itself.

        Raises:
            TenancyError: If the path user is someone else or has left the
                session company
        """
        if user_id != session.user_id:
            logger.warning(
                "tenancy.user_mismatch",
                user_id=str(user_id),
                session_user_id=str(session.user_id),
            )
            raise TenancyError(
                "Session does not belong to the requested user",
                details={"user_id": str(user_id)},
            )

        user = await self.user_repository.find_one(
            id=user_id, company_id=session.company_id
        )
        if user is None:
            logger.warning(
                "tenancy.user_not_in_company",
                company_id=str(session.company_id),
                user_id=str(user_id),
            )
            raise TenancyError(
                "Session does not belong to the requested user",
                details={"user_id": str(user_id)},
            )

    async def ensure_member(self, company_id: UUID, user_id: UUID) -> User:
        """Return the addressed employee, raising NotFoundError outside the company."""
        user = await self.user_repository.find_one(id=user_id, company_id=company_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user
