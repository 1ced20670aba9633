"""
Application Use Cases - Authentication

Employee sign up (which creates the company and its manager) and sign in.
"""

import structlog

from labs.application.dtos.auth_dto import (
    SigninDTO,
    SigninResponseDTO,
    SigninUserDTO,
    SignupDTO,
)
from labs.application.dtos.common import CreatedDTO
from labs.domain.entities.base import utc_now
from labs.domain.entities.errors import (
    AuthenticationError,
    DuplicateError,
    NotFoundError,
)
from labs.domain.entities.organization import Company, Role, User
from labs.domain.ports.password_hasher import IPasswordHasher
from labs.domain.ports.token_service import ITokenService
from labs.domain.repositories.organization import (
    ICompanyRepository,
    IRoleRepository,
    IUserRepository,
)
from labs.shared.consts import DEFAULT_ROLE

logger = structlog.get_logger(__name__)


class AuthUseCase:
    """Use case for employee authentication."""

    def __init__(
        self,
        user_repository: IUserRepository,
        company_repository: ICompanyRepository,
        role_repository: IRoleRepository,
        password_hasher: IPasswordHasher,
        token_service: ITokenService,
    ):
        self.user_repository = user_repository
        self.company_repository = company_repository
        self.role_repository = role_repository
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def signup(self, payload: SignupDTO) -> CreatedDTO:
        """
        Register a new company and its first user.

        The user receives the default role of the new company and is recorded
        as the creator of both the company and the role.

        Raises:
            DuplicateError: If the email is already registered
        """
        email = payload.email.lower()
        if await self.user_repository.find_by_email(email):
            raise DuplicateError("Email already in use", details={"email": email})

        user = User(
            first_name=payload.first_name,
            last_name=payload.last_name,
            email=email,
            password=self.password_hasher.hash(payload.password),
            status=True,
        )
        company = Company(name=payload.company_name, created_by_user_id=user.id)
        role = Role(
            name=DEFAULT_ROLE, company_id=company.id, created_by_user_id=user.id
        )
        user.company_id = company.id
        user.role_id = role.id

        await self.company_repository.create(company)
        await self.role_repository.create(role)
        await self.user_repository.create(user)

        logger.info(
            "Company registered",
            company_id=str(company.id),
            user_id=str(user.id),
        )
        return CreatedDTO(id=user.id)

    async def signin(self, payload: SigninDTO) -> SigninResponseDTO:
        """
        Authenticate an active employee and issue an access token.

        Raises:
            NotFoundError: If no active user has this email
            AuthenticationError: If the password does not match
        """
        user = await self.user_repository.find_one(
            email=payload.email.lower(), status=True
        )
        if user is None:
            raise NotFoundError("User")

        if not self.password_hasher.verify(payload.password, user.password):
            logger.warning("Sign in rejected", user_id=str(user.id))
            raise AuthenticationError("Invalid email or password")

        roles = []
        if user.role_id is not None:
            role = await self.role_repository.find_by_id(user.role_id)
            if role is not None:
                roles.append(role)

        user.last_login = utc_now()
        await self.user_repository.update(user)

        logger.info("User signed in", user_id=str(user.id))
        return SigninResponseDTO(
            access_token=self.token_service.issue(user, roles),
            user=SigninUserDTO(
                id=user.id,
                name=user.full_name,
                email=user.email,
                profile_picture=user.profile_picture,
                work_company_id=user.company_id,
            ),
        )
