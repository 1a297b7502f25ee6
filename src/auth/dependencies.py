import abc

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import func, select

from src.auth.dtos import CurrentUser
from src.auth.tokens import decode_access_token
from src.config.database import async_session_manager
from src.events.errors import NotAuthenticatedError
from src.models.user import User

bearer_scheme = HTTPBearer(auto_error=False)


class UserReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_active_user_by_email(self, email: str) -> CurrentUser | None:
        raise NotImplementedError


class SqlUserReadModel(UserReadModel):
    async def get_active_user_by_email(self, email: str) -> CurrentUser | None:
        async with async_session_manager() as session:
            result = await session.execute(
                select(User).where(func.lower(User.email) == email.strip().lower())
            )
            user = result.scalar_one_or_none()
            if user is None or not user.is_active:
                return None
            return CurrentUser(uuid=user.uuid, email=user.email, is_superuser=bool(user.is_superuser))


def get_user_read_model() -> UserReadModel:
    return SqlUserReadModel()


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    read_model: UserReadModel = Depends(get_user_read_model),
) -> CurrentUser:
    """Resolve the bearer token to an active user or raise NotAuthenticatedError."""
    if credentials is None:
        raise NotAuthenticatedError()
    email = decode_access_token(credentials.credentials)
    if email is None:
        raise NotAuthenticatedError()
    user = await read_model.get_active_user_by_email(email)
    if user is None:
        raise NotAuthenticatedError()
    return user
