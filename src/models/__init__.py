from .base import Base, BaseModel, TimeStamp, uuid_fk
from .email_log import EmailLog
from .organization import MemberRole, Organization, OrganizationMember
from .user import User

__all__ = [
    "Base",
    "BaseModel",
    "TimeStamp",
    "uuid_fk",
    "User",
    "Organization",
    "OrganizationMember",
    "MemberRole",
    "EmailLog",
]
