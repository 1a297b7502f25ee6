from enum import Enum as PyEnum
from uuid import UUID

from sqlalchemy import Enum, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.models.base import Base, TimeStamp, uuid_fk


class MemberRole(str, PyEnum):
    ADMIN = "admin"
    MEMBER = "member"


class Organization(Base, TimeStamp):
    """A Circle. Owns events."""

    __tablename__ = TableNames.ORGANIZATIONS.value

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    username: Mapped[str] = mapped_column(String(100), nullable=False, unique=True, index=True)

    def __repr__(self) -> str:
        return f"<Organization {self.username}>"


class OrganizationMember(Base, TimeStamp):
    __tablename__ = TableNames.ORGANIZATION_MEMBERS.value
    __table_args__ = (UniqueConstraint("organization_id", "user_id"),)

    organization_id: Mapped[UUID] = uuid_fk(TableNames.ORGANIZATIONS.value, index=True)
    user_id: Mapped[UUID] = uuid_fk(TableNames.USERS.value, index=True)
    role: Mapped[str] = mapped_column(
        Enum(MemberRole, name="member_role_enum", values_callable=lambda x: [e.value for e in x]),
        default=MemberRole.MEMBER,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<OrganizationMember {self.user_id} {self.role} of {self.organization_id}>"
