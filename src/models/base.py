from datetime import datetime
from uuid import UUID, uuid4

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, declarative_base, mapped_column
from sqlalchemy_utils import UUIDType

BaseModel = declarative_base()


def uuid_fk(table: str, ondelete: str = "CASCADE", nullable: bool = False, **kwargs):
    """UUID foreign key column pointing at ``<table>.uuid``."""
    return mapped_column(
        UUIDType(binary=False),
        sa.ForeignKey(f"{table}.uuid", ondelete=ondelete),
        nullable=nullable,
        **kwargs,
    )


class Base(BaseModel):
    __abstract__ = True

    uuid: Mapped[UUID] = mapped_column(UUIDType(binary=False), primary_key=True, default=uuid4)


class TimeStamp(BaseModel):
    __abstract__ = True

    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        server_default=sa.func.current_timestamp(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        server_default=sa.func.current_timestamp(),
        onupdate=sa.func.current_timestamp(),
        nullable=False,
    )
