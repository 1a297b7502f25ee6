from uuid import UUID

from sqlalchemy import Enum, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.models.base import Base, TimeStamp, uuid_fk

EMAIL_TYPES = ("registration_confirmation", "registration_approval")
EMAIL_STATUSES = ("pending", "sent", "failed")


class EmailLog(Base, TimeStamp):
    __tablename__ = TableNames.EMAIL_LOGS.value

    provider_message_id: Mapped[str | None] = mapped_column(
        String(255), nullable=True, index=True, unique=True
    )

    to_address: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    from_address: Mapped[str] = mapped_column(String(255), nullable=False)
    subject: Mapped[str] = mapped_column(String(500), nullable=False)

    # Bodies kept for audit
    html_body: Mapped[str | None] = mapped_column(Text, nullable=True)
    text_body: Mapped[str | None] = mapped_column(Text, nullable=True)

    email_type: Mapped[str] = mapped_column(
        Enum(*EMAIL_TYPES, name="email_type_enum"), nullable=False, index=True
    )
    registration_id: Mapped[UUID | None] = uuid_fk(
        TableNames.EVENT_REGISTRATIONS.value, ondelete="SET NULL", nullable=True, index=True
    )

    status: Mapped[str] = mapped_column(
        Enum(*EMAIL_STATUSES, name="email_status_enum"),
        default="pending",
        nullable=False,
        index=True,
    )
    error_message: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<EmailLog {self.provider_message_id} to={self.to_address} type={self.email_type} status={self.status}>"
