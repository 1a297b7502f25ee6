from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class CurrentUser:
    """The authenticated caller of an operator endpoint."""

    uuid: UUID
    email: str
    is_superuser: bool = False
