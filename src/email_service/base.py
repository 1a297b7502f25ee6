from abc import ABC, abstractmethod
from uuid import UUID

from src.events.dtos import EventDTO


class EmailServiceBase(ABC):
    @abstractmethod
    async def send_registration_confirmation(
        self,
        to_address: str,
        participant_name: str,
        event: EventDTO,
        circle_url: str,
        payment_proof_url: str | None = None,
        registration_id: UUID | None = None,
    ) -> None:
        pass

    @abstractmethod
    async def send_registration_approval(
        self,
        to_address: str,
        participant_name: str,
        event: EventDTO,
        ticket_number: str,
        circle_url: str,
        registration_id: UUID | None = None,
    ) -> None:
        pass
