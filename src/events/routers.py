from fastapi import APIRouter

from .features.approve.router import router as approve_router
from .features.cancel_registration.router import router as cancel_registration_router
from .features.get_ticket.router import router as get_ticket_router
from .features.list_registrations.router import router as list_registrations_router
from .features.register.router import router as register_router
from .features.rsvp.router import router as rsvp_router

router = APIRouter()

router.include_router(register_router)
router.include_router(approve_router)
router.include_router(cancel_registration_router)
router.include_router(rsvp_router)
router.include_router(get_ticket_router)
router.include_router(list_registrations_router)
