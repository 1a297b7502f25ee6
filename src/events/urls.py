EVENTS_PREFIX = "/api/events"

REGISTER_URL = f"{EVENTS_PREFIX}/register"
APPROVE_URL = f"{EVENTS_PREFIX}/approve"
CANCEL_URL = f"{EVENTS_PREFIX}/cancel"
RSVP_URL = f"{EVENTS_PREFIX}/rsvp"
LIST_REGISTRATIONS_URL = f"{EVENTS_PREFIX}/{{event_id}}/registrations"
GET_TICKET_URL = f"{EVENTS_PREFIX}/tickets/{{ticket_number}}"
