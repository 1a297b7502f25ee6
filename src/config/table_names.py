from enum import Enum


class TableNames(str, Enum):
    USERS = "users"
    ORGANIZATIONS = "organizations"
    ORGANIZATION_MEMBERS = "organization_members"
    EVENTS = "events"
    EVENT_REGISTRATIONS = "event_registrations"
    EVENT_PAYMENT_PROOFS = "event_payment_proofs"
    EVENT_TICKETS = "event_tickets"
    EVENT_RSVPS = "event_rsvps"
    EMAIL_LOGS = "email_logs"
