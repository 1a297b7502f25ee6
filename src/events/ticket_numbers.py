"""Ticket number generation.

A ticket number is ``<code><seq><dd><yy>``: three upper-case alphanumerics
taken from the event title (padded with ``X``, ``EVT`` when the title has
none), the per-event sequence zero-padded to four digits, then the day and the
two-digit year of the event date. ``Tech Summit 2025!`` as the 7th ticket of an
event on 2025-03-14 gives ``TEC00071425``.
"""

import logging
import re
from datetime import date

from src.events.validation import parse_iso_date

logger = logging.getLogger(__name__)

NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")
FALLBACK_CODE = "EVT"
CODE_LENGTH = 3
SEQUENCE_WIDTH = 4


def event_code(event_title: str) -> str:
    clean_title = NON_ALNUM.sub("", event_title or "")
    return (clean_title[:CODE_LENGTH] or FALLBACK_CODE).upper().ljust(CODE_LENGTH, "X")


def generate_ticket_number(event_title: str, seq_num: int, event_date: date | str) -> str:
    if seq_num < 1:
        raise ValueError(f"Ticket sequence must start at 1, got {seq_num}")
    if seq_num >= 10 ** SEQUENCE_WIDTH:
        # rendered at natural width, the code grows past 11 characters
        logger.warning("Ticket sequence %s overflows %s digits for %r", seq_num, SEQUENCE_WIDTH, event_title)

    if isinstance(event_date, str):
        event_date = parse_iso_date(event_date)

    seq = str(seq_num).zfill(SEQUENCE_WIDTH)
    return f"{event_code(event_title)}{seq}{event_date.day:02d}{event_date.year % 100:02d}"
