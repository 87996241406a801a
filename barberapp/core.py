# barberapp/core.py

import re
from datetime import date
from typing import Iterable, List

from .schemas import AppointmentStatus

_TIME_SLOT = re.compile(r"^([0-1]?[0-9]|2[0-3]):([0-5][0-9])$")

# Transitions the admin panel (and customer self-cancel) may perform
ALLOWED_TRANSITIONS = {
    AppointmentStatus.pending: {AppointmentStatus.confirmed, AppointmentStatus.cancelled},
    AppointmentStatus.confirmed: set(),
    AppointmentStatus.cancelled: set(),
}


class InvalidTransition(Exception):
    def __init__(self, current: AppointmentStatus, target: AppointmentStatus):
        self.current = current
        self.target = target
        super().__init__(f"Cannot change status from '{current.value}' to '{target.value}'")


def available_slots(configured: Iterable[str], booked: Iterable[str]) -> List[str]:
    """Configured slots minus booked ones, keeping the configured order."""
    taken = set(booked)
    return [slot for slot in configured if slot not in taken]


def is_bookable_date(day: date, today: date) -> bool:
    # Bookings open from tomorrow on, never on Sundays
    return day > today and day.weekday() != 6


def normalize_time_slot(value: str) -> str:
    """Validate H:MM / HH:MM (24h) and return it zero-padded as HH:MM."""
    match = _TIME_SLOT.match((value or "").strip())
    if match is None:
        raise ValueError("Time must use the HH:MM format (e.g. 14:30)")
    hour, minute = match.groups()
    return f"{int(hour):02d}:{minute}"


def can_transition(current: AppointmentStatus, target: AppointmentStatus) -> bool:
    return target in ALLOWED_TRANSITIONS.get(current, set())


def apply_transition(current: AppointmentStatus, target: AppointmentStatus) -> AppointmentStatus:
    if not can_transition(current, target):
        raise InvalidTransition(current, target)
    return target


def should_show_popup(active_banner_count: int, already_shown: bool) -> bool:
    return active_banner_count > 0 and not already_shown


def next_banner_index(current: int, count: int) -> int:
    if count <= 0:
        return 0
    return (current + 1) % count
