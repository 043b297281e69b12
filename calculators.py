"""Derived values shown on the intake form.

All numeric inputs follow one policy: a blank or missing value counts as 0,
while text that is not a number raises ValueError.
"""
import datetime
import math
from dataclasses import dataclass
from typing import Optional

from intake_options import (
    COMPENSATION_COMMISSION,
    COMPENSATION_FIXED,
    CUSTOMER_TYPE_NEW,
    CUSTOMER_TYPE_RETURNING,
)

# --- Pricing ---
UNIT_PRICE = 1000  # yen per UNIT_MINUTES
UNIT_MINUTES = 10

# --- Next Reservation ---
NEW_CUSTOMER_INTERVAL_DAYS = 14
RETURNING_INTERVAL_DAYS = {
    '2回目': 21,
    '3回目': 28,
    '4回目以降': 30,
}
VISIT_COUNT_ALIASES = {
    '2nd visit': '2回目',
    '3rd visit': '3回目',
    '4th visit or later': '4回目以降',
}
DEFAULT_RETURNING_INTERVAL_DAYS = 30
DEFAULT_RESERVATION_TIME = datetime.time(10, 0)

CUSTOMER_TYPE_ALIASES = {
    'new': CUSTOMER_TYPE_NEW,
    'returning': CUSTOMER_TYPE_RETURNING,
}


def to_number(value):
    """Parses a form amount; blank means 0."""
    if value is None:
        return 0
    if isinstance(value, (int, float)):
        return value
    text = str(value).strip().replace(',', '')
    if not text:
        return 0
    number = float(text)
    if not math.isfinite(number):
        raise ValueError(f"Amount must be a finite number: {value!r}")
    return int(number) if number.is_integer() else number


def _finite(total):
    try:
        finite = math.isfinite(total)
    except OverflowError:
        finite = False
    if not finite:
        raise ValueError("Amount is out of range.")
    return total


def price_for_minutes(minutes, unit_price=UNIT_PRICE, unit_minutes=UNIT_MINUTES):
    """Price for a treatment length, e.g. 100 minutes -> 10000."""
    minutes = to_number(minutes)
    if minutes <= 0:
        return 0
    return round(_finite(minutes / unit_minutes * unit_price))


def normalize_customer_type(customer_type):
    value = (customer_type or '').strip()
    return CUSTOMER_TYPE_ALIASES.get(value.lower(), value)


def interval_days(customer_type, visit_count=''):
    """Days between this visit and the suggested next one."""
    if normalize_customer_type(customer_type) == CUSTOMER_TYPE_NEW:
        return NEW_CUSTOMER_INTERVAL_DAYS
    visit = (visit_count or '').strip()
    visit = VISIT_COUNT_ALIASES.get(visit.lower(), visit)
    return RETURNING_INTERVAL_DAYS.get(visit, DEFAULT_RETURNING_INTERVAL_DAYS)


def parse_business_day(value) -> Optional[datetime.date]:
    if isinstance(value, datetime.date):
        return value
    try:
        return datetime.date.fromisoformat((value or '').strip())
    except ValueError:
        return None


def suggest_next_reservation(business_day, customer_type, visit_count='') -> Optional[datetime.datetime]:
    """
    Suggested date/time for the next booking.

    Returns None when the business day is blank, not a YYYY-MM-DD date, or
    too close to the end of the calendar to add the interval.
    """
    day = parse_business_day(business_day)
    if day is None:
        return None
    try:
        suggested = day + datetime.timedelta(days=interval_days(customer_type, visit_count))
    except OverflowError:
        return None
    return datetime.datetime.combine(suggested, DEFAULT_RESERVATION_TIME)


def format_reservation(value):
    """Formats a suggestion the way a datetime-local input expects it."""
    return value.strftime('%Y-%m-%dT%H:%M') if value else ''


@dataclass
class NextReservationField:
    """
    Tracks the next-reservation input.

    The suggestion is applied on every recompute until the user types a value
    of their own; reset() hands control back to the suggestion.
    """
    value: str = ''
    manually_edited: bool = False

    def recompute(self, business_day, customer_type, visit_count=''):
        if not self.manually_edited:
            self.value = format_reservation(
                suggest_next_reservation(business_day, customer_type, visit_count))
        return self.value

    def edit(self, value):
        self.value = value
        self.manually_edited = True
        return self.value

    def reset(self, business_day, customer_type, visit_count=''):
        self.manually_edited = False
        return self.recompute(business_day, customer_type, visit_count)


def staff_payout(compensation_type, treatment_amount=0, option_amount=0, product_amount=0,
                 ticket_sale_amount=0, ticket_redemption_amount=0):
    """
    Sales total credited to the practitioner for one visit.

    Fixed-wage staff are credited with everything taken at the till. Commission
    staff are credited with options and products plus the treatment itself,
    valued at the ticket redemption amount when a ticket was used.
    """
    treatment = to_number(treatment_amount)
    option = to_number(option_amount)
    product = to_number(product_amount)
    ticket_sale = to_number(ticket_sale_amount)
    redemption = to_number(ticket_redemption_amount)

    if compensation_type == COMPENSATION_FIXED:
        return _finite(treatment + option + product + ticket_sale)
    if compensation_type == COMPENSATION_COMMISSION:
        if redemption > 0:
            return _finite(redemption + option + product)
        return _finite(treatment + option + product)
    raise ValueError(f"Unknown compensation type: {compensation_type!r}")
