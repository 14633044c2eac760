from __future__ import annotations

from datetime import date, time

import pytest

from app.application.exceptions import InvalidArgumentError
from app.application.utils.date_parser import parse_booking_date, parse_booking_time
from app.application.utils.slots import overlaps, slot_bounds
from app.application.utils.status import parse_booking_status, parse_transaction_status
from app.domain.entities.booking import BookingStatus
from app.domain.entities.transaction import TransactionStatus


def test_date_parsing():
    assert parse_booking_date("2024-03-15") == date(2024, 3, 15)
    assert parse_booking_date("03/15/2024") == date(2024, 3, 15)
    assert parse_booking_date(date(2024, 3, 15)) == date(2024, 3, 15)

    with pytest.raises(InvalidArgumentError) as exc_info:
        parse_booking_date("next friday")
    assert exc_info.value.field == "booking_date"


def test_time_parsing():
    assert parse_booking_time("14:00") == time(14, 0)
    assert parse_booking_time("09:30:00") == time(9, 30)
    assert parse_booking_time("9:30 am") == time(9, 30)
    assert parse_booking_time("2pm") == time(14, 0)
    assert parse_booking_time("12am") == time(0, 0)

    for bad in ("25:00", "noon", "13pm", ""):
        with pytest.raises(InvalidArgumentError):
            parse_booking_time(bad)


def test_status_tokens_are_case_insensitive():
    assert parse_booking_status("completed") == BookingStatus.COMPLETED
    assert parse_booking_status(" Cancelled ") == BookingStatus.CANCELLED
    assert parse_transaction_status("refunded") == TransactionStatus.REFUNDED

    with pytest.raises(InvalidArgumentError):
        parse_booking_status("bogus")
    with pytest.raises(InvalidArgumentError):
        parse_booking_status(None)


def test_slot_overlap_is_half_open():
    day = date(2024, 1, 26)
    a = slot_bounds(day, time(10, 0), 60)
    touching = slot_bounds(day, time(11, 0), 30)
    inside = slot_bounds(day, time(10, 30), 30)

    assert overlaps(*a, *inside)
    assert not overlaps(*a, *touching)
