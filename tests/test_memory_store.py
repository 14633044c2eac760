"""
Concurrency tests for the in-memory stores.
"""

from __future__ import annotations

import sys
import threading
from datetime import date, time

from app.domain.entities.booking import Booking, BookingStatus
from app.domain.entities.transaction import Transaction
from app.infrastructure.store.memory_store import MemoryBookingStore, MemoryTransactionStore


def _run_against_writer(write, reads, rounds: int = 2000) -> list[str]:
    errors: list[str] = []
    stop = threading.Event()

    def writer():
        while not stop.is_set():
            write()

    def reader():
        try:
            for _ in range(rounds):
                for read in reads:
                    read()
        except RuntimeError as e:
            errors.append(str(e))

    previous = sys.getswitchinterval()
    sys.setswitchinterval(1e-6)
    try:
        writer_thread = threading.Thread(target=writer)
        readers = [threading.Thread(target=reader) for _ in range(4)]
        writer_thread.start()
        for t in readers:
            t.start()
        for t in readers:
            t.join()
        stop.set()
        writer_thread.join()
    finally:
        sys.setswitchinterval(previous)
    return errors


def test_booking_reads_survive_concurrent_creates():
    """Listing while another thread creates bookings never sees a resizing dict."""
    store = MemoryBookingStore()
    booking = Booking(
        id=None,
        customer_id=1,
        specialist_id=1,
        service_id=1,
        booking_date=date(2024, 6, 1),
        booking_time=time(10, 0),
    )

    errors = _run_against_writer(
        lambda: store.create(booking),
        [
            lambda: store.list_by_date_range(date(2024, 1, 1), date(2024, 12, 31)),
            lambda: store.list_by_customer(1),
            lambda: store.list_by_status(BookingStatus.PENDING),
        ],
    )

    assert errors == []
    assert len(store.list_all()) > 0


def test_transaction_reads_survive_concurrent_creates():
    store = MemoryTransactionStore()
    transaction = Transaction(id=None, amount=10.0, payment_method="cash", transaction_date=date(2024, 6, 1))

    errors = _run_against_writer(
        lambda: store.create(transaction),
        [lambda: store.list_by_date_range(date(2024, 1, 1), date(2024, 12, 31))],
    )

    assert errors == []
