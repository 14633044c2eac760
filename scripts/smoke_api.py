#!/usr/bin/env python3
"""Smoke test against a running booking API."""

import sys
from datetime import date, timedelta

import httpx


BASE_URL = "http://127.0.0.1:8001"


def create_guest_booking() -> int | None:
    print("=" * 60)
    print("Testing POST /api/bookings/guest")
    print("=" * 60)

    payload = {
        "customer_name": "Smoke Test",
        "customer_email": "smoke@example.com",
        "customer_phone": "0100",
        "service_id": 1,
        "specialist_id": 1,
        "booking_date": (date.today() + timedelta(days=2)).isoformat(),
        "booking_time": "10:00",
        "note": "created by smoke_api.py",
    }

    try:
        response = httpx.post(f"{BASE_URL}/api/bookings/guest", json=payload, timeout=10.0)
        response.raise_for_status()
        data = response.json()
        print(f"✅ Booking {data['id']} created with status {data['status']}")
        return data["id"]
    except httpx.HTTPStatusError as e:
        print(f"❌ HTTP Error: {e.response.status_code}")
        print(f"Response: {e.response.text}")
        return None
    except httpx.HTTPError as e:
        print(f"❌ Error: {e}")
        return None


def complete_booking(booking_id: int) -> bool:
    print("\n" + "=" * 60)
    print(f"Testing PATCH /api/admin/bookings/{booking_id}/status")
    print("=" * 60)

    try:
        response = httpx.patch(
            f"{BASE_URL}/api/admin/bookings/{booking_id}/status",
            json={"status": "completed"},
            timeout=10.0,
        )
        response.raise_for_status()
        print(f"✅ Status is now {response.json()['status']}")
        return True
    except httpx.HTTPError as e:
        print(f"❌ Error: {e}")
        return False


def fetch_report() -> bool:
    print("\n" + "=" * 60)
    print("Testing GET /api/admin/reports")
    print("=" * 60)

    params = {
        "start_date": date.today().isoformat(),
        "end_date": (date.today() + timedelta(days=30)).isoformat(),
        "period": "Next 30 days",
    }
    try:
        response = httpx.get(f"{BASE_URL}/api/admin/reports", params=params, timeout=10.0)
        response.raise_for_status()
        data = response.json()
        print(f"✅ {data['total_bookings']} bookings, completion rate {data['completion_rate']:.1f}%")
        for row in data["revenue_by_service"]:
            print(f"  {row['name']}: {row['value']}")
        return True
    except httpx.HTTPError as e:
        print(f"❌ Error: {e}")
        return False


def main():
    print("\n🚀 Testing Booking API\n")

    try:
        httpx.get(f"{BASE_URL}/health", timeout=5.0)
        print("✅ Server is running\n")
    except httpx.HTTPError:
        print("❌ Server is not running!")
        print("   Please start it with: uvicorn app.main:app --reload --port 8001")
        sys.exit(1)

    booking_id = create_guest_booking()
    if booking_id is not None:
        complete_booking(booking_id)
    fetch_report()

    print("\n" + "=" * 60)
    print("✅ Smoke test complete!")
    print("=" * 60 + "\n")


if __name__ == "__main__":
    main()
