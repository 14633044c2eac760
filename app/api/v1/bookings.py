from fastapi import APIRouter, Depends, Query

from app.api.errors import to_http_exception
from app.api.v1.schemas import (
    BookingCreateSchema,
    BookingResponseSchema,
    GuestBookingCreateSchema,
    StatusUpdateSchema,
)
from app.application.exceptions import BookingEngineError
from app.application.use_cases.booking import BookingLifecycleManager
from app.domain.entities.booking import BookingFilter
from app.wiring.dependencies import get_booking_manager

router = APIRouter()


@router.post("/bookings", response_model=BookingResponseSchema, status_code=201)
def create_booking(
    req: BookingCreateSchema,
    manager: BookingLifecycleManager = Depends(get_booking_manager),
):
    try:
        view = manager.create_for_customer(
            customer_id=req.customer_id,
            service_id=req.service_id,
            specialist_id=req.specialist_id,
            booking_date=req.booking_date,
            booking_time=req.booking_time,
            note=req.note,
        )
    except BookingEngineError as e:
        raise to_http_exception(e)
    return BookingResponseSchema.model_validate(view)


@router.post("/bookings/guest", response_model=BookingResponseSchema, status_code=201)
def create_guest_booking(
    req: GuestBookingCreateSchema,
    manager: BookingLifecycleManager = Depends(get_booking_manager),
):
    try:
        view = manager.create_guest(
            name=req.customer_name,
            email=req.customer_email,
            phone=req.customer_phone,
            service_id=req.service_id,
            specialist_id=req.specialist_id,
            booking_date=req.booking_date,
            booking_time=req.booking_time,
            note=req.note,
        )
    except BookingEngineError as e:
        raise to_http_exception(e)
    return BookingResponseSchema.model_validate(view)


@router.get("/bookings", response_model=list[BookingResponseSchema])
def list_customer_bookings(
    customer_id: int = Query(...),
    manager: BookingLifecycleManager = Depends(get_booking_manager),
):
    try:
        views = manager.list_by_customer(customer_id)
    except BookingEngineError as e:
        raise to_http_exception(e)
    return [BookingResponseSchema.model_validate(v) for v in views]


@router.get("/admin/bookings", response_model=list[BookingResponseSchema])
def list_bookings(
    start_date: str | None = None,
    end_date: str | None = None,
    status: str | None = None,
    customer_id: int | None = None,
    manager: BookingLifecycleManager = Depends(get_booking_manager),
):
    try:
        views = manager.list_bookings(
            BookingFilter(customer_id=customer_id, start_date=start_date, end_date=end_date, status=status)
        )
    except BookingEngineError as e:
        raise to_http_exception(e)
    return [BookingResponseSchema.model_validate(v) for v in views]


@router.get("/admin/bookings/{booking_id}", response_model=BookingResponseSchema)
def get_booking(
    booking_id: int,
    manager: BookingLifecycleManager = Depends(get_booking_manager),
):
    try:
        view = manager.get(booking_id)
    except BookingEngineError as e:
        raise to_http_exception(e)
    return BookingResponseSchema.model_validate(view)


@router.patch("/admin/bookings/{booking_id}/status", response_model=BookingResponseSchema)
def update_booking_status(
    booking_id: int,
    req: StatusUpdateSchema,
    manager: BookingLifecycleManager = Depends(get_booking_manager),
):
    try:
        view = manager.set_status(booking_id, req.status)
    except BookingEngineError as e:
        raise to_http_exception(e)
    return BookingResponseSchema.model_validate(view)


@router.patch("/admin/bookings/{booking_id}/cancel", response_model=BookingResponseSchema)
def cancel_booking(
    booking_id: int,
    manager: BookingLifecycleManager = Depends(get_booking_manager),
):
    try:
        view = manager.cancel(booking_id)
    except BookingEngineError as e:
        raise to_http_exception(e)
    return BookingResponseSchema.model_validate(view)
