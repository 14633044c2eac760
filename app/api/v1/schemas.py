from datetime import date, datetime, time

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities.booking import BookingStatus
from app.domain.entities.transaction import TransactionStatus


class BookingCreateSchema(BaseModel):
    customer_id: int
    service_id: int
    specialist_id: int
    booking_date: str
    booking_time: str
    note: str | None = None
    status: str | None = None  # ignored, new bookings are always PENDING


class GuestBookingCreateSchema(BaseModel):
    customer_name: str
    customer_email: str = Field(min_length=3)
    customer_phone: str | None = None
    service_id: int
    specialist_id: int
    booking_date: str
    booking_time: str
    note: str | None = None


class StatusUpdateSchema(BaseModel):
    status: str


class BookingResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    customer_id: int
    customer: str | None = None
    email: str | None = None
    phone: str | None = None
    service_id: int
    service: str | None = None
    price: float | None = None
    specialist_id: int
    specialist: str | None = None
    booking_date: date
    booking_time: time
    status: BookingStatus
    note: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class NameValueSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    value: float


class DailyRevenueSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    date: date
    revenue: float


class ReportResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    period: str
    total_revenue: float
    total_bookings: int
    completed_bookings: int
    cancelled_bookings: int
    completion_rate: float
    revenue_by_service: list[NameValueSchema] = Field(default_factory=list)
    bookings_by_status: list[NameValueSchema] = Field(default_factory=list)
    daily_revenue: list[DailyRevenueSchema] = Field(default_factory=list)
    customer_retention_rate: list[NameValueSchema] = Field(default_factory=list)


class RevenueSummarySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_revenue: float
    by_payment_method: list[NameValueSchema]


class BookingsSummarySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_bookings: int
    by_status: list[NameValueSchema]


class TransactionCreateSchema(BaseModel):
    amount: float
    payment_method: str
    transaction_date: str
    booking_id: int | None = None
    reference_number: str | None = None
    note: str | None = None
    status: str = TransactionStatus.PENDING.value


class TransactionResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    booking_id: int | None = None
    amount: float
    payment_method: str
    status: TransactionStatus
    transaction_date: date
    reference_number: str | None = None
    note: str | None = None
