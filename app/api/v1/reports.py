from fastapi import APIRouter, Depends, Query

from app.api.errors import to_http_exception
from app.api.v1.schemas import BookingsSummarySchema, ReportResponseSchema, RevenueSummarySchema
from app.application.exceptions import BookingEngineError
from app.application.use_cases.report import ReportAggregator
from app.wiring.dependencies import get_report_aggregator

router = APIRouter()


@router.get("/admin/reports", response_model=ReportResponseSchema)
def generate_report(
    start_date: str = Query(...),
    end_date: str = Query(...),
    period: str = "custom",
    aggregator: ReportAggregator = Depends(get_report_aggregator),
):
    try:
        report = aggregator.generate(start_date, end_date, period)
    except BookingEngineError as e:
        raise to_http_exception(e)
    return ReportResponseSchema.model_validate(report)


@router.get("/admin/reports/revenue", response_model=RevenueSummarySchema)
def revenue_report(
    start_date: str = Query(...),
    end_date: str = Query(...),
    aggregator: ReportAggregator = Depends(get_report_aggregator),
):
    try:
        summary = aggregator.revenue_summary(start_date, end_date)
    except BookingEngineError as e:
        raise to_http_exception(e)
    return RevenueSummarySchema.model_validate(summary)


@router.get("/admin/reports/bookings", response_model=BookingsSummarySchema)
def bookings_report(
    start_date: str = Query(...),
    end_date: str = Query(...),
    aggregator: ReportAggregator = Depends(get_report_aggregator),
):
    try:
        summary = aggregator.bookings_summary(start_date, end_date)
    except BookingEngineError as e:
        raise to_http_exception(e)
    return BookingsSummarySchema.model_validate(summary)
