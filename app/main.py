import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.api.v1.bookings import router as bookings_router
from app.api.v1.reports import router as reports_router
from app.api.v1.transactions import router as transactions_router
from app.core.config import settings


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("booking_id", "customer_id", "status", "period", "error"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

logger = logging.getLogger(__name__)

app = FastAPI(title=f"{settings.BUSINESS_NAME} Booking Engine", version="1.0.0")

app.include_router(bookings_router, prefix="/api", tags=["bookings"])
app.include_router(reports_router, prefix="/api", tags=["reports"])
app.include_router(transactions_router, prefix="/api", tags=["transactions"])


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", extra={"error": str(exc)})
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
