from fastapi import APIRouter, Depends, Query

from app.api.errors import to_http_exception
from app.api.v1.schemas import TransactionCreateSchema, TransactionResponseSchema
from app.application.exceptions import BookingEngineError
from app.application.use_cases.transactions import TransactionLedger
from app.wiring.dependencies import get_transaction_ledger

router = APIRouter()


@router.post("/admin/transactions", response_model=TransactionResponseSchema, status_code=201)
def create_transaction(
    req: TransactionCreateSchema,
    ledger: TransactionLedger = Depends(get_transaction_ledger),
):
    try:
        transaction = ledger.record(
            amount=req.amount,
            payment_method=req.payment_method,
            transaction_date=req.transaction_date,
            booking_id=req.booking_id,
            reference_number=req.reference_number,
            note=req.note,
            status=req.status,
        )
    except BookingEngineError as e:
        raise to_http_exception(e)
    return TransactionResponseSchema.model_validate(transaction)


@router.get("/admin/transactions", response_model=list[TransactionResponseSchema])
def list_transactions(
    status: str | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
    ledger: TransactionLedger = Depends(get_transaction_ledger),
):
    try:
        items = ledger.list_transactions(status=status, start_date=start_date, end_date=end_date)
    except BookingEngineError as e:
        raise to_http_exception(e)
    return [TransactionResponseSchema.model_validate(t) for t in items]


@router.get("/admin/transactions/{transaction_id}", response_model=TransactionResponseSchema)
def get_transaction(
    transaction_id: int,
    ledger: TransactionLedger = Depends(get_transaction_ledger),
):
    try:
        transaction = ledger.get(transaction_id)
    except BookingEngineError as e:
        raise to_http_exception(e)
    return TransactionResponseSchema.model_validate(transaction)


@router.put("/admin/transactions/{transaction_id}/status", response_model=TransactionResponseSchema)
def update_transaction_status(
    transaction_id: int,
    status: str = Query(...),
    ledger: TransactionLedger = Depends(get_transaction_ledger),
):
    try:
        transaction = ledger.set_status(transaction_id, status)
    except BookingEngineError as e:
        raise to_http_exception(e)
    return TransactionResponseSchema.model_validate(transaction)
