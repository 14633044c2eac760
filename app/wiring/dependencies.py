from functools import lru_cache
import logging

from app.core.config import settings
from app.application.ports.booking_repository import BookingRepositoryPort
from app.application.ports.catalog import CatalogPort
from app.application.ports.customer_directory import CustomerDirectoryPort
from app.application.ports.transaction_repository import TransactionRepositoryPort
from app.application.use_cases.booking import BookingLifecycleManager
from app.application.use_cases.identity import IdentityResolver
from app.application.use_cases.report import ReportAggregator
from app.application.use_cases.transactions import TransactionLedger
from app.infrastructure.catalog.catalog_store import CatalogStore
from app.infrastructure.seed import seed_demo_data
from app.infrastructure.store.json_store import JsonBookingStore, JsonCustomerDirectory, JsonTransactionStore
from app.infrastructure.store.memory_store import MemoryBookingStore, MemoryCustomerDirectory, MemoryTransactionStore


logger = logging.getLogger(__name__)


def _use_json_store() -> bool:
    return settings.STORE_PROVIDER.lower() == "json"


@lru_cache
def get_catalog() -> CatalogPort:
    return CatalogStore()


@lru_cache
def get_customer_directory() -> CustomerDirectoryPort:
    if _use_json_store():
        return JsonCustomerDirectory(data_dir=settings.DATA_DIR)
    return MemoryCustomerDirectory()


@lru_cache
def get_booking_store() -> BookingRepositoryPort:
    if _use_json_store():
        store = JsonBookingStore(data_dir=settings.DATA_DIR)
    else:
        store = MemoryBookingStore()
    if settings.SEED_DEMO_DATA:
        seeded = seed_demo_data(get_customer_directory(), store)
        logger.info("Booking store ready provider=%s seeded=%s", settings.STORE_PROVIDER, seeded)
    return store


@lru_cache
def get_transaction_store() -> TransactionRepositoryPort:
    if _use_json_store():
        return JsonTransactionStore(data_dir=settings.DATA_DIR)
    return MemoryTransactionStore()


def get_identity_resolver() -> IdentityResolver:
    return IdentityResolver(directory=get_customer_directory())


def get_booking_manager() -> BookingLifecycleManager:
    return BookingLifecycleManager(
        bookings=get_booking_store(),
        catalog=get_catalog(),
        customers=get_customer_directory(),
        identity=get_identity_resolver(),
        enforce_transitions=settings.ENFORCE_STATUS_TRANSITIONS,
        check_conflicts=settings.CHECK_SPECIALIST_CONFLICTS,
    )


def get_report_aggregator() -> ReportAggregator:
    return ReportAggregator(
        bookings=get_booking_store(),
        transactions=get_transaction_store(),
        catalog=get_catalog(),
    )


def get_transaction_ledger() -> TransactionLedger:
    return TransactionLedger(transactions=get_transaction_store(), bookings=get_booking_store())
