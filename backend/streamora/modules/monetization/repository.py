"""Repositories for monetization and payout requests."""

from typing import Optional

from streamora.core.store import (
    MONETIZATION_REQUESTS_KEY,
    PAYOUT_REQUESTS_KEY,
    RecordStore,
    parse_records,
)
from streamora.modules.monetization.models import (
    MonetizationRequest,
    PayoutRequest,
    RequestStatus,
)


class MonetizationRequestRepository:
    """Repository for monetization requests, upserted by handle."""

    def __init__(self, store: RecordStore):
        self.store = store

    def get_all(self) -> list[MonetizationRequest]:
        return parse_records(
            MonetizationRequest,
            self.store.list_records(MONETIZATION_REQUESTS_KEY),
            MONETIZATION_REQUESTS_KEY,
        )

    def get_by_id(self, request_id: str) -> Optional[MonetizationRequest]:
        """Get request by ID."""
        record = self.store.find_by_field(MONETIZATION_REQUESTS_KEY, "id", request_id)
        return MonetizationRequest.model_validate(record) if record else None

    def get_by_handle(self, handle: str) -> Optional[MonetizationRequest]:
        record = self.store.find_by_field(MONETIZATION_REQUESTS_KEY, "secret_handle", handle)
        return MonetizationRequest.model_validate(record) if record else None

    def upsert(self, request: MonetizationRequest) -> MonetizationRequest:
        """Replace the handle's request in place, or add it as the newest."""
        self.store.upsert_by_field(
            MONETIZATION_REQUESTS_KEY, "secret_handle", request.model_dump(mode="json")
        )
        return request

    def set_status(self, request_id: str, status: RequestStatus) -> Optional[MonetizationRequest]:
        record = self.store.update_by_field(
            MONETIZATION_REQUESTS_KEY, "id", request_id, {"status": status.value}
        )
        return MonetizationRequest.model_validate(record) if record else None


class PayoutRequestRepository:
    """Repository for payout requests. Append-only, newest first."""

    def __init__(self, store: RecordStore):
        self.store = store

    def get_all(self) -> list[PayoutRequest]:
        return parse_records(
            PayoutRequest,
            self.store.list_records(PAYOUT_REQUESTS_KEY),
            PAYOUT_REQUESTS_KEY,
        )

    def get_by_id(self, request_id: str) -> Optional[PayoutRequest]:
        """Get payout request by ID."""
        record = self.store.find_by_field(PAYOUT_REQUESTS_KEY, "id", request_id)
        return PayoutRequest.model_validate(record) if record else None

    def get_by_handle(self, handle: str) -> list[PayoutRequest]:
        return [r for r in self.get_all() if r.secret_handle == handle]

    def create(self, request: PayoutRequest) -> PayoutRequest:
        self.store.insert(PAYOUT_REQUESTS_KEY, request.model_dump(mode="json"))
        return request

    def set_status(self, request_id: str, status: RequestStatus) -> Optional[PayoutRequest]:
        record = self.store.update_by_field(
            PAYOUT_REQUESTS_KEY, "id", request_id, {"status": status.value}
        )
        return PayoutRequest.model_validate(record) if record else None
