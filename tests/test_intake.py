"""Unit tests for the transaction intake handler."""

import re
from concurrent.futures import ThreadPoolExecutor

from cnhsocial.schemas.transaction import PaymentRequest
from cnhsocial.services.intake import (
    DEFAULT_SERVICE_FEE,
    create_transaction,
    next_transaction_id,
    resolve_amount,
)


def test_missing_amount_uses_service_fee():
    record = create_transaction(PaymentRequest())

    assert record.amount == DEFAULT_SERVICE_FEE == 6472


def test_zero_amount_is_treated_as_missing():
    assert resolve_amount(0) == DEFAULT_SERVICE_FEE
    assert resolve_amount(None) == DEFAULT_SERVICE_FEE


def test_supplied_amount_is_kept():
    record = create_transaction(PaymentRequest(amount=15000))

    assert record.amount == 15000


def test_record_is_always_approved():
    assert create_transaction(PaymentRequest(amount=1)).status == "approved"


def test_customer_passthrough_keeps_unknown_fields():
    customer = {"name": "Maria Santos", "email": "maria.santos@email.com", "cpf_hash": {"v": 1}}
    record = create_transaction(PaymentRequest.model_validate({"customer": customer}))

    assert record.customer == customer


def test_created_at_is_iso_utc():
    record = create_transaction(PaymentRequest())

    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", record.created_at)


def test_sequential_ids_are_unique_and_increasing():
    """Calls within the same millisecond must still get distinct ids."""

    ids = [next_transaction_id() for _ in range(500)]
    tokens = [int(i[len("txn_"):]) for i in ids]

    assert all(re.fullmatch(r"txn_\d+", i) for i in ids)
    assert len(set(ids)) == len(ids)
    assert tokens == sorted(tokens)


def test_concurrent_ids_are_unique():
    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(lambda _: next_transaction_id(), range(2000)))

    assert len(set(ids)) == len(ids)


def test_intake_logs_received_payload(caplog):
    caplog.set_level("INFO", logger="cnhsocial.intake")

    create_transaction(PaymentRequest(amount=6472))

    assert "amount=6472" in caplog.text
