# cnhsocial/services/intake.py
import logging
import threading
import time
from datetime import datetime, timezone

from cnhsocial.schemas.transaction import PaymentRequest, TransactionRecord

logger = logging.getLogger("cnhsocial.intake")

# Tarifa fixa do processo CNH Social: R$ 64,72 em centavos.
# Aplicada sempre que o cliente não informa um valor.
DEFAULT_SERVICE_FEE = 6472

TRANSACTION_PREFIX = "txn_"
STATUS_APPROVED = "approved"

_id_lock = threading.Lock()
_last_token = 0


def now_iso() -> str:
    """Timestamp UTC em ISO-8601 com milissegundos, ex: 2024-05-01T12:00:00.123Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def next_transaction_id() -> str:
    """
    Gera `txn_<epoch ms>`. Se o relógio não avançou desde o último id
    (mesmo milissegundo, ou relógio voltando), usa o último token + 1,
    então os ids nunca se repetem dentro do processo.
    """
    global _last_token
    with _id_lock:
        token = max(int(time.time() * 1000), _last_token + 1)
        _last_token = token
    return f"{TRANSACTION_PREFIX}{token}"


def resolve_amount(amount) -> int:
    # None ou 0 caem na tarifa padrão
    return amount or DEFAULT_SERVICE_FEE


def create_transaction(request: PaymentRequest) -> TransactionRecord:
    customer = request.customer.model_dump(exclude_unset=True) if request.customer is not None else None
    items = [item.model_dump(exclude_unset=True) for item in request.items] if request.items is not None else None

    logger.info(f"Transação recebida: amount={request.amount} customer={customer} items={items}")

    return TransactionRecord(
        transaction_id=next_transaction_id(),
        amount=resolve_amount(request.amount),
        customer=customer,
        status=STATUS_APPROVED,
        created_at=now_iso(),
    )
