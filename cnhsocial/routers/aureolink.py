# cnhsocial/routers/aureolink.py
from typing import Optional

from fastapi import APIRouter

from cnhsocial.config import PLATFORM
from cnhsocial.schemas.transaction import PaymentRequest, TransactionResponse
from cnhsocial.services.intake import create_transaction

router = APIRouter(prefix="/aureolink", tags=["aureolink"])


@router.post("/create", response_model=TransactionResponse)
def create(data: Optional[PaymentRequest] = None):
    # corpo vazio = pedido sem nenhum campo
    record = create_transaction(data or PaymentRequest())
    return TransactionResponse(
        success=True,
        message=f"AureoLink simulado - pagamento processado ({PLATFORM})",
        transaction_id=record.transaction_id,
        amount=record.amount,
        customer=record.customer,
        status=record.status,
        timestamp=record.created_at,
    )
