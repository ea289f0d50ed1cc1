from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class Customer(BaseModel):
    # dados cadastrais chegam em formatos variados (CPF e telefone às vezes
    # como número); nada é convertido e campos extras voltam como vieram
    model_config = ConfigDict(extra="allow")

    name: Optional[Any] = None
    email: Optional[Any] = None
    phone: Optional[Any] = None
    document: Optional[Any] = None


class LineItem(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: Optional[Any] = None
    name: Optional[Any] = None
    quantity: Optional[int] = None
    unit_amount: Optional[int] = None  # centavos


class PaymentRequest(BaseModel):
    amount: Optional[int] = None  # centavos
    customer: Optional[Customer] = None
    items: Optional[List[LineItem]] = None


class TransactionRecord(BaseModel):
    transaction_id: str
    amount: int
    customer: Optional[Dict[str, Any]]
    status: str
    created_at: str


class TransactionResponse(BaseModel):
    success: bool
    message: str
    transaction_id: str
    amount: int
    customer: Optional[Dict[str, Any]]
    status: str
    timestamp: str
