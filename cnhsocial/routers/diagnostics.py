# cnhsocial/routers/diagnostics.py
from fastapi import APIRouter

from cnhsocial.config import ENDPOINTS, ENVIRONMENT, PLATFORM, SERVICE_NAME, VERSION
from cnhsocial.services.intake import DEFAULT_SERVICE_FEE, now_iso
from cnhsocial.services.runtime import memory_usage, runtime_info, uptime_seconds

router = APIRouter(tags=["diagnostics"])

# Pedido de exemplo devolvido por /test (mesmo formato aceito em /aureolink/create)
SAMPLE_PAYMENT = {
    "amount": DEFAULT_SERVICE_FEE,
    "customer": {
        "name": "Maria Santos",
        "email": "maria.santos@email.com",
        "phone": "(11) 98765-4321",
        "document": "12345678901",
    },
    "items": [
        {
            "title": "Tarifa de Processo CNH Social",
            "name": "Tarifa CNH",
            "quantity": 1,
            "unit_amount": DEFAULT_SERVICE_FEE,
        }
    ],
}


@router.get("/")
def root():
    return {
        "message": "CNH Social Backend is running!",
        "version": VERSION,
        "status": "operational",
        "platform": PLATFORM,
        "timestamp": now_iso(),
        "endpoints": ENDPOINTS,
    }


@router.get("/health")
def health():
    return {
        "status": "online",
        "timestamp": now_iso(),
        "uptime": uptime_seconds(),
        "message": f"Backend CNH Social funcionando perfeitamente no {PLATFORM}",
    }


@router.get("/status")
def status():
    return {
        "service": SERVICE_NAME,
        "version": VERSION,
        "status": "online",
        "platform": PLATFORM,
        "environment": ENVIRONMENT,
        "timestamp": now_iso(),
        "uptime": uptime_seconds(),
        "memory": memory_usage(),
        **runtime_info(),
        "endpoints": ENDPOINTS,
    }


@router.get("/test")
def sample_data():
    return {
        "success": True,
        "message": f"Backend CNH Social - Teste OK ({PLATFORM})",
        "timestamp": now_iso(),
        "data": SAMPLE_PAYMENT,
    }
