from fastapi import APIRouter

from cnhsocial.services.intake import DEFAULT_SERVICE_FEE, now_iso

router = APIRouter(tags=["funnel"])


@router.get("/funnel-data")
def get_funnel_data():
    # valores simulados, não há persistência de pedidos
    return {
        "success": True,
        "data": {
            "total_orders": 1247,
            "total_revenue": 80623.84,
            "average_order": DEFAULT_SERVICE_FEE / 100,
            "today_orders": 23,
            "today_revenue": 1488.56,
            "conversion_rate": 3.2,
            "last_transaction": {
                "id": "txn_123456789",
                "amount": DEFAULT_SERVICE_FEE,
                "customer": "João Silva",
                "timestamp": now_iso(),
            },
        },
    }
