"""/v1/paid-months - user-maintained paid marks"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from credit_ledger.api.v1.schemas import ToggleRequest, ToggleResponse, PaidMonthsResponse
from credit_ledger.api.dependencies import get_request_id
from credit_ledger.infrastructure.database.session import get_db
from credit_ledger.infrastructure.database.repositories import PaidMonthRepository
from credit_ledger.domain.exceptions import InvalidMonthKeyError
from credit_ledger.infrastructure.observability.metrics import record_toggle
from credit_ledger.infrastructure.observability.logging import log_overlay_toggled
from credit_ledger.utils.date_utils import is_month_key

router = APIRouter()


@router.post("/paid-months/toggle", response_model=ToggleResponse)
def toggle_paid_month(request_body: ToggleRequest, request: Request, db: Session = Depends(get_db)):
    """
    Flip the paid mark of one (account, month) pair.

    The mark is independent of the projected amount: months without debt and
    unknown account names can be marked too.
    """
    request_id = get_request_id(request)

    try:
        if not is_month_key(request_body.month_key):
            raise InvalidMonthKeyError(f"Month key must be YYYY-MM: {request_body.month_key!r}")

        is_paid = PaidMonthRepository(db).toggle(request_body.account_name, request_body.month_key)
        db.commit()

    except InvalidMonthKeyError as e:
        db.rollback()
        logging.warning(f"Invalid toggle: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    record_toggle(is_paid)
    log_overlay_toggled(request_id, request_body.account_name, request_body.month_key, is_paid)

    return ToggleResponse(
        account_name=request_body.account_name,
        month_key=request_body.month_key,
        is_paid=is_paid,
    )


@router.get("/paid-months", response_model=PaidMonthsResponse)
def list_paid_months(db: Session = Depends(get_db)):
    """Paid marks in the flat account_YYYY-MM form"""
    return PaidMonthsResponse(keys=PaidMonthRepository(db).load_overlay().to_keys())
