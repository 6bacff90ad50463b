"""/v1/wishlist and /v1/acquisitions - saving goals and their purchase history"""

import logging
from datetime import date
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from credit_ledger.api.v1.schemas import (
    AcquisitionResponse,
    PurchaseRequest,
    WishlistItemCreate,
    WishlistItemResponse,
    WishlistResponse,
)
from credit_ledger.api.dependencies import get_request_id
from credit_ledger.infrastructure.database.session import get_db
from credit_ledger.infrastructure.database.repositories import TransactionRepository, WishlistRepository
from credit_ledger.domain.models import SAVING, Acquisition, WishProgress
from credit_ledger.domain.wishlist import total_savings, wishlist_progress
from credit_ledger.domain.exceptions import WishlistItemNotFoundError

router = APIRouter()


def _item_response(progress: WishProgress) -> WishlistItemResponse:
    return WishlistItemResponse(
        id=progress.item.id,
        name=progress.item.name,
        price=progress.item.price,
        link=progress.item.link,
        progress_percent=progress.progress_percent,
        can_afford=progress.can_afford,
    )


def _acquisition_response(acquisition: Acquisition) -> AcquisitionResponse:
    return AcquisitionResponse(
        id=acquisition.id,
        name=acquisition.name,
        price=acquisition.price,
        link=acquisition.link,
        purchase_date=acquisition.purchase_date,
    )


def _current_savings(db: Session) -> float:
    return total_savings(TransactionRepository(db).list_transactions(SAVING))


@router.get("/wishlist", response_model=WishlistResponse)
def get_wishlist(db: Session = Depends(get_db)):
    """
    Wishlist items with progress toward each one.

    Every item is compared with the full savings total, not a share of it.
    """
    savings = _current_savings(db)
    items = WishlistRepository(db).list_items()

    return WishlistResponse(
        total_savings=savings,
        items=[_item_response(p) for p in wishlist_progress(items, savings)],
    )


@router.post("/wishlist", response_model=WishlistItemResponse, status_code=201)
def add_wishlist_item(request_body: WishlistItemCreate, request: Request, db: Session = Depends(get_db)):
    request_id = get_request_id(request)

    try:
        item = WishlistRepository(db).add_item(request_body.name, request_body.price, request_body.link)
        db.commit()

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    return _item_response(wishlist_progress([item], _current_savings(db))[0])


@router.delete("/wishlist/{item_id}", status_code=204)
def delete_wishlist_item(item_id: int, request: Request, db: Session = Depends(get_db)):
    request_id = get_request_id(request)

    try:
        WishlistRepository(db).delete_item(item_id)
        db.commit()

    except WishlistItemNotFoundError as e:
        db.rollback()
        logging.warning(f"Wishlist delete failed: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/wishlist/{item_id}/purchase", response_model=AcquisitionResponse, status_code=201)
def purchase_wishlist_item(
    item_id: int,
    request_body: PurchaseRequest,
    request: Request,
    db: Session = Depends(get_db),
):
    """Move an item from the wishlist into the acquisitions history"""
    request_id = get_request_id(request)

    try:
        acquisition = WishlistRepository(db).purchase(item_id, request_body.purchase_date or date.today())
        db.commit()

    except WishlistItemNotFoundError as e:
        db.rollback()
        logging.warning(f"Wishlist purchase failed: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail=str(e))

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    return _acquisition_response(acquisition)


@router.get("/acquisitions", response_model=List[AcquisitionResponse])
def list_acquisitions(db: Session = Depends(get_db)):
    """Bought items, most recent first"""
    return [_acquisition_response(a) for a in WishlistRepository(db).list_acquisitions()]


@router.delete("/acquisitions/{acquisition_id}", status_code=204)
def delete_acquisition(acquisition_id: int, request: Request, db: Session = Depends(get_db)):
    request_id = get_request_id(request)

    try:
        WishlistRepository(db).delete_acquisition(acquisition_id)
        db.commit()

    except WishlistItemNotFoundError as e:
        db.rollback()
        logging.warning(f"Acquisition delete failed: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail=str(e))
