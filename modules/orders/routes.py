from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import sessionmaker

from db.session import get_db, get_session_factory
from . import query, service
from .errors import BookNotFoundError, InsufficientStockError, OrderNotFoundError
from .schema import OrderCreate, OrderListOut, OrderMutationOut, OrderRef, OrderUpdate

router = APIRouter(prefix="/api/orders", tags=["Orders"])


def _failure(message: str, error: Exception) -> JSONResponse:
    if isinstance(error, (OrderNotFoundError, BookNotFoundError)):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, InsufficientStockError):
        status_code = status.HTTP_409_CONFLICT
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message, "error": str(error)},
    )


@router.get("", response_model=OrderListOut)
async def list_orders(db: AsyncSession = Depends(get_db)):
    try:
        orders = await query.list_orders(db)
    except Exception as e:
        return _failure("Failed to fetch orders", e)
    return OrderListOut(data=orders)


@router.post("", response_model=OrderMutationOut)
async def create_order(order: OrderCreate, session_factory: sessionmaker = Depends(get_session_factory)):
    try:
        order_id = await service.create_order(order, session_factory)
    except Exception as e:
        return _failure("Failed to create order", e)
    return OrderMutationOut(message="Order created successfully", data=OrderRef(order_id=order_id))


@router.put("", response_model=OrderMutationOut)
async def update_order(order: OrderUpdate, session_factory: sessionmaker = Depends(get_session_factory)):
    try:
        order_id = await service.update_order(order, session_factory)
    except Exception as e:
        return _failure("Failed to update order", e)
    return OrderMutationOut(message="Order updated successfully", data=OrderRef(order_id=order_id))


@router.delete("", response_model=OrderMutationOut)
async def delete_order(
    order_id: Optional[int] = Query(None, alias="id", gt=0),
    session_factory: sessionmaker = Depends(get_session_factory),
):
    if order_id is None:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "message": "Order ID is required"},
        )
    try:
        await service.delete_order(order_id, session_factory)
    except Exception as e:
        return _failure("Failed to delete order", e)
    return OrderMutationOut(message="Order deleted successfully")
