"""
Orders API Endpoints
Create, read, replace, delete and list orders
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from orders_api.api.dependencies import get_order_service
from orders_api.core.exceptions import NotFoundError, ValidationError
from orders_api.domain.order import Order, OrderPayload
from orders_api.services.order_service import OrderService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[Order])
def get_orders(service: OrderService = Depends(get_order_service)):
    """Get all orders"""
    try:
        return service.get_all_orders()

    except Exception as e:
        logger.error(f"Error fetching orders: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error fetching orders: {str(e)}")


@router.post("", response_model=Order)
def create_order(payload: OrderPayload, service: OrderService = Depends(get_order_service)):
    """
    Create a new order

    Returns the stored order with its assigned id.
    400 when customerName or shippingAddress is blank, or total is not positive.
    """
    try:
        return service.create_order(payload)

    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error creating order: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error creating order: {str(e)}")


@router.get("/{order_id}", response_model=Order)
def get_order(order_id: int, service: OrderService = Depends(get_order_service)):
    """Get a single order by ID"""
    try:
        return service.get_order_by_id(order_id)

    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error fetching order {order_id}: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error fetching order: {str(e)}")


@router.put("/{order_id}", response_model=Order)
def update_order(order_id: int, payload: OrderPayload, service: OrderService = Depends(get_order_service)):
    """
    Replace an existing order

    customerName, orderDate, shippingAddress and total are all overwritten.
    The id in the path is used; an id in the body is ignored.
    """
    try:
        return service.update_order(order_id, payload)

    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error updating order {order_id}: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error updating order: {str(e)}")


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_order(order_id: int, service: OrderService = Depends(get_order_service)):
    """Delete an order. 204 with no body on success"""
    try:
        service.delete_order(order_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error deleting order {order_id}: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error deleting order: {str(e)}")
