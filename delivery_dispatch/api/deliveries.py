"""
Deliveries API endpoint.
Handles POST /api/v1/deliveries: create an order and assign a driver.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from delivery_dispatch.api.catalog import driver_response, customer_response, restaurant_response
from delivery_dispatch.database import get_db
from delivery_dispatch.models import Delivery
from delivery_dispatch.repository import DispatchRepository
from delivery_dispatch.schemas.delivery import DeliveryCreateRequest, DeliveryResponse
from delivery_dispatch.services.dispatch_service import DispatchService
from delivery_dispatch.services.distance import DistanceSampler, get_distance_sampler

router = APIRouter(prefix="/deliveries", tags=["Deliveries"])


def delivery_response(delivery: Delivery) -> DeliveryResponse:
    return DeliveryResponse(
        id=delivery.id,
        driver=driver_response(delivery.driver),
        restaurant=restaurant_response(delivery.restaurant),
        customer=customer_response(delivery.customer),
        delivery_time=delivery.delivery_time,
        distance=delivery.distance,
        created_at=delivery.created_at,
    )


@router.post(
    "",
    response_model=DeliveryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an order and assign a driver",
    description="""
    Assigns the least busy driver in the customer's city who is free at the
    exact delivery time. The customer and restaurant must share a city.
    Responds 400 when a field is missing or the cities differ, 404 for an
    unknown customer or restaurant id, and 409 when every driver in the city
    is booked at that time. A malformed field value is rejected with 422.
    """,
)
async def create_delivery(
    request: DeliveryCreateRequest,
    db: AsyncSession = Depends(get_db),
    sampler: DistanceSampler = Depends(get_distance_sampler),
) -> DeliveryResponse:
    """Create a delivery for an existing customer and restaurant."""
    repo = DispatchRepository(db)
    
    customer = None
    if request.customer_id is not None:
        customer = await repo.get_customer(request.customer_id)
        if not customer:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Customer with ID {request.customer_id} not found",
            )
    restaurant = None
    if request.restaurant_id is not None:
        restaurant = await repo.get_restaurant(request.restaurant_id)
        if not restaurant:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Restaurant with ID {request.restaurant_id} not found",
            )
    
    service = DispatchService(repo, sampler=sampler)
    delivery = await service.create_order_and_assign_driver(
        customer, restaurant, request.delivery_time
    )
    return delivery_response(delivery)


@router.get(
    "/{delivery_id}",
    response_model=DeliveryResponse,
    summary="Get delivery details",
)
async def get_delivery(
    delivery_id: int,
    db: AsyncSession = Depends(get_db),
) -> DeliveryResponse:
    delivery = await DispatchRepository(db).get_delivery(delivery_id)
    if not delivery:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Delivery with ID {delivery_id} not found",
        )
    return delivery_response(delivery)
