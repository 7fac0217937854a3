"""
Catalog API endpoints.
Register and look up cities, drivers, customers and restaurants by name.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from delivery_dispatch.database import get_db
from delivery_dispatch.models import City, Customer, Driver, Restaurant
from delivery_dispatch.repository import DispatchRepository
from delivery_dispatch.schemas.catalog import (
    CityCreate,
    CityResponse,
    DriverCreate,
    DriverResponse,
    CustomerCreate,
    CustomerResponse,
    RestaurantCreate,
    RestaurantResponse,
)

router = APIRouter(tags=["Catalog"])


def driver_response(driver: Driver) -> DriverResponse:
    return DriverResponse(id=driver.id, name=driver.name, city=driver.city.name)


def customer_response(customer: Customer) -> CustomerResponse:
    return CustomerResponse(
        id=customer.id,
        name=customer.name,
        city=customer.city.name,
        address=customer.address,
    )


def restaurant_response(restaurant: Restaurant) -> RestaurantResponse:
    return RestaurantResponse(
        id=restaurant.id,
        name=restaurant.name,
        city=restaurant.city.name,
        description=restaurant.description,
    )


async def _require_city(repo: DispatchRepository, name: str) -> City:
    city = await repo.find_city_by_name(name)
    if not city:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"City {name} not found",
        )
    return city


def _conflict(kind: str, name: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail=f"{kind} {name} already exists",
    )


def _not_found(kind: str, name: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{kind} {name} not found",
    )


# ---------- Cities ----------

@router.post(
    "/cities",
    response_model=CityResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a city",
)
async def create_city(
    request: CityCreate,
    db: AsyncSession = Depends(get_db),
) -> CityResponse:
    repo = DispatchRepository(db)
    if await repo.find_city_by_name(request.name):
        raise _conflict("City", request.name)
    city = await repo.add(City(name=request.name))
    return CityResponse.model_validate(city)


@router.get("/cities/{name}", response_model=CityResponse, summary="Get city by name")
async def get_city(name: str, db: AsyncSession = Depends(get_db)) -> CityResponse:
    city = await DispatchRepository(db).find_city_by_name(name)
    if not city:
        raise _not_found("City", name)
    return CityResponse.model_validate(city)


# ---------- Drivers ----------

@router.post(
    "/drivers",
    response_model=DriverResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a driver",
)
async def create_driver(
    request: DriverCreate,
    db: AsyncSession = Depends(get_db),
) -> DriverResponse:
    repo = DispatchRepository(db)
    city = await _require_city(repo, request.city)
    if await repo.find_driver_by_name(request.name):
        raise _conflict("Driver", request.name)
    driver = await repo.add(Driver(name=request.name, city=city))
    return driver_response(driver)


@router.get("/drivers/{name}", response_model=DriverResponse, summary="Get driver by name")
async def get_driver(name: str, db: AsyncSession = Depends(get_db)) -> DriverResponse:
    driver = await DispatchRepository(db).find_driver_by_name(name)
    if not driver:
        raise _not_found("Driver", name)
    return driver_response(driver)


# ---------- Customers ----------

@router.post(
    "/customers",
    response_model=CustomerResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a customer",
)
async def create_customer(
    request: CustomerCreate,
    db: AsyncSession = Depends(get_db),
) -> CustomerResponse:
    repo = DispatchRepository(db)
    city = await _require_city(repo, request.city)
    if await repo.find_customer_by_name(request.name):
        raise _conflict("Customer", request.name)
    customer = await repo.add(Customer(name=request.name, city=city, address=request.address))
    return customer_response(customer)


@router.get("/customers/{name}", response_model=CustomerResponse, summary="Get customer by name")
async def get_customer(name: str, db: AsyncSession = Depends(get_db)) -> CustomerResponse:
    customer = await DispatchRepository(db).find_customer_by_name(name)
    if not customer:
        raise _not_found("Customer", name)
    return customer_response(customer)


# ---------- Restaurants ----------

@router.post(
    "/restaurants",
    response_model=RestaurantResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a restaurant",
)
async def create_restaurant(
    request: RestaurantCreate,
    db: AsyncSession = Depends(get_db),
) -> RestaurantResponse:
    repo = DispatchRepository(db)
    city = await _require_city(repo, request.city)
    if await repo.find_restaurant_by_name(request.name):
        raise _conflict("Restaurant", request.name)
    restaurant = await repo.add(
        Restaurant(name=request.name, city=city, description=request.description)
    )
    return restaurant_response(restaurant)


@router.get("/restaurants/{name}", response_model=RestaurantResponse, summary="Get restaurant by name")
async def get_restaurant(name: str, db: AsyncSession = Depends(get_db)) -> RestaurantResponse:
    restaurant = await DispatchRepository(db).find_restaurant_by_name(name)
    if not restaurant:
        raise _not_found("Restaurant", name)
    return restaurant_response(restaurant)
