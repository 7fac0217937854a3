"""
Delivery database model.
Binds one driver to one restaurant -> customer order at a requested time.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Integer, Float, DateTime, ForeignKey, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from delivery_dispatch.database import Base

if TYPE_CHECKING:
    from delivery_dispatch.models.driver import Driver
    from delivery_dispatch.models.customer import Customer
    from delivery_dispatch.models.restaurant import Restaurant


class Delivery(Base):
    """
    Delivery model representing a food order assigned to a driver.

    Driver, restaurant, customer, delivery time and distance are set once
    when the delivery is built and cannot be reassigned afterwards.
    A driver can hold at most one delivery per exact timestamp.
    """
    __tablename__ = "deliveries"
    __table_args__ = (
        UniqueConstraint("driver_id", "delivery_time", name="uq_deliveries_driver_time"),
        CheckConstraint("distance >= 0", name="ck_deliveries_distance_non_negative"),
    )
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    driver_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("drivers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    restaurant_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("restaurants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    customer_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    delivery_time: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    distance: Mapped[float] = mapped_column(Float, nullable=False)  # km
    
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
    )
    
    # Relationships
    driver: Mapped["Driver"] = relationship("Driver", lazy="joined")
    restaurant: Mapped["Restaurant"] = relationship("Restaurant", lazy="joined")
    customer: Mapped["Customer"] = relationship("Customer", lazy="joined")
    
    @validates(
        "driver", "restaurant", "customer",
        "driver_id", "restaurant_id", "customer_id",
        "delivery_time", "distance",
    )
    def _assign_once(self, key, value):
        # The flush copies related ids into the *_id columns; the same value again is allowed
        current = self.__dict__.get(key)
        if current is not None and current is not value and current != value:
            raise AttributeError(f"Delivery.{key} is immutable once set")
        return value
    
    def __repr__(self) -> str:
        return f"<Delivery(id={self.id}, driver_id={self.driver_id}, delivery_time={self.delivery_time})>"
