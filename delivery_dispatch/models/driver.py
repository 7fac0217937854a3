"""
Driver database model.
"""

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from delivery_dispatch.database import Base

if TYPE_CHECKING:
    from delivery_dispatch.models.city import City


class Driver(Base):
    """
    Driver model representing delivery personnel.
    A driver only takes deliveries inside their home city.
    """
    __tablename__ = "drivers"
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    city_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("cities.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    
    # Relationships
    city: Mapped["City"] = relationship("City", lazy="joined")
    
    def __repr__(self) -> str:
        return f"<Driver(id={self.id}, name={self.name})>"
