"""
Restaurant database model.
"""

from typing import Optional, TYPE_CHECKING

from sqlalchemy import Integer, String, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from delivery_dispatch.database import Base

if TYPE_CHECKING:
    from delivery_dispatch.models.city import City


class Restaurant(Base):
    """Restaurant that orders are picked up from."""
    __tablename__ = "restaurants"
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    city_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("cities.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    
    # Relationships
    city: Mapped["City"] = relationship("City", lazy="joined")
    
    def __repr__(self) -> str:
        return f"<Restaurant(id={self.id}, name={self.name})>"
