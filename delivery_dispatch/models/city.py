"""
City database model.
Every customer, driver and restaurant is based in exactly one city.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from delivery_dispatch.database import Base


class City(Base):
    """A city served by the dispatch system."""
    __tablename__ = "cities"
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    
    def __repr__(self) -> str:
        return f"<City(id={self.id}, name={self.name})>"
