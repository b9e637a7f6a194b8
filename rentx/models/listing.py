"""
SQLAlchemy model for the listings table.
"""

from sqlalchemy import Column, String, Integer, ForeignKey
from sqlalchemy.orm import relationship

from rentx.db.session import Base
from rentx.db.base_model import BaseModel

class Listing(Base, BaseModel):
    """
    A rentable item. Every row points at an existing user and at an image
    that was written before the row was inserted.
    """
    __tablename__ = "listings"

    user_id = Column(Integer, ForeignKey("users.id"))
    name = Column(String)
    description = Column(String)
    payment_per_day = Column("paymentPerDay", Integer)
    image_path = Column("imagePath", String)  # Relative to the working directory

    owner = relationship("User", back_populates="listings")

    def __repr__(self):
        return f"<Listing {self.id} for user {self.user_id}>"
