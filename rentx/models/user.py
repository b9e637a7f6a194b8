"""
SQLAlchemy model for the users table.
"""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from rentx.db.session import Base
from rentx.db.base_model import BaseModel

class User(Base, BaseModel):
    """
    A registered account. Email is unique across all users; the password is
    stored in whatever form the credential verifier prepares.
    """
    __tablename__ = "users"

    name = Column(String)
    email = Column(String, unique=True)
    password = Column(String)

    listings = relationship("Listing", back_populates="owner")

    def __repr__(self):
        return f"<User {self.id} {self.email}>"
