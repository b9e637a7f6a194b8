from datetime import datetime
from sqlalchemy import Column, DateTime, Integer

class BaseModel:
    """Columns shared by every table: store-assigned id and creation time."""

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)

    created_at = Column(DateTime, default=datetime.utcnow)
