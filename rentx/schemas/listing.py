from pydantic import BaseModel, Field

class ListingView(BaseModel):
    """Read-side view of a listing as returned by the listing queries."""
    id: int = Field(..., description="Listing ID")
    user_id: int = Field(..., description="ID of the owning user")
    name: str = Field(..., description="Listing name")
    description: str = Field(..., description="Free-text description")
    payment_per_day: int = Field(..., description="Rental price per day")
    image_path: str = Field(..., description="Path of the stored image")

    model_config = {
        "from_attributes": True
    }

    def to_line(self, description_label: str = "Description") -> str:
        """Render the listing as one line of the plain-text listing responses."""
        return (
            f"ID: {self.id}, Name: {self.name}, {description_label}: {self.description}, "
            f"Payment: {self.payment_per_day}, Image: {self.image_path}"
        )
