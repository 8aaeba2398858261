"""Pydantic models for food registry request bodies."""

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr

from food_registry.domain.food_items import FoodItemPayload


class FoodItemPayloadBody(BaseModel):
    """Body for creating or replacing a food item."""

    model_config = ConfigDict(populate_by_name=True)

    name: StrictStr
    quantity: StrictInt | StrictFloat
    expiration_date: StrictStr | StrictInt | StrictFloat = Field(
        alias="expirationDate"
    )

    def to_payload(self) -> FoodItemPayload:
        """Convert the body into the registry payload."""
        return FoodItemPayload(
            name=self.name,
            quantity=self.quantity,
            expiration_date=self.expiration_date,
        )


class QuantityUpdateBody(BaseModel):
    """Body for overwriting an item's quantity."""

    quantity: StrictInt | StrictFloat
