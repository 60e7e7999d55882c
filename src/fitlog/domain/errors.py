"""Domain errors."""


class FoodNotFoundError(LookupError):
    """Raised when a food id is not present in the swap catalog."""

    def __init__(self, food_id: str) -> None:
        super().__init__(f"Food not found: {food_id}")
        self.food_id = food_id


class NutritionLogUnavailableError(RuntimeError):
    """Raised when the daily nutrition log table cannot be written."""
