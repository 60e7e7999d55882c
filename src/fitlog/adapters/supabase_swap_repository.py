"""Supabase repository for the nutrition swap catalog."""

from dataclasses import dataclass

from supabase import Client

from fitlog.domain.nutrition import FoodItem
from fitlog.services.swaps import SwapCatalogRepository, food_item_from_swap_row


@dataclass
class SupabaseSwapRepository(SwapCatalogRepository):
    """Supabase implementation for swap catalog queries."""

    client: Client

    def list_swaps(self) -> list[FoodItem]:
        """Return all catalog foods ordered by name."""
        response = (
            self.client.table("nutrition_swaps")
            .select("*")
            .order("food_name", desc=False)
            .execute()
        )
        return [food_item_from_swap_row(row) for row in response.data or []]

    def get_swap(self, food_id: str) -> FoodItem | None:
        """Return a catalog food by id, if present."""
        response = (
            self.client.table("nutrition_swaps")
            .select("*")
            .eq("id", food_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return food_item_from_swap_row(response.data[0])
