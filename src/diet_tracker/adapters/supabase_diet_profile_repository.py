"""Supabase repository for diet profiles."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from diet_tracker.domain.recommendations import DietProfile, DietType, WeightGoal
from diet_tracker.services.recommendations import DietProfileRepository


@dataclass
class SupabaseDietProfileRepository(DietProfileRepository):
    """Supabase implementation for diet profiles."""

    client: Client

    def get_profile(self, username: str) -> DietProfile | None:
        """Return the stored profile for a user."""
        response = (
            self.client.table("diet_profiles")
            .select("diet_type, weight_goal, health_conditions, excluded_foods")
            .eq("username", username)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return DietProfile(
            diet_type=DietType(row.get("diet_type") or DietType.BALANCED.value),
            weight_goal=WeightGoal(row.get("weight_goal") or WeightGoal.MAINTAIN.value),
            health_conditions=list(row.get("health_conditions") or []),
            excluded_foods=list(row.get("excluded_foods") or []),
        )

    def save_profile(self, username: str, profile: DietProfile) -> None:
        """Insert or replace the user's profile row."""
        self.client.table("diet_profiles").upsert(
            {
                "username": username,
                "diet_type": profile.diet_type.value,
                "weight_goal": profile.weight_goal.value,
                "health_conditions": profile.health_conditions,
                "excluded_foods": profile.excluded_foods,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="username",
        ).execute()
