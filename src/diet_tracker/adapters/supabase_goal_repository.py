"""Supabase repository for nutrition goals."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from diet_tracker.domain.nutrition import NutritionGoal
from diet_tracker.services.nutrition import GoalRepository


@dataclass
class SupabaseGoalRepository(GoalRepository):
    """Supabase implementation for nutrition goals."""

    client: Client

    def get_goal(self, username: str) -> NutritionGoal | None:
        """Return the stored goal for a user."""
        response = (
            self.client.table("nutrition_goals")
            .select("calorie_goal, protein_goal, carb_goal, fat_goal")
            .eq("username", username)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return NutritionGoal(
            calorie_goal=int(row.get("calorie_goal") or 0),
            protein_goal_g=float(row.get("protein_goal") or 0.0),
            carb_goal_g=float(row.get("carb_goal") or 0.0),
            fat_goal_g=float(row.get("fat_goal") or 0.0),
        )

    def save_goal(self, username: str, goal: NutritionGoal) -> None:
        """Insert or replace the user's goal row."""
        self.client.table("nutrition_goals").upsert(
            {
                "username": username,
                "calorie_goal": goal.calorie_goal,
                "protein_goal": goal.protein_goal_g,
                "carb_goal": goal.carb_goal_g,
                "fat_goal": goal.fat_goal_g,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="username",
        ).execute()
