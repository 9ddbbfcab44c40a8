from pydantic import BaseModel, ConfigDict, Field, computed_field


class Standing(BaseModel):
    """One team's aggregated record for a season."""

    model_config = ConfigDict(frozen=True)

    team: str
    played: int = Field(0, ge=0)
    wins: int = Field(0, ge=0)
    draws: int = Field(0, ge=0)
    losses: int = Field(0, ge=0)
    goals_for: int = 0
    goals_against: int = 0

    @computed_field  # type: ignore[misc]
    @property
    def goal_difference(self) -> int:
        return self.goals_for - self.goals_against

    @computed_field  # type: ignore[misc]
    @property
    def points(self) -> int:
        """Three points per win, one per draw."""
        return self.wins * 3 + self.draws
