"""Problem API schemas."""

from pydantic import BaseModel, Field

from app.models.problems import Difficulty, Problem


class ProblemSchema(BaseModel):
    """Problem as returned by the company problems endpoint."""

    number: int = Field(alias="id", gt=0)
    name: str = Field(alias="title", min_length=1)
    difficulty: str | None = None
    acceptance_rate: float | None = Field(alias="acRate", default=None, ge=0.0, le=1.0)
    frequency: float | None = Field(default=None, ge=0.0, le=1.0)
    url: str | None = None

    def to_problem(self) -> Problem:
        return Problem(
            number=self.number,
            name=self.name,
            difficulty=Difficulty.parse(self.difficulty),
            acceptance_rate=self.acceptance_rate if self.acceptance_rate is not None else 0.0,
            frequency=self.frequency,
            url=self.url,
        )

    class Config:
        populate_by_name = True
