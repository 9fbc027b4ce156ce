"""
Insights schemas - habit/task records sent by the app and the
motivational summary returned to it.
"""
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator


class HabitRecord(BaseModel):
    """A habit as tracked by the app. Only summary fields feed the prompt."""
    id: str
    name: str
    description: str
    isPositive: bool
    targetDays: int
    currentStreak: int
    longestStreak: int
    completedDates: List[str]
    lastCompletedDate: Optional[str]
    reminderTime: Optional[str]
    stackedWith: Optional[str]
    created: str
    color: str


class TaskRecord(BaseModel):
    """A pomodoro task as tracked by the app."""
    id: str
    title: str
    estimatedPomodoros: int
    completedPomodoros: int
    isCompleted: bool
    notes: Optional[str] = None
    createdAt: str
    updatedAt: str


class InsightsRequest(BaseModel):
    habits: List[HabitRecord] = Field(default_factory=list)
    tasks: List[TaskRecord] = Field(default_factory=list)

    @field_validator("habits", "tasks", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class InsightsResult(BaseModel):
    story: str = Field(..., description="Short motivational story")
    tips: List[str] = Field(..., description="Actionable tips, in order")
    feedback: str = Field(..., description="One sentence of feedback")
    areasToImprove: List[str] = Field(..., description="Areas to improve, in order")

    def is_complete(self) -> bool:
        """True when every part of the result carries content."""
        return bool(
            self.story.strip()
            and self.feedback.strip()
            and any(tip.strip() for tip in self.tips)
            and any(area.strip() for area in self.areasToImprove)
        )


class InsightsResponse(BaseModel):
    """Wire shape of the insights endpoint and of the model output."""
    insights: InsightsResult
