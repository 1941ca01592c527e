# The module is to define the journal record models served by the data provider.
# Date: 2026-10-19
# Version: 0.1.0

from pydantic import BaseModel, Field
from typing import List


class Idea(BaseModel):
    """
    A free-form note captured during the day.
    Attributes:
        id (int): Auto-incrementing identifier.
        content (str): The text of the idea.
        attachments (List[str]): Paths of attached files.
        created_at (int): Unix epoch seconds.
        date (str): Local date, YYYY-MM-DD.
    """
    id: int
    content: str
    attachments: List[str] = Field(default_factory=list)
    created_at: int
    date: str


class DoneTask(BaseModel):
    """
    A completed piece of work with a start and end time.
    Attributes:
        id (int): Auto-incrementing identifier.
        content (str): What was done.
        start_time (int): Unix epoch seconds.
        end_time (int): Unix epoch seconds.
        attachments (List[str]): Paths of attached files.
        created_at (int): Unix epoch seconds.
        date (str): Local date of start_time, YYYY-MM-DD.
    """
    id: int
    content: str
    start_time: int
    end_time: int
    attachments: List[str] = Field(default_factory=list)
    created_at: int
    date: str

    @property
    def duration(self) -> int:
        return self.end_time - self.start_time


class DailyRecords(BaseModel):
    """The ideas and tasks of a date range."""
    ideas: List[Idea] = Field(default_factory=list)
    tasks: List[DoneTask] = Field(default_factory=list)


class Prompt(BaseModel):
    """
    A saved prompt template, used as a custom system prompt for reports.
    """
    id: int
    name: str
    content: str
    created_at: int
    updated_at: int


class DateRange(BaseModel):
    """An inclusive range of local dates, both YYYY-MM-DD."""
    start_date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$")
    end_date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$")
