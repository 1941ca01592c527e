# The module is to define the tool that reads ideas and completed tasks for a date range.
# Date: 2026-10-19
# Version: 0.1.0

from pydantic import BaseModel, Field
from typing import Any, Dict, Type
from .base_tool import BaseTool, ToolContext
from daylog.core.errors import DataUnavailableError
from daylog.models.records import DailyRecords
from daylog.utils.logger import console

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class GetHistoryDataInput(BaseModel):
    """
    Input model for the GetHistoryDataTool.
    Attributes:
        start_date (str): First day of the range, inclusive.
        end_date (str): Last day of the range, inclusive.
    """
    start_date: str = Field(..., pattern=DATE_PATTERN, description="Start date (YYYY-MM-DD), inclusive.")
    end_date: str = Field(..., pattern=DATE_PATTERN, description="End date (YYYY-MM-DD), inclusive.")


class GetHistoryDataTool(BaseTool):
    """
    Fetches the user's ideas and completed tasks for an inclusive date range
    and reshapes them for the model, adding task durations and a summary block.
    """
    name: str = "get_history_data"
    description: str = "Gets the ideas and completed tasks recorded within a date range (inclusive)."
    args_schema: Type[BaseModel] = GetHistoryDataInput

    async def execute(self, context: ToolContext, start_date: str, end_date: str) -> Dict[str, Any]:
        console.info(f"Executing tool '{self.name}' for {start_date} .. {end_date}")
        try:
            records = await context.data_provider.query_records_by_date_range(start_date, end_date)
        except Exception as e:
            console.exception(f"Failed to load history data for {start_date} .. {end_date}")
            raise DataUnavailableError(f"Failed to load history data: {e}") from e

        return self._format_records(records, start_date, end_date)

    def _format_records(self, records: DailyRecords, start_date: str, end_date: str) -> Dict[str, Any]:
        return {
            "ideas": [
                {
                    "id": idea.id,
                    "content": idea.content,
                    "date": idea.date,
                    "created_at": idea.created_at,
                    "attachments": idea.attachments,
                }
                for idea in records.ideas
            ],
            "tasks": [
                {
                    "id": task.id,
                    "content": task.content,
                    "date": task.date,
                    "start_time": task.start_time,
                    "end_time": task.end_time,
                    "duration": task.duration,
                    "attachments": task.attachments,
                }
                for task in records.tasks
            ],
            "summary": {
                "total_ideas": len(records.ideas),
                "total_tasks": len(records.tasks),
                "date_range": f"{start_date} to {end_date}",
            },
        }
