# The module is to define the tool that tells the model what time it is.
# Date: 2026-10-19
# Version: 0.1.0

from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict
from typing import Any, Callable, Dict, Optional, Type
from .base_tool import BaseTool, ToolContext
from daylog.utils.logger import console


class GetCurrentTimeInput(BaseModel):
    """The tool takes no parameters; anything the model sends is ignored."""
    model_config = ConfigDict(extra="ignore")


class GetCurrentTimeTool(BaseTool):
    """
    Returns the current instant so the model can resolve "today" or "this week"
    without guessing a date.
    """
    name: str = "get_current_time"
    description: str = "Gets the current date and time. Call this before reasoning about 'today', 'yesterday' or 'this week'."
    args_schema: Type[BaseModel] = GetCurrentTimeInput

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    async def execute(self, context: ToolContext, **kwargs) -> Dict[str, Any]:
        now = self._clock()
        local_now = now.astimezone()
        console.info(f"Executing tool '{self.name}'")
        return {
            "current_time": now.isoformat(),
            "formatted_time": local_now.strftime("%A, %B %d, %Y %H:%M:%S"),
            "date": local_now.strftime("%Y-%m-%d"),
        }
