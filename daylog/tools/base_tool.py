# The module is to define the base class for all tools in the application.
# Date: 2026-10-19
# Version: 0.1.0

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pydantic import BaseModel
from typing import Dict, Any, Type, TYPE_CHECKING

if TYPE_CHECKING:
    from daylog.services.record_store import DataProvider


@dataclass(frozen=True)
class ToolContext:
    """
    What a tool may read while it runs. Tools are read-only: they receive the
    data provider but never write through it.
    """
    data_provider: "DataProvider"


class BaseTool(ABC):
    """
    Abstract Base Class for all tools.

    This class defines a standard interface that all tools must implement.
    Attributes:
        name (str): The name of the tool, used for identification.
        description (str): A description of what the tool does, sent to the model verbatim.
        args_schema (Type[BaseModel]): A Pydantic model defining the arguments
            that the tool accepts, which will be validated before execution.
    """
    name: str
    description: str
    args_schema: Type[BaseModel]

    @abstractmethod
    async def execute(self, context: ToolContext, **kwargs) -> Dict[str, Any]:
        """
        The core logic of the tool. This method must be implemented by all subclasses.

        Args:
            context: The collaborators the tool may read from.
            **kwargs: The arguments for the tool, already validated against args_schema.

        Returns:
            A JSON-serializable dictionary.
        """
        pass

    def get_definition(self) -> Dict[str, Any]:
        """
        Returns the tool's definition in a format compliant with OpenAI's
        function-calling specification. This method is inherited by all tools.
        """
        parameters = self.args_schema.model_json_schema()
        parameters.pop("title", None)
        parameters.setdefault("properties", {})
        parameters.setdefault("required", [])
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": parameters
            }
        }
