# Discovers the available tools and executes them on behalf of the model.
# Date: 2026-10-19
# Version: 0.1.0

import pkgutil
import inspect
from pydantic import ValidationError
from typing import Dict, List, Any, Optional, TYPE_CHECKING
from daylog import tools as tools_package
from daylog.core.errors import ToolArgumentError, UnknownToolError
from daylog.tools.base_tool import BaseTool, ToolContext
from daylog.utils.logger import console

if TYPE_CHECKING:
    from daylog.services.record_store import DataProvider

class ToolRegistry:
    """
    A class to automatically discover, register, and describe tools.
    The registry is pure data: it never runs a tool itself.
    """
    def __init__(self):
        self.tools: Dict[str, BaseTool] = {}
        self._discover_tools()
        console.info(f"Tool discovery complete. Found {len(self.tools)} tools: {list(self.tools.keys())}")

    def _discover_tools(self):
        """
        Scans the daylog.tools package, imports all modules, finds classes that
        inherit from BaseTool, and creates an instance of each to register.
        """
        for _, modname, _ in pkgutil.iter_modules(tools_package.__path__, f"{tools_package.__name__}."):
            if modname.startswith(f"{tools_package.__name__}.base_tool"):
                continue
            try:
                module = __import__(modname, fromlist="dummy")
            except Exception:
                console.exception(f"Failed to load tool module {modname}")
                raise
            for _, obj in inspect.getmembers(module, inspect.isclass):
                if issubclass(obj, BaseTool) and obj is not BaseTool and obj.__module__ == module.__name__:
                    self.register(obj())

    def register(self, tool: BaseTool):
        if tool.name in self.tools:
            raise ValueError(f"Tool '{tool.name}' is already registered.")
        self.tools[tool.name] = tool
        console.debug(f"Registered tool: '{tool.name}'")

    def get(self, tool_name: str) -> BaseTool:
        if tool_name not in self.tools:
            raise UnknownToolError(tool_name)
        return self.tools[tool_name]

    def get_definitions(self) -> List[Dict[str, Any]]:
        """Returns the list of all tool definitions for the LLM."""
        return [tool.get_definition() for tool in self.tools.values()]


class ToolExecutor:
    """
    Runs a registered tool by name against a data provider.
    """
    def __init__(self, data_provider: "DataProvider", registry: Optional[ToolRegistry] = None):
        self.registry = registry or tool_registry
        self.context = ToolContext(data_provider=data_provider)

    async def execute(self, tool_name: str, arguments: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validates the arguments against the tool's schema and runs it.

        Raises:
            UnknownToolError: If no tool has this name.
            ToolArgumentError: If the arguments do not match the tool's schema.
            DataUnavailableError: If the tool could not read its data.
        """
        tool = self.registry.get(tool_name)
        try:
            validated = tool.args_schema.model_validate(arguments)
        except ValidationError as e:
            raise ToolArgumentError(f"Invalid arguments for '{tool_name}': {e}") from e
        return await tool.execute(self.context, **validated.model_dump())


# Create a singleton instance for global use throughout the application.
tool_registry = ToolRegistry()
