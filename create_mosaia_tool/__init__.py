"""create-mosaia-tool - Scaffold a new Mosaia tool project from the starter template."""

from create_mosaia_tool.models.config import ScaffoldConfig
from create_mosaia_tool.models.inputs import UserInputs
from create_mosaia_tool.scaffolder import Scaffolder, ScaffoldResult

__version__ = "0.1.0"
__all__ = ["Scaffolder", "ScaffoldResult", "ScaffoldConfig", "UserInputs"]
