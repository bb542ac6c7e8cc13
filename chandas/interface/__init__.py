# chandas/interface/__init__.py

from .base_interface import BaseInterface, format_text
from .cli_interface import CLIInterface
from .file_interface import FileInterface

__all__ = [
    "BaseInterface",
    "format_text",
    "CLIInterface",
    "FileInterface"
]
