"""Service layer - filename derivation and file actions."""
from .naming import splice_name, filename_from_header, unique_path
from .file_actions import FileActionExecutor, execute_action

__all__ = [
    "splice_name",
    "filename_from_header",
    "unique_path",
    "FileActionExecutor",
    "execute_action",
]
