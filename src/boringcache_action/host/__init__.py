"""Adapters for the GitHub Actions runner environment."""

from .actions import Host, input_env_name
from .commands import WorkflowCommandHandler, configure_logging, escape_data, format_command
from .state import GitHubStateStore, InMemoryStateStore, file_command_entry

__all__ = [
    "GitHubStateStore",
    "Host",
    "InMemoryStateStore",
    "WorkflowCommandHandler",
    "configure_logging",
    "escape_data",
    "file_command_entry",
    "format_command",
    "input_env_name",
]
