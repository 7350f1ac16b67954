from .common import (
    ProgressPrinter,
    apply_log_overrides,
    exit_with_message,
    resolve_output_path,
    write_json_outputs,
)
from .handlers import handle_search_stats, resolve_query

__all__ = [
    "ProgressPrinter",
    "apply_log_overrides",
    "exit_with_message",
    "resolve_output_path",
    "write_json_outputs",
    "handle_search_stats",
    "resolve_query",
]
