from bugslang.observability.trace_log import LOG_LEVELS, TraceLog, format_trace

__all__ = ["LOG_LEVELS", "TraceLog", "format_trace"]
