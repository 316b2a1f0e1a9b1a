from __future__ import annotations


LOG_LEVELS = ("debug", "info", "warn", "error")


class TraceLog:
    """In-memory structured trace of one recognition pass."""

    def __init__(self, *, min_level: str = "debug") -> None:
        self._min_rank = _level_rank(_normalize_level(min_level))
        self._events: list[dict] = []
        self._seq = 0

    def reset(self) -> None:
        self._events = []
        self._seq = 0

    def record(self, *, level: str, message: object, fields: object | None = None) -> dict | None:
        normalized_level = _normalize_level(level)
        if _level_rank(normalized_level) < self._min_rank:
            return None
        self._seq += 1
        event = {
            "id": f"trace:{self._seq:04d}",
            "level": normalized_level,
            "message": _coerce_message(message),
        }
        if fields is not None:
            event["fields"] = fields
        self._events.append(event)
        return event

    def snapshot(self) -> list[dict]:
        return list(self._events)

    def count(self, level: str | None = None) -> int:
        if level is None:
            return len(self._events)
        normalized_level = _normalize_level(level)
        return sum(1 for event in self._events if event["level"] == normalized_level)


def format_trace(events: list[dict]) -> str:
    lines = []
    for event in events:
        fields = event.get("fields") or {}
        line = fields.get("line") if isinstance(fields, dict) else None
        where = f" (line {line})" if line is not None else ""
        lines.append(f"{event['id']} {event['level']:<5} {event['message']}{where}")
    return "\n".join(lines)


def _normalize_level(level: str) -> str:
    normalized = str(level).lower().strip()
    if normalized not in LOG_LEVELS:
        return "info"
    return normalized


def _level_rank(level: str) -> int:
    return LOG_LEVELS.index(level)


def _coerce_message(message: object) -> str:
    if isinstance(message, str):
        return message
    return str(message)


__all__ = ["LOG_LEVELS", "TraceLog", "format_trace"]
