from __future__ import annotations

import json
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional


def _json_dump(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def _default_progress_enabled(stream) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


@dataclass
class ProgressPrinter:
    """Render single-line progress updates in a TTY-friendly way."""

    stream: Any = field(default_factory=lambda: sys.stderr)
    enabled: Optional[bool] = None
    keep_history: bool = False
    history: list[str] = field(default_factory=list, init=False)
    _last_len: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if self.enabled is None:
            self.enabled = _default_progress_enabled(self.stream)

    def update(self, label: str, *, final: bool = False) -> None:
        if self.keep_history:
            self.history.append(label)

        if not self.enabled:
            return

        padding = max(0, self._last_len - len(label))
        self.stream.write(f"\r{label}{' ' * padding}")
        if final:
            self.stream.write(os.linesep)
            self._last_len = 0
        else:
            self._last_len = len(label)
        self.stream.flush()

    def __call__(self, label: str) -> None:
        self.update(label)

    def close(self, label: str | None = None) -> None:
        if self._last_len or label:
            self.update(label or "", final=True)


def resolve_output_path(path_value: str | Path | None) -> Path | None:
    if path_value is None:
        return None
    return Path(path_value).expanduser().resolve()


def write_json_outputs(
    *,
    payload: Any,
    out_path: str | Path | None = None,
    emit_stdout: bool = False,
) -> Optional[Path]:
    out_resolved = resolve_output_path(out_path)

    if out_resolved is not None:
        out_resolved.parent.mkdir(parents=True, exist_ok=True)
        out_resolved.write_text(_json_dump(payload), encoding="utf-8")

    if emit_stdout:
        sys.stdout.write(_json_dump(payload))
        sys.stdout.flush()

    return out_resolved


def apply_log_overrides(
    *, quiet: bool = False, verbose: bool = False
) -> tuple[bool, bool]:
    ss_log = (os.environ.get("SS_LOG") or "").strip().lower()
    return quiet or ss_log == "quiet", verbose or ss_log == "verbose"


def exit_with_message(message: str, *, code: int = 0) -> None:
    stream = sys.stderr if code else sys.stdout
    stream.write(message + os.linesep)
    stream.flush()
    raise SystemExit(code)
