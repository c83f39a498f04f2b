from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from docket_view.errors import SnapshotError
from docket_view.models import DocketSnapshot

logger = logging.getLogger(__name__)


def _read_payload(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in {".yaml", ".yml"}:
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text) if text.strip() else {}
    if not isinstance(data, dict):
        raise SnapshotError(f"Snapshot {path} must contain a mapping, got {type(data).__name__}")
    return data


def load_snapshot(
    path: Path | str,
    *,
    now_ms: int | None = None,
    default_now_ms: int | None = None,
) -> DocketSnapshot:
    """Read a JSON or YAML snapshot file.

    ``now_ms`` replaces any clock stored in the file; ``default_now_ms`` is used only when
    the file carries none.
    """
    snapshot_path = Path(path)
    try:
        data = _read_payload(snapshot_path)
    except OSError as exc:
        raise SnapshotError(f"Cannot read snapshot {snapshot_path}: {exc}") from exc
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SnapshotError(f"Cannot parse snapshot {snapshot_path}: {exc}") from exc

    if now_ms is not None:
        data.pop("now_ms", None)
        data["nowMs"] = now_ms
    elif default_now_ms is not None and "nowMs" not in data and "now_ms" not in data:
        data["nowMs"] = default_now_ms
    try:
        snapshot = DocketSnapshot.model_validate(data)
    except ValidationError as exc:
        raise SnapshotError(f"Invalid snapshot {snapshot_path}: {exc}") from exc
    logger.debug(
        "Loaded snapshot %s: %d active, %d scheduled, %d open defence",
        snapshot_path,
        len(snapshot.schedule.active),
        len(snapshot.schedule.scheduled),
        len(snapshot.open_defence_cases),
    )
    return snapshot
