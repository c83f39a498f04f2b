from __future__ import annotations


class SnapshotError(ValueError):
    pass
