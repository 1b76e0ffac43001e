from __future__ import annotations

import re


class ExportError(RuntimeError):
    pass


def safe_stem(name: str) -> str:
    """
    Flat file stem for a report name: whitespace runs and path separators
    become '_', leading dots are dropped.
    """
    stem = "_".join(str(name).split())
    stem = re.sub(r"[/\\]+", "_", stem).lstrip(".")
    return stem or "calculation"
