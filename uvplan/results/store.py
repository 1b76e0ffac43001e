from __future__ import annotations

import json
import logging
import time
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from uvplan.calculation.types import CalculationInput, CalculationResult, result_from_dict
from uvplan.compliance.safety import SafetyLevel, classify_result


logger = logging.getLogger(__name__)


class StoreError(RuntimeError):
    pass


@dataclass(frozen=True)
class SavedCalculation:
    id: str
    name: str
    timestamp: int  # ms since epoch
    fixture: str
    inputs: CalculationInput
    result: CalculationResult
    safety_level: SafetyLevel
    description: Optional[str] = None
    project_id: Optional[str] = None
    note: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "timestamp": self.timestamp,
            "fixture": self.fixture,
            "inputs": self.inputs.to_dict(),
            "result": self.result.to_dict(),
            "safety_level": self.safety_level.value,
            "description": self.description,
            "project_id": self.project_id,
            "note": self.note,
        }


def _calculation_from_dict(d: Dict[str, Any]) -> SavedCalculation:
    return SavedCalculation(
        id=str(d["id"]),
        name=str(d["name"]),
        timestamp=int(d["timestamp"]),
        fixture=str(d["fixture"]),
        inputs=CalculationInput.from_dict(d["inputs"]),
        result=result_from_dict(d["result"]),
        safety_level=SafetyLevel(d.get("safety_level", "safe")),
        description=d.get("description"),
        project_id=d.get("project_id"),
        note=d.get("note"),
    )


class CalculationStore:
    """
    Saved calculation history in a single JSON file, newest first.

    The store owns persistence; results are produced elsewhere and handed in.
    """

    def __init__(self, path: Path):
        self.path = Path(path).expanduser()
        self._items: List[SavedCalculation] = self._read()

    def _read(self) -> List[SavedCalculation]:
        if not self.path.exists():
            return []
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise StoreError(f"Cannot read calculation history: {self.path}") from e
        items = payload.get("calculations", []) if isinstance(payload, dict) else []
        try:
            return [_calculation_from_dict(x) for x in items]
        except (KeyError, TypeError, ValueError) as e:
            raise StoreError(f"Malformed calculation history: {self.path}") from e

    def _write(self) -> None:
        payload = {"calculations": [c.to_dict() for c in self._items]}
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
        except OSError as e:
            raise StoreError(f"Cannot write calculation history: {self.path}") from e

    def save(
        self,
        name: str,
        inputs: CalculationInput,
        result: CalculationResult,
        description: Optional[str] = None,
        project_id: Optional[str] = None,
        note: Optional[str] = None,
        timestamp: Optional[int] = None,
    ) -> Optional[SavedCalculation]:
        if not result.ok:
            logger.info("Not saving %r: result is an error (%s)", name, result.error)
            return None
        ts = int(time.time() * 1000) if timestamp is None else int(timestamp)
        calc = SavedCalculation(
            id=f"{ts}-{uuid.uuid4().hex[:12]}",
            name=name,
            timestamp=ts,
            fixture=inputs.fixture_model,
            inputs=inputs,
            result=result,
            safety_level=classify_result(result),
            description=description,
            project_id=project_id,
            note=note or None,
        )
        self._items.insert(0, calc)
        self._write()
        logger.info("Saved calculation %s (%s)", calc.id, calc.name)
        return calc

    def get(self, calc_id: str) -> Optional[SavedCalculation]:
        for c in self._items:
            if c.id == calc_id:
                return c
        return None

    def list(self, fixture: Optional[str] = None) -> List[SavedCalculation]:
        if fixture is None:
            return list(self._items)
        return [c for c in self._items if c.fixture == fixture]

    def delete(self, calc_id: str) -> bool:
        before = len(self._items)
        self._items = [c for c in self._items if c.id != calc_id]
        if len(self._items) == before:
            return False
        self._write()
        return True

    def load_input(self, calc_id: str) -> Optional[CalculationInput]:
        c = self.get(calc_id)
        return c.inputs if c is not None else None

    def __len__(self) -> int:
        return len(self._items)
