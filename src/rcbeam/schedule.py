"""In-memory beam schedule.

Keeps timestamped snapshots of designed beams (inputs + design result) the
way a drawing schedule lists B1, B2, ...  Nothing is written to disk.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Iterator

from loguru import logger

from rcbeam.config import DEFAULT_SETTINGS, DesignSettings
from rcbeam.core.beam_design import BeamDesignEngine
from rcbeam.models.inputs import DesignInputs
from rcbeam.models.outputs import DesignResult, LoadResult


@dataclass(frozen=True)
class SavedDesign:
    """One schedule entry."""

    id: str
    name: str
    created_at: datetime
    inputs: DesignInputs
    design: DesignResult
    total_design_udl: float | None = None  # kN/m
    settings: DesignSettings = DEFAULT_SETTINGS


class DesignSchedule:
    """Ordered collection of saved designs keyed by a generated id."""

    def __init__(self) -> None:
        self._entries: dict[str, SavedDesign] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[SavedDesign]:
        return iter(list(self._entries.values()))

    def __contains__(self, design_id: str) -> bool:
        return design_id in self._entries

    def save(
        self,
        inputs: DesignInputs,
        design: DesignResult,
        loads: LoadResult | None = None,
        name: str | None = None,
        settings: DesignSettings | None = None,
    ) -> SavedDesign:
        """Store deep copies of *inputs* and *design* under a new id.

        *settings* are the ones the design was run with; ``recompute`` reuses them.
        """
        design_id = uuid.uuid4().hex[:9]
        entry = SavedDesign(
            id=design_id,
            name=name or f"Beam B{len(self._entries) + 1}",
            created_at=datetime.now(),
            inputs=inputs.model_copy(deep=True),
            design=design.model_copy(deep=True),
            total_design_udl=loads.total_design_udl if loads is not None else None,
            settings=settings or DEFAULT_SETTINGS,
        )
        self._entries[design_id] = entry
        logger.info("Saved design {} as {!r}", design_id, entry.name)
        return entry

    def get(self, design_id: str) -> SavedDesign:
        """Return the entry for *design_id*; raises ``KeyError`` if absent."""
        try:
            return self._entries[design_id]
        except KeyError:
            raise KeyError(f"No saved design with id {design_id!r}") from None

    def remove(self, design_id: str) -> SavedDesign:
        """Delete and return the entry for *design_id*."""
        entry = self.get(design_id)
        del self._entries[design_id]
        return entry

    def rename(self, design_id: str, name: str) -> SavedDesign:
        entry = self.get(design_id)
        renamed = replace(entry, name=name)
        self._entries[design_id] = renamed
        return renamed

    def list(self) -> list[SavedDesign]:
        """Entries in the order they were saved."""
        return list(self._entries.values())

    def recompute(
        self,
        design_id: str,
        settings: DesignSettings | None = None,
    ) -> tuple[DesignResult, bool]:
        """Re-run the saved inputs through the engine.

        Uses the settings stored with the entry unless *settings* is given.

        Returns
        -------
        tuple
            The fresh design result and whether it equals the saved one.
        """
        entry = self.get(design_id)
        _, _, fresh = BeamDesignEngine(settings or entry.settings).design(entry.inputs)
        return fresh, fresh == entry.design
