"""
Fluid reference database.

Holds the name -> record table read from ``fluid_data.json`` and answers
property queries by fluid name. The table is read at most once per
database; ``load()`` may be awaited by any number of concurrent callers and
they all share a single pending read. A failed read clears the pending marker
so the next call retries.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from .errors import DataLoadError, UnknownFluidError
from .hydraulic_oil import FluidSnapshot, HydraulicOil

logger = logging.getLogger(__name__)

FLUID_DATA_PATH = Path(__file__).parent / "data" / "fluid_data.json"


def read_fluid_data(path: Union[str, Path]) -> Dict[str, Dict]:
    """
    Read and parse a fluid reference table.

    Raises
    ------
    DataLoadError
        If the file cannot be read, is not valid JSON, or is not a mapping.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise DataLoadError(
            f"Failed to load fluid data from {path}: {e}"
        ) from e
    if not isinstance(data, dict):
        raise DataLoadError(
            f"Fluid data in {path} must map fluid names to records"
        )
    return data


class FluidDatabase:
    """
    Lookup table of hydraulic oils keyed by name.

    Parameters
    ----------
    path : str or Path, optional
        Location of the JSON reference table. Defaults to the table shipped
        with the package.
    data : dict, optional
        Already-parsed table. When given, no file is read.

    Queries on a database that has not been loaded read the table
    synchronously first; await load() beforehand inside an event loop.

    Examples
    --------
    >>> db = FluidDatabase()
    >>> asyncio.run(db.load())
    >>> db.density_at("ISO VG 46", 313.15)  # doctest: +SKIP
    """

    def __init__(
        self,
        path: Union[str, Path] = FLUID_DATA_PATH,
        data: Optional[Dict[str, Dict]] = None,
    ):
        self.path = Path(path)
        self._records: Dict[str, Dict] = {}
        self._fluids: Dict[str, HydraulicOil] = {}
        self._pending: Optional[asyncio.Future] = None
        self._loaded = False
        if data is not None:
            self._set_records(data)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "FluidDatabase":
        """Create a database and read its table synchronously."""
        db = cls(path)
        db.load_sync()
        return db

    @property
    def loaded(self) -> bool:
        return self._loaded

    def _set_records(self, data: Dict[str, Dict]):
        self._records = dict(data)
        self._fluids.clear()
        self._loaded = True
        logger.info("Loaded %d fluids", len(self._records))

    def load_sync(self):
        """Read the table in the calling thread (no-op once loaded)."""
        if self.loaded:
            return
        self._set_records(read_fluid_data(self.path))

    async def load(self):
        """
        Read the table once, sharing the read between concurrent callers.

        Callers arriving while a read is in flight await that same read.
        Failures propagate as DataLoadError to every waiting caller and the
        next call starts a fresh read.
        """
        if self.loaded:
            return
        if self._pending is None:
            self._pending = asyncio.ensure_future(self._load())
        await self._pending

    async def _load(self):
        try:
            data = await asyncio.to_thread(read_fluid_data, self.path)
            self._set_records(data)
        except DataLoadError:
            logger.error("Error loading fluid data from %s", self.path)
            raise
        finally:
            self._pending = None

    def fluid_names(self) -> List[str]:
        """All fluid names, sorted alphabetically."""
        self.load_sync()
        return sorted(self._records)

    def __contains__(self, name: str) -> bool:
        return name in self._records

    def __len__(self) -> int:
        return len(self._records)

    def record(self, name: str) -> Dict:
        """Raw reference record for a fluid, reading the table if needed."""
        self.load_sync()
        if name not in self._records:
            raise UnknownFluidError(name)
        return self._records[name]

    def get(self, name: str) -> HydraulicOil:
        """Fluid model for a name, built on first use."""
        if name not in self._fluids:
            self._fluids[name] = HydraulicOil.from_record(
                name, self.record(name)
            )
        return self._fluids[name]

    def density_at(self, name: str, T: float) -> float:
        """Density [kg/m³] of a fluid at temperature T [K]."""
        return self.get(name).density(T)

    def kinematic_viscosity_at(self, name: str, T: float) -> float:
        """Kinematic viscosity [mm²/s] of a fluid at temperature T [K]."""
        return self.get(name).kinematic_viscosity(T)

    def dynamic_viscosity_at(self, name: str, T: float) -> float:
        """Dynamic viscosity [Pa·s] of a fluid at temperature T [K]."""
        return self.get(name).dynamic_viscosity(T)

    def snapshot(self, name: str, T: float) -> FluidSnapshot:
        """Density and viscosities of a fluid at temperature T [K]."""
        return self.get(name).snapshot(T)
