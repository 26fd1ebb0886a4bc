"""PubChem PUG REST structure lookups."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import requests

from molbalance.models import ExternalBond, ExternalStructure
from molbalance.structures.base import StructureSource

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://pubchem.ncbi.nlm.nih.gov/rest/pug"


class PubChemSource(StructureSource):
    """Two-step lookup: formula -> first compound id -> 3D record.

    Transport errors, timeouts and payloads of an unexpected shape are all
    reported as "no data".
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 5.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch(self, formula: str) -> Optional[ExternalStructure]:
        try:
            cid = self._find_cid(formula)
            if cid is None:
                return None
            record = self._get_json(f"{self.base_url}/compound/cid/{cid}/record/JSON/", params={"record_type": "3d"})
            return parse_compound_record(record)
        except requests.RequestException as error:
            logger.warning("PubChem lookup for %s failed: %s", formula, error)
        except (KeyError, IndexError, TypeError, ValueError) as error:
            logger.warning("Unexpected PubChem payload for %s: %r", formula, error)
        return None

    def _find_cid(self, formula: str) -> Optional[int]:
        payload = self._get_json(f"{self.base_url}/compound/formula/{formula}/JSON")
        compounds = payload.get("PC_Compounds") or []
        if not compounds:
            logger.info("PubChem has no compound for %s", formula)
            return None
        return int(compounds[0]["id"]["id"]["cid"])

    def _get_json(self, url: str, params: Optional[Mapping[str, str]] = None) -> Mapping[str, Any]:
        response = self.session.get(url, params=params, timeout=self.timeout)
        response.raise_for_status()
        return response.json()


def parse_compound_record(record: Mapping[str, Any]) -> Optional[ExternalStructure]:
    """Extract atoms, conformer coordinates and bonds from a PC_Compounds record.

    PubChem atom ids are 1-based; the returned bonds use 0-based indices.
    """
    compounds = record.get("PC_Compounds") or []
    if not compounds:
        return None
    compound = compounds[0]

    atomic_numbers = tuple(int(number) for number in compound["atoms"]["element"])
    conformer = compound["coords"][0]["conformers"][0]
    coordinates = tuple(
        (float(x), float(y), float(z)) for x, y, z in zip(conformer["x"], conformer["y"], conformer["z"])
    )

    bonds = ()
    if compound.get("bonds"):
        raw = compound["bonds"]
        bonds = tuple(
            ExternalBond(first=int(first) - 1, second=int(second) - 1, order=int(order))
            for first, second, order in zip(raw["aid1"], raw["aid2"], raw["order"])
        )

    return ExternalStructure(atomic_numbers=atomic_numbers, coordinates=coordinates, bonds=bonds)
