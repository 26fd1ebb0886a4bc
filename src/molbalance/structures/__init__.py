from .base import StructureSource
from .pubchem import PubChemSource

__all__ = ["StructureSource", "PubChemSource"]
