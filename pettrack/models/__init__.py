from .pet import PetCreate, PetOut, PetUpdate
from .weight import WeightCreate, WeightOut

__all__ = [
    "PetCreate", "PetOut", "PetUpdate",
    "WeightCreate", "WeightOut",
]
