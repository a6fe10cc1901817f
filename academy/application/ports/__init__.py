from academy.application.ports.repositories import ScoreLookupPort, RegionRepository
from academy.application.ports.storage import DocumentStoragePort
from academy.application.ports.documents import DocumentCropperPort

__all__ = [
    "ScoreLookupPort",
    "RegionRepository",
    "DocumentStoragePort",
    "DocumentCropperPort",
]
