from .material import Material
from .region import QuestionRegion

__all__ = [
    "Material",
    "QuestionRegion",
]
