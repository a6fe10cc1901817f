from .material import MaterialAdmin

__all__ = ["MaterialAdmin"]
