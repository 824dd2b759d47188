from .converter import OrdinalConverter

__all__ = ["OrdinalConverter"]
