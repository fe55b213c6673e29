from .starter_model import StarterModel

__all__ = ['StarterModel']
