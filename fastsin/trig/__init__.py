from .sine import sin

__all__ = ["sin"]
