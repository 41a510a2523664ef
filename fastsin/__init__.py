from .trig import sin

__version__ = "1.0.0"

__all__ = ["sin"]
