from .models import AccessClass, Vehicle

__all__ = ["AccessClass", "Vehicle"]
