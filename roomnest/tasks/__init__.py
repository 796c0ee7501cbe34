"""
Celery Tasks
"""
from .cleanup import cleanup_expired_otps

__all__ = ["cleanup_expired_otps"]
