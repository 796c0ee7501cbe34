"""
Celery Configuration
"""
from celery import Celery
from roomnest.core.config import settings

# Create Celery app
celery_app = Celery(
    "roomnest",
    broker=settings.CELERY_BROKER_URL,
    backend=settings.CELERY_RESULT_BACKEND,
)

# Import tasks to register them
from roomnest import tasks  # noqa: F401,E402

# Configure Celery
celery_app.conf.update(
    task_serializer='json',
    accept_content=['json'],
    result_serializer='json',
    timezone=settings.CELERY_TIMEZONE,
    enable_utc=True,

    # Worker settings
    worker_prefetch_multiplier=1,
    task_acks_late=True,

    # Result settings
    result_expires=3600,

    # Task time limits
    task_soft_time_limit=120,
    task_time_limit=300,

    # Beat schedule
    beat_schedule={
        'cleanup-expired-otps': {
            'task': 'roomnest.tasks.cleanup.cleanup_expired_otps',
            'schedule': settings.OTP_CLEANUP_INTERVAL,
        },
    },
)
