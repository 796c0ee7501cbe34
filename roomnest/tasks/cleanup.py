"""
Cleanup tasks for expired data
"""
import logging
from celery import shared_task
from roomnest.core.database import SessionLocal
from roomnest.services.otp import purge_expired_otps

logger = logging.getLogger(__name__)


@shared_task(name="roomnest.tasks.cleanup.cleanup_expired_otps")
def cleanup_expired_otps():
    """
    Delete unverified OTP codes past their expiry
    """
    db = SessionLocal()
    try:
        count = purge_expired_otps(db)
        logger.info("[CLEANUP] Deleted %s expired OTP codes", count)
        return {"success": True, "deleted_count": count}
    finally:
        db.close()
