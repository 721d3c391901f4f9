"""APScheduler jobs for the periodic draw check."""

from datetime import datetime, timedelta

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from loguru import logger

from powerball_watch.config import settings
from powerball_watch.schemas.check import CheckResult, CheckStatus

CHECK_JOB_ID = "powerball_check"
RETRY_JOB_ID = "powerball_check_retry"

_scheduler: AsyncIOScheduler | None = None
_retry_attempt = 0


def retry_delay(attempt: int) -> timedelta:
    """Exponential backoff: base, 2x base, 4x base..."""
    return timedelta(seconds=settings.RETRY_BACKOFF_SECONDS * 2 ** attempt)


def _schedule_retry():
    global _retry_attempt
    if _scheduler is None:
        return
    if _retry_attempt >= settings.RETRY_MAX_ATTEMPTS:
        logger.warning(
            "Giving up after {} retries, waiting for the next scheduled check",
            _retry_attempt,
        )
        _retry_attempt = 0
        return

    delay = retry_delay(_retry_attempt)
    _retry_attempt += 1
    _scheduler.add_job(
        _run_check, "date",
        run_date=datetime.now() + delay,
        id=RETRY_JOB_ID,
        replace_existing=True,
    )
    logger.info("Retry {} scheduled in {}", _retry_attempt, delay)


async def run_exclusive_check() -> CheckResult | None:
    """Run one check cycle unless another one is in flight (then return None)."""
    from powerball_watch.services.check_service import check_latest_draw, cycle_lock

    if cycle_lock.locked():
        logger.info("Check already running, skipping this trigger")
        return None

    async with cycle_lock:
        return await check_latest_draw()


async def _run_check():
    """Scheduled entry point; schedules a retry if the fetch failed."""
    global _retry_attempt
    try:
        result = await run_exclusive_check()
    except Exception as e:
        logger.error("Scheduled check failed: {}", e)
        return

    if result is None:
        return
    if result.status == CheckStatus.RETRY:
        _schedule_retry()
        return
    if not result.status.is_success:
        logger.warning("Check failed ({}), waiting for the next scheduled run", result.error_message)
    _retry_attempt = 0


def start_scheduler():
    """Start the APScheduler with the periodic check job."""
    global _scheduler
    if _scheduler is not None:
        return

    _scheduler = AsyncIOScheduler()

    _scheduler.add_job(
        _run_check, "interval",
        hours=settings.CHECK_INTERVAL_HOURS,
        jitter=settings.CHECK_JITTER_SECONDS,
        next_run_time=datetime.now(),
        max_instances=1,
        coalesce=True,
        id=CHECK_JOB_ID,
    )

    _scheduler.start()
    logger.info("Scheduler started with {} jobs", len(_scheduler.get_jobs()))


def stop_scheduler():
    """Shutdown the scheduler."""
    global _scheduler
    if _scheduler:
        _scheduler.shutdown(wait=False)
        _scheduler = None
        logger.info("Scheduler stopped")


def get_scheduler_status() -> list[dict]:
    """Get status of all scheduled jobs."""
    if not _scheduler:
        return []

    jobs = []
    for job in _scheduler.get_jobs():
        jobs.append({
            "id": job.id,
            "name": job.name,
            "next_run": str(job.next_run_time) if job.next_run_time else None,
            "trigger": str(job.trigger),
        })
    return jobs
