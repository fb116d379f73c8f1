from apscheduler.schedulers.blocking import (  # type: ignore[import-untyped]
    BlockingScheduler,
)
from apscheduler.triggers.cron import CronTrigger  # type: ignore[import-untyped]


def purge_expired_sessions():
    from sqlmodel import Session

    from cinelog.core.db import engine
    from cinelog.services.auth import purge_expired

    with Session(engine) as session:
        purge_expired(session=session)


if __name__ == "__main__":
    from cinelog.logging_ import setup_logger

    setup_logger("scheduler")
    scheduler = BlockingScheduler()
    scheduler.add_job(
        func=purge_expired_sessions,
        trigger=CronTrigger(hour=3, minute=0),
        id="nightly_session_purge",
    )
    scheduler.start()
