"""
CLI entrypoint for the idempotent database seed. Run from project root:

  python -m app.seed

Creates the LinkedIn profiles, skills, and the default user the browser
extension attaches prospects to. Exits non-zero if any step fails.
"""

import logging
import sys

from app.core.database import SessionLocal
from app.services.seed import run_seed

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def run() -> int:
    """Seed the database; return the process exit code."""
    logger.info("Seeding database...")
    db = SessionLocal()
    try:
        report = run_seed(db)
    except Exception as e:
        logger.exception("Seed failed: %s", e)
        return 1
    finally:
        db.close()
    logger.info(
        "Seed completed: default_user_id=%s default_user_email=%s action=%s",
        report.default_user_id,
        report.default_user_email,
        report.default_user_action.value,
    )
    logger.info("Use this user_id when creating prospects from the extension.")
    return 0


if __name__ == "__main__":
    sys.exit(run())
