"""
Command line entry point: ``accountboard-provision``.

Exit code 0 on success, 1 when any provisioning step fails.
"""

import argparse
import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from accountboard.config import settings
from accountboard.core.exceptions import ProvisioningError
from accountboard.database import create_db_engine
from accountboard.logging_config import configure_logging
from accountboard.provisioning.provisioner import CONNECT_STEP, Provisioner

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="accountboard-provision",
        description="Create the AccountBoard schema, indexes and demo tenant.",
    )
    parser.add_argument(
        "--database-url",
        default=settings.DATABASE_URL,
        help="SQLAlchemy database URL (default: DATABASE_URL setting)",
    )
    parser.add_argument(
        "--skip-seed",
        action="store_true",
        help="Create schema and indexes only, without the demo tenant",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: LOG_LEVEL setting)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    engine = None
    try:
        try:
            engine = create_db_engine(args.database_url)
        except (SQLAlchemyError, ImportError) as exc:
            # Bad URL, unknown dialect or missing driver
            raise ProvisioningError(CONNECT_STEP, exc) from exc
        report = Provisioner(engine, seed=not args.skip_seed).run()
    except ProvisioningError as exc:
        logger.error("Migration failed at step %s: %s", exc.step, exc.cause)
        return 1
    finally:
        if engine is not None:
            engine.dispose()

    if report.seeded:
        logger.info("Demo login: %s / %s", settings.DEMO_EMAIL, settings.DEMO_PASSWORD)
    return 0


if __name__ == "__main__":
    sys.exit(main())
