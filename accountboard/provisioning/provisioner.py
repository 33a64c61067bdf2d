"""
Schema provisioner.

Brings an empty or partially initialised database to the full AccountBoard
schema and seeds the demo tenant. Every statement is existence-checked
(CREATE ... IF NOT EXISTS, ON CONFLICT DO NOTHING), so the run can be
repeated safely.

Step order is fixed:

    companies → users → employees → accounts → customers → services →
    transactions → projects → collaborators → commission_calculations →
    indexes → demo_seed

The whole run uses a single connection, commits after each step and
releases the connection on success and on failure.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from sqlalchemy import Table
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.schema import CreateIndex, CreateTable

from accountboard.config import Settings, settings as default_settings
from accountboard.core.exceptions import ProvisioningError
from accountboard.models import TABLE_CREATION_ORDER
from accountboard.provisioning.seed import SeedResult, seed_demo_tenant

logger = logging.getLogger(__name__)

INDEX_STEP = "indexes"
SEED_STEP = "demo_seed"
CONNECT_STEP = "connect"


@dataclass(frozen=True)
class ProvisioningStep:
    name: str
    action: Callable[[Connection], Any]


@dataclass
class ProvisioningReport:
    """Steps completed by a run and the seed outcome."""

    completed_steps: list[str] = field(default_factory=list)
    seed: SeedResult | None = None

    @property
    def seeded(self) -> bool:
        return self.seed is not None and self.seed.created


def create_table(connection: Connection, table: Table) -> None:
    """CREATE TABLE IF NOT EXISTS, without the table's indexes."""
    connection.execute(CreateTable(table, if_not_exists=True))


def create_tables(connection: Connection) -> None:
    for table in TABLE_CREATION_ORDER:
        create_table(connection, table)


def create_indexes(connection: Connection) -> int:
    """CREATE INDEX IF NOT EXISTS for every index declared on the models."""
    count = 0
    for table in TABLE_CREATION_ORDER:
        for index in sorted(table.indexes, key=lambda ix: ix.name):
            connection.execute(CreateIndex(index, if_not_exists=True))
            count += 1
    return count


def drop_tables(connection: Connection) -> None:
    """Drop every AccountBoard table, children first."""
    for table in reversed(TABLE_CREATION_ORDER):
        table.drop(connection, checkfirst=True)


class Provisioner:
    """
    Runs the provisioning steps against one engine.

    Usage:
        report = Provisioner(engine).run()
        if report.seeded:
            ...
    """

    def __init__(self, engine: Engine, config: Settings | None = None, seed: bool = True):
        self.engine = engine
        self.config = config or default_settings
        self.seed = seed

    def steps(self) -> list[ProvisioningStep]:
        """The ordered step list for this run."""
        steps = [
            ProvisioningStep(name=table.name, action=lambda conn, table=table: create_table(conn, table))
            for table in TABLE_CREATION_ORDER
        ]
        steps.append(ProvisioningStep(name=INDEX_STEP, action=create_indexes))
        if self.seed:
            steps.append(
                ProvisioningStep(name=SEED_STEP, action=lambda conn: seed_demo_tenant(conn, self.config))
            )
        return steps

    def run(self) -> ProvisioningReport:
        """
        Execute every step in order.

        Raises:
            ProvisioningError: on the first failing step; later steps are not run
        """
        report = ProvisioningReport()
        logger.info("Provisioning AccountBoard schema on %s", self.engine.url.render_as_string(hide_password=True))

        try:
            connection = self.engine.connect()
        except SQLAlchemyError as exc:
            logger.error("Could not connect to the database: %s", exc)
            raise ProvisioningError(CONNECT_STEP, exc) from exc

        with connection:
            for step in self.steps():
                try:
                    result = step.action(connection)
                    connection.commit()
                except Exception as exc:
                    connection.rollback()
                    logger.error("Provisioning step %s failed: %s", step.name, exc)
                    raise ProvisioningError(step.name, exc) from exc

                if step.name == SEED_STEP:
                    report.seed = result
                elif step.name == INDEX_STEP:
                    logger.info("Indexes ensured (%d)", result)
                else:
                    logger.info("Table %s ensured", step.name)
                report.completed_steps.append(step.name)

        logger.info("Provisioning completed (%d steps)", len(report.completed_steps))
        return report


def provision(engine: Engine, config: Settings | None = None, seed: bool = True) -> ProvisioningReport:
    """Convenience wrapper around ``Provisioner(engine).run()``."""
    return Provisioner(engine, config=config, seed=seed).run()


__all__ = [
    "CONNECT_STEP",
    "INDEX_STEP",
    "SEED_STEP",
    "Provisioner",
    "ProvisioningReport",
    "ProvisioningStep",
    "create_indexes",
    "create_table",
    "create_tables",
    "drop_tables",
    "provision",
]
