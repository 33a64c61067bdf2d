from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session

from accountboard.models import Account, Company
from accountboard.provisioning.cli import build_parser, main


def database_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'cli.db'}"


def counts(url: str) -> tuple[int, int]:
    engine = create_engine(url)
    try:
        with Session(engine) as session:
            return session.query(Company).count(), session.query(Account).count()
    finally:
        engine.dispose()


class TestProvisionCli:
    """Tests for the accountboard-provision entry point"""

    def test_parser_defaults(self):
        args = build_parser().parse_args([])

        assert args.skip_seed is False
        assert args.log_level is None

    def test_success_exits_zero(self, tmp_path):
        url = database_url(tmp_path)

        assert main(["--database-url", url]) == 0
        assert counts(url) == (1, 3)

    def test_rerun_exits_zero_without_duplicates(self, tmp_path):
        url = database_url(tmp_path)

        assert main(["--database-url", url]) == 0
        assert main(["--database-url", url]) == 0
        assert counts(url) == (1, 3)

    def test_skip_seed(self, tmp_path):
        url = database_url(tmp_path)

        assert main(["--database-url", url, "--skip-seed"]) == 0
        assert counts(url) == (0, 0)

    def test_failed_step_exits_one(self, tmp_path):
        url = database_url(tmp_path)
        engine = create_engine(url)
        with engine.begin() as conn:
            conn.execute(text("CREATE TABLE accounts (id INTEGER PRIMARY KEY)"))
        engine.dispose()

        assert main(["--database-url", url, "--log-level", "debug"]) == 1

    def test_unreachable_database_exits_one(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'missing' / 'cli.db'}"

        assert main(["--database-url", url]) == 1

    def test_unknown_dialect_exits_one(self, caplog):
        caplog.set_level("ERROR", logger="accountboard")

        assert main(["--database-url", "notadialect://x"]) == 1
        assert "Migration failed at step connect" in caplog.text

    def test_malformed_url_exits_one(self):
        assert main(["--database-url", "this is not a url"]) == 1

    def test_logs_demo_login_when_seeded(self, tmp_path, caplog):
        caplog.set_level("INFO", logger="accountboard")

        main(["--database-url", database_url(tmp_path)])

        assert "Demo login: admin@demo.com" in caplog.text
