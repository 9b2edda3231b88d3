"""pytest plugin driving fixture users through a test session.

The plugin is inert until a suite configuration file is given, either with
``--fixture-users-config``, the ``fixture_users_config`` ini key or the
FIXTURE_USERS_CONFIG_FILE environment variable. Once configured:

- the declared users are created at session start (``create: true``),
- test steps reach them through the session-scoped ``fixture_users`` fixture,
- they are deleted at session finish (``delete: true``).
"""

from __future__ import annotations

from pathlib import Path

import pytest

from fixture_users.application import ReconciliationResult
from fixture_users.dependencies import get_fixture_users_module, get_identity_store
from fixture_users.infrastructure import SQLAlchemyIdentityStore
from fixture_users.presentation.suite_module import FixtureUsersModule
from infrastructure.config_loader import SuiteConfigLoader
from infrastructure.logging import configure_logging
from infrastructure.settings import DatabaseSettings, FixtureUsersSettings
from infrastructure.version import __version__
from shared_kernel.observability_context import ObservationContext

module_key = pytest.StashKey[FixtureUsersModule]()
store_key = pytest.StashKey[SQLAlchemyIdentityStore]()
config_file_key = pytest.StashKey[Path]()
results_key = pytest.StashKey[list[ReconciliationResult]]()


def pytest_addoption(parser: pytest.Parser) -> None:
    """Add fixture user command line options and ini keys."""
    group = parser.getgroup("fixture-users", "fixture user accounts")
    group.addoption(
        "--fixture-users-config",
        action="store",
        default=None,
        help="YAML suite configuration declaring the fixture users",
    )
    group.addoption(
        "--fixture-users-db",
        action="store",
        default=None,
        help="SQLAlchemy URL of the identity store (overrides FIXTURE_USERS_DB_URL)",
    )
    parser.addini(
        "fixture_users_config",
        help="YAML suite configuration declaring the fixture users (relative to rootdir)",
        default="",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Build the fixture users module when a suite configuration is set."""
    overrides = {}
    config_file = _resolve_config_file(config)
    if config_file is not None:
        overrides["config_file"] = config_file

    settings = FixtureUsersSettings(**overrides)
    if settings.config_file is None:
        return

    db_overrides = {}
    db_url = config.getoption("fixture_users_db")
    if db_url:
        db_overrides["url"] = db_url
    db_settings = DatabaseSettings(**db_overrides)

    if settings.configure_logging:
        configure_logging()

    suite_config = SuiteConfigLoader().load(settings.config_file)

    context = ObservationContext.for_run(suite=config.rootpath.name)
    store = get_identity_store(db_settings, settings, context)
    module = get_fixture_users_module(store, context)
    module.initialize(suite_config)

    config.stash[module_key] = module
    config.stash[store_key] = store
    config.stash[config_file_key] = settings.config_file
    config.stash[results_key] = []


def pytest_report_header(config: pytest.Config) -> str | None:
    config_file = config.stash.get(config_file_key, None)
    if config_file is None:
        return None
    return f"fixture-users {__version__}, config: {config_file}"


def pytest_sessionstart(session: pytest.Session) -> None:
    """Create the declared users before any test runs."""
    module = session.config.stash.get(module_key, None)
    if module is not None:
        session.config.stash[results_key].extend(module.before_suite())


def pytest_sessionfinish(session: pytest.Session, exitstatus: int) -> None:
    """Delete the declared users and release the database engine."""
    module = session.config.stash.get(module_key, None)
    if module is None:
        return

    try:
        session.config.stash[results_key].extend(module.after_suite())
    finally:
        session.config.stash[store_key].engine.dispose()


def pytest_terminal_summary(terminalreporter, exitstatus: int, config: pytest.Config):
    """List the fixture users that could not be reconciled."""
    failures = [result for result in config.stash.get(results_key, []) if not result.ok]
    if not failures:
        return

    terminalreporter.section("fixture users")
    for result in failures:
        line = f"{result.username}: {result.outcome}"
        if result.error:
            line = f"{line} ({result.error})"
        terminalreporter.write_line(line)


@pytest.fixture(scope="session")
def fixture_users(request: pytest.FixtureRequest) -> FixtureUsersModule:
    """The fixture users module of this session."""
    module = request.config.stash.get(module_key, None)
    if module is None:
        pytest.skip("fixture users are not configured (see --fixture-users-config)")
    return module


def _resolve_config_file(config: pytest.Config) -> Path | None:
    option = config.getoption("fixture_users_config")
    if option:
        return Path(option)

    ini_value = config.getini("fixture_users_config")
    if ini_value:
        return config.rootpath / ini_value

    return None
