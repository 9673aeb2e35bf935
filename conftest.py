import pytest
from framework.config import get_settings
from framework.driver import make_driver
from framework.log import configure_logging
from framework.reporting import TestRunReporter, set_active_reporter


def pytest_addoption(parser):
    parser.addoption(
        "--run-e2e",
        action="store_true",
        default=False,
        help="run scenarios marked e2e against the live site (or set RUN_E2E=true)",
    )


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def driver(settings):
    driver = make_driver(settings)
    try:
        yield driver
    finally:
        driver.quit()


@pytest.fixture
def credentials(settings):
    if not settings.has_credentials:
        pytest.skip("THEFORK_USER_EMAIL / THEFORK_USER_PASSWORD not set")
    return settings.user_email, settings.user_password


def pytest_configure(config):
    # Create a reporter for this run so we can collect results/steps/screenshots.
    reporter = TestRunReporter()
    config._tf_reporter = reporter
    set_active_reporter(reporter)
    configure_logging(get_settings().log_level, log_file=reporter.log_path)


def pytest_collection_modifyitems(config, items):
    if config.getoption("--run-e2e") or get_settings().run_e2e:
        return
    skip_e2e = pytest.mark.skip(reason="live site scenario; pass --run-e2e or set RUN_E2E=true")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    rep = outcome.get_result()
    reporter: TestRunReporter | None = getattr(item.config, "_tf_reporter", None)
    if reporter is None:
        return

    if rep.when == "call" or (rep.when == "setup" and rep.outcome in {"failed", "skipped"}) or (rep.when == "teardown" and rep.outcome == "failed"):
        driver = item.funcargs.get("driver")
        reporter.record(item, rep, driver, stage=rep.when)


def pytest_sessionfinish(session, exitstatus):
    reporter: TestRunReporter | None = getattr(session.config, "_tf_reporter", None)
    if reporter:
        reporter.finalize()
    set_active_reporter(None)


def pytest_terminal_summary(terminalreporter, exitstatus, config):
    reporter: TestRunReporter | None = getattr(config, "_tf_reporter", None)
    if reporter and reporter.report_path:
        terminalreporter.write_sep("-", f"HTML report: {reporter.report_path}")
