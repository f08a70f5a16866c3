import dataclasses

import allure
import pytest

from driver_util import BROWSERS, get_driver
from pages.login_page import LoginPage
from scenario_data import (
    WELCOME_PAGE_TITLE,
    ScenarioContext,
    load_test_data,
    record_serial_failure,
    skip_after_serial_failure,
)
from utils.config_util import get_app_config
from utils.string_util import generate_timestamp_string


def pytest_addoption(parser):
    group = parser.getgroup("parabank")
    group.addoption("--env", default=None, help="configuration environment: qa, dev, prod or uat")
    group.addoption("--browser", default=None, choices=BROWSERS, help="browser engine to drive")
    group.addoption("--headed", action="store_true", help="show the browser window")
    group.addoption("--base-url", default=None, help="override the configured base URL")
    group.addoption("--live", action="store_true", help="run scenarios against the live site")


def pytest_collection_modifyitems(config, items):
    # the REST check reads what the UI scenarios created
    items.sort(key=lambda item: item.get_closest_marker("interface") is not None)
    if config.getoption("--live"):
        return
    skip_live = pytest.mark.skip(reason="needs --live to run against the site")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
    record_serial_failure(item, report)


def pytest_runtest_setup(item):
    skip_after_serial_failure(item)


@pytest.fixture(scope="session")
def app_config(pytestconfig):
    config = get_app_config(pytestconfig.getoption("--env"))
    if pytestconfig.getoption("--base-url"):
        config = dataclasses.replace(config, base_url=pytestconfig.getoption("--base-url"))
    return config


@pytest.fixture(scope="session")
def scenario_context():
    return ScenarioContext()


@pytest.fixture(scope="session")
def browser_options(pytestconfig, app_config):
    browser = pytestconfig.getoption("--browser") or app_config.browser
    headless = app_config.headless and not pytestconfig.getoption("--headed")
    return browser, headless


@pytest.fixture
def driver(request, browser_options):
    driver = get_driver(*browser_options)
    yield driver
    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        allure.attach(driver.get_screenshot_as_png(), name="Failure", attachment_type=allure.attachment_type.PNG)
    driver.quit()


@pytest.fixture
def login_page(driver, app_config):
    login_page = LoginPage(driver)
    with allure.step("Open ParaBank login page"):
        login_page.open_login_page(app_config.base_url)
        assert driver.title == WELCOME_PAGE_TITLE
    return login_page


@pytest.fixture(scope="session")
def registered_user(app_config, browser_options):
    """A fresh customer registered once per session in its own browser."""
    user_info = load_test_data("user")["user_info"]
    username = "qa_u_" + generate_timestamp_string()
    driver = get_driver(*browser_options)
    try:
        login_page = LoginPage(driver)
        login_page.open_login_page(app_config.base_url)
        register_page = login_page.goto_register()
        register_page.register(
            user_info["first_name"],
            user_info["last_name"],
            user_info["address"],
            user_info["city"],
            user_info["state"],
            user_info["zip_code"],
            user_info["phone"],
            user_info["ssn"],
            username,
            user_info["password"],
        )
        assert register_page.get_welcome_message() == f"Welcome {username}"
        register_page.get_customer_menu().logout()
    finally:
        driver.quit()
    return ScenarioContext(username=username, password=user_info["password"])
