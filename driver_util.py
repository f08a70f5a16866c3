import logging

import chromedriver_autoinstaller
from selenium import webdriver

logger = logging.getLogger(__name__)

BROWSERS = ("chrome", "firefox", "edge")


def get_driver(browser="chrome", headless=True):
    """Returns an initialized WebDriver for ``browser``; Chrome gets its chromedriver installed first."""
    logger.info("Starting %s (headless=%s)", browser, headless)
    if browser == "chrome":
        chromedriver_autoinstaller.install()  # Automatically installs chromedriver if not present
        options = webdriver.ChromeOptions()
        if headless:
            options.add_argument("--headless=new")
        driver = webdriver.Chrome(options=options)
    elif browser == "firefox":
        options = webdriver.FirefoxOptions()
        if headless:
            options.add_argument("-headless")
        driver = webdriver.Firefox(options=options)
    elif browser == "edge":
        options = webdriver.EdgeOptions()
        if headless:
            options.add_argument("--headless=new")
        driver = webdriver.Edge(options=options)
    else:
        raise ValueError(f"Unsupported browser: {browser!r}, expected one of {BROWSERS}")
    driver.maximize_window()
    return driver
