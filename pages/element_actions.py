import logging
import time
from urllib.parse import urljoin

from selenium.common.exceptions import TimeoutException
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import Select, WebDriverWait

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10
PROBE_TIMEOUT = 5


class ElementActions:
    """Waits for a locator's pre-condition before every interaction.

    Locators are plain Selenium ``(By, selector)`` tuples and are resolved
    again on each call. The driver is borrowed from the caller and never quit
    here.
    """

    def __init__(self, driver, timeout=DEFAULT_TIMEOUT, probe_timeout=PROBE_TIMEOUT):
        self.driver = driver
        self.timeout = timeout
        self.probe_timeout = probe_timeout

    def _wait(self, timeout=None):
        return WebDriverWait(self.driver, self.timeout if timeout is None else timeout)

    def open_url(self, url=""):
        # relative urls resolve against the current document
        url = urljoin(self.driver.current_url, url)
        logger.info("Opening %s", url)
        self.driver.get(url)

    def wait_until_visible(self, locator, timeout=None):
        return self._wait(timeout).until(
            EC.visibility_of_element_located(locator),
            message=f"{locator} not visible",
        )

    def wait_until_attached(self, locator, timeout=None):
        return self._wait(timeout).until(
            EC.presence_of_element_located(locator),
            message=f"{locator} not attached",
        )

    def click(self, locator):
        logger.debug("Click %s", locator)
        self.wait_until_visible(locator).click()

    def fill(self, locator, text):
        logger.debug("Fill %s", locator)
        element = self.wait_until_visible(locator)
        element.clear()
        element.send_keys(text)

    def get_text(self, locator):
        element = self.wait_until_visible(locator)
        return (element.text or "").strip()

    def select_option(self, locator, value):
        """Select the option whose value or label equals ``value``.

        The option list is polled until the option appears, so dropdowns
        populated after page load are handled the same way as static ones.
        """
        logger.debug("Select %r in %s", value, locator)
        select = Select(self.wait_until_visible(locator))

        def matching_option(driver):
            for option in select.options:
                if value in (option.get_attribute("value"), option.text.strip()):
                    return option
            return False

        option = self._wait().until(matching_option, message=f"Option {value!r} not found in {locator}")
        if option.get_attribute("value") == value:
            select.select_by_value(value)
        else:
            select.select_by_visible_text(option.text.strip())

    def is_visible(self, locator, timeout=None):
        try:
            self.wait_until_visible(locator, self.probe_timeout if timeout is None else timeout)
            return True
        except TimeoutException:
            return False

    def count(self, locator):
        return len(self.driver.find_elements(*locator))

    def pause(self, seconds):
        time.sleep(seconds)
