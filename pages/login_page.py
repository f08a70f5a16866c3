'''
Created on 02-Nov-2024

@author: bibin
'''
from selenium.webdriver.common.by import By

from utils.config_util import get_app_config
from .element_actions import ElementActions


class LoginPage:
    USERNAME_FIELD = (By.CSS_SELECTOR, "input[name='username']")
    PASSWORD_FIELD = (By.CSS_SELECTOR, "input[name='password']")
    LOGIN_BUTTON = (By.CSS_SELECTOR, "input[type='submit']")
    REGISTER_LINK = (By.XPATH, "//a[text()='Register']")

    def __init__(self, driver):
        self.driver = driver
        self.actions = ElementActions(driver)

    def open_login_page(self, base_url=None):
        self.actions.open_url(base_url or get_app_config().base_url)

    def login(self, username, password):
        from .accounts_overview_page import AccountsOverviewPage

        self.actions.fill(self.USERNAME_FIELD, username)
        self.actions.fill(self.PASSWORD_FIELD, password)
        self.actions.click(self.LOGIN_BUTTON)
        return AccountsOverviewPage(self.driver)

    def goto_register(self):
        from .register_page import RegisterPage

        self.actions.click(self.REGISTER_LINK)
        return RegisterPage(self.driver)

    def is_displayed(self):
        """True when the login form's username, password and submit controls all resolve."""
        return all(
            self.actions.is_visible(locator)
            for locator in (self.USERNAME_FIELD, self.PASSWORD_FIELD, self.LOGIN_BUTTON)
        )
