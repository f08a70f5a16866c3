from selenium.webdriver.common.by import By

from .customer_menu import CustomerMenu
from .element_actions import ElementActions


class OpenNewAccountPage:
    ACCOUNT_TYPE_SELECT = (By.CSS_SELECTOR, "#openAccountForm #type")
    FROM_ACCOUNT_SELECT = (By.CSS_SELECTOR, "#openAccountForm #fromAccountId")
    FIRST_FROM_ACCOUNT_OPTION = (By.CSS_SELECTOR, "#openAccountForm #fromAccountId option:first-child")
    OPEN_ACCOUNT_BUTTON = (By.CSS_SELECTOR, "input[value='Open New Account']")
    NEW_ACCOUNT_NUMBER = (By.CSS_SELECTOR, "#openAccountResult #newAccountId")

    def __init__(self, driver):
        self.driver = driver
        self.actions = ElementActions(driver)
        self.customer_menu = CustomerMenu(driver)

    def open_new_account(self, account_type, from_account_id=""):
        """Open an account of ``account_type``.

        The source account dropdown is populated asynchronously, so the first
        option must be attached before submitting. Without a ``from_account_id``
        the form's default source account is used.
        """
        self.actions.select_option(self.ACCOUNT_TYPE_SELECT, account_type)
        self.actions.wait_until_attached(self.FIRST_FROM_ACCOUNT_OPTION)
        if from_account_id:
            self.actions.select_option(self.FROM_ACCOUNT_SELECT, from_account_id)
        self.actions.click(self.OPEN_ACCOUNT_BUTTON)

    def get_new_account_number(self):
        return self.actions.get_text(self.NEW_ACCOUNT_NUMBER)

    def get_customer_menu(self):
        return self.customer_menu
