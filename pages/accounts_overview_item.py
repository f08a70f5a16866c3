from selenium.webdriver.common.by import By

from .element_actions import ElementActions


class AccountsOverviewItem:
    """One row of the Accounts Overview table, addressed by zero-based index."""

    ROWS_XPATH = "//div[@id='showOverview']//table[@id='accountTable']/tbody/tr"

    def __init__(self, driver, index):
        self.driver = driver
        self.index = index
        self.actions = ElementActions(driver)
        row = f"({self.ROWS_XPATH})[{index + 1}]"
        self.row = (By.XPATH, row)
        self.account_number_cell = (By.XPATH, f"{row}/td[1]")
        self.account_balance_cell = (By.XPATH, f"{row}/td[2]")
        self.available_amount_cell = (By.XPATH, f"{row}/td[3]")

    def get_account_number(self):
        return self.actions.get_text(self.account_number_cell)

    def get_account_balance(self):
        return self.actions.get_text(self.account_balance_cell)

    def get_available_amount(self):
        return self.actions.get_text(self.available_amount_cell)
