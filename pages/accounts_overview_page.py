from selenium.webdriver.common.by import By

from .accounts_overview_item import AccountsOverviewItem
from .customer_menu import CustomerMenu
from .element_actions import ElementActions
from .navigator import Navigator


class AccountsOverviewPage:
    BALANCE_ITEMS = (By.XPATH, AccountsOverviewItem.ROWS_XPATH)
    FIRST_BALANCE_ITEM = (By.XPATH, f"({AccountsOverviewItem.ROWS_XPATH})[1]")

    def __init__(self, driver):
        self.driver = driver
        self.actions = ElementActions(driver)
        self.navigator = Navigator(driver)
        self.customer_menu = CustomerMenu(driver)

    def get_navigator(self):
        return self.navigator

    def get_customer_menu(self):
        return self.customer_menu

    def get_accounts_overview_item_by_index(self, index):
        self.actions.wait_until_visible(self.FIRST_BALANCE_ITEM)
        return AccountsOverviewItem(self.driver, index)

    def get_balance_items(self):
        # rows are filled in by an ajax call after the page loads
        self.actions.wait_until_visible(self.FIRST_BALANCE_ITEM)
        return [AccountsOverviewItem(self.driver, index) for index in range(self.actions.count(self.BALANCE_ITEMS))]
