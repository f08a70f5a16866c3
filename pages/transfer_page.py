'''
Created on 02-Nov-2024

@author: bibin
'''
from selenium.webdriver.common.by import By

from .customer_menu import CustomerMenu
from .element_actions import ElementActions


class TransferFundsPage:
    AMOUNT_FIELD = (By.CSS_SELECTOR, "#transferForm #amount")
    FROM_ACCOUNT_SELECT = (By.CSS_SELECTOR, "#transferForm #fromAccountId")
    TO_ACCOUNT_SELECT = (By.CSS_SELECTOR, "#transferForm #toAccountId")
    TRANSFER_BUTTON = (By.CSS_SELECTOR, "input[value='Transfer']")
    TRANSFER_COMPLETE_MESSAGE = (By.CSS_SELECTOR, "#showResult .title")
    AMOUNT_RESULT = (By.CSS_SELECTOR, "#showResult #amountResult")
    FROM_ACCOUNT_RESULT = (By.CSS_SELECTOR, "#showResult #fromAccountIdResult")

    def __init__(self, driver):
        self.driver = driver
        self.actions = ElementActions(driver)
        self.customer_menu = CustomerMenu(driver)

    def transfer_funds(self, amount, from_account_id, to_account_id=""):
        self.actions.fill(self.AMOUNT_FIELD, amount)
        self.actions.select_option(self.FROM_ACCOUNT_SELECT, from_account_id)
        # keep the form's default destination account when none is given
        if to_account_id:
            self.actions.select_option(self.TO_ACCOUNT_SELECT, to_account_id)
        self.actions.click(self.TRANSFER_BUTTON)

    def get_transfer_complete_message(self):
        return self.actions.get_text(self.TRANSFER_COMPLETE_MESSAGE)

    def get_transfer_amount_result(self):
        return self.actions.get_text(self.AMOUNT_RESULT)

    def get_from_account_id_result(self):
        return self.actions.get_text(self.FROM_ACCOUNT_RESULT)

    def get_customer_menu(self):
        return self.customer_menu
