from selenium.webdriver.common.by import By

from .customer_menu import CustomerMenu
from .element_actions import ElementActions


class RequestLoanPage:
    LOAN_AMOUNT_FIELD = (By.ID, "amount")
    DOWN_PAYMENT_FIELD = (By.ID, "downPayment")
    FROM_ACCOUNT_SELECT = (By.ID, "fromAccountId")
    APPLY_NOW_BUTTON = (By.CSS_SELECTOR, "input[value='Apply Now']")
    LOAN_STATUS = (By.ID, "loanStatus")
    LOAN_PROVIDER_NAME = (By.ID, "loanProviderName")
    NEW_ACCOUNT_ID = (By.ID, "newAccountId")

    SETTLE_SECONDS = 0.5

    def __init__(self, driver):
        self.driver = driver
        self.actions = ElementActions(driver)
        self.customer_menu = CustomerMenu(driver)

    def get_customer_menu(self):
        return self.customer_menu

    def request_loan(self, loan_amount, down_payment, from_account_id):
        self.actions.fill(self.LOAN_AMOUNT_FIELD, loan_amount)
        self.actions.fill(self.DOWN_PAYMENT_FIELD, down_payment)
        self.actions.select_option(self.FROM_ACCOUNT_SELECT, from_account_id)
        self.actions.pause(self.SETTLE_SECONDS)
        self.actions.click(self.APPLY_NOW_BUTTON)

    def get_loan_status(self):
        return self.actions.get_text(self.LOAN_STATUS)

    def get_loan_provider_name(self):
        return self.actions.get_text(self.LOAN_PROVIDER_NAME)

    def get_new_account_id(self):
        return self.actions.get_text(self.NEW_ACCOUNT_ID)

    def is_loan_approved(self):
        # the site only reports the outcome as prose; breaks if the wording changes
        return "approved" in self.get_loan_status().lower()
