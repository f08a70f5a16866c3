from selenium.webdriver.common.by import By

from .customer_menu import CustomerMenu
from .element_actions import ElementActions


class BillPayPage:
    PAYEE_NAME_FIELD = (By.CSS_SELECTOR, "input[name='payee.name']")
    ADDRESS_FIELD = (By.CSS_SELECTOR, "input[name='payee.address.street']")
    CITY_FIELD = (By.CSS_SELECTOR, "input[name='payee.address.city']")
    STATE_FIELD = (By.CSS_SELECTOR, "input[name='payee.address.state']")
    ZIP_CODE_FIELD = (By.CSS_SELECTOR, "input[name='payee.address.zipCode']")
    PHONE_FIELD = (By.CSS_SELECTOR, "input[name='payee.phoneNumber']")
    ACCOUNT_FIELD = (By.CSS_SELECTOR, "input[name='payee.accountNumber']")
    VERIFY_ACCOUNT_FIELD = (By.CSS_SELECTOR, "input[name='verifyAccount']")
    AMOUNT_FIELD = (By.CSS_SELECTOR, "input[name='amount']")
    FROM_ACCOUNT_SELECT = (By.CSS_SELECTOR, "select[name='fromAccountId']")
    SEND_PAYMENT_BUTTON = (By.CSS_SELECTOR, "input[value='Send Payment']")
    BILL_PAY_COMPLETE_MESSAGE = (By.CSS_SELECTOR, "#billpayResult .title")
    PAYEE_NAME_RESULT = (By.CSS_SELECTOR, "#billpayResult #payeeName")
    AMOUNT_RESULT = (By.CSS_SELECTOR, "#billpayResult #amount")
    FROM_ACCOUNT_RESULT = (By.CSS_SELECTOR, "#billpayResult #fromAccountId")

    SETTLE_SECONDS = 0.5

    def __init__(self, driver):
        self.driver = driver
        self.actions = ElementActions(driver)
        self.customer_menu = CustomerMenu(driver)

    def send_payment(self, payee_name, address, city, state, zip_code, phone, account, amount, from_account_id):
        """Fill out the bill pay form and submit it.

        ``account`` is typed into both the account and verify-account fields.
        """
        self.actions.fill(self.PAYEE_NAME_FIELD, payee_name)
        self.actions.fill(self.ADDRESS_FIELD, address)
        self.actions.fill(self.CITY_FIELD, city)
        self.actions.fill(self.STATE_FIELD, state)
        self.actions.fill(self.ZIP_CODE_FIELD, zip_code)
        self.actions.fill(self.PHONE_FIELD, phone)
        self.actions.fill(self.ACCOUNT_FIELD, account)
        self.actions.fill(self.VERIFY_ACCOUNT_FIELD, account)
        self.actions.fill(self.AMOUNT_FIELD, amount)
        self.actions.select_option(self.FROM_ACCOUNT_SELECT, from_account_id)
        self.actions.pause(self.SETTLE_SECONDS)
        self.actions.click(self.SEND_PAYMENT_BUTTON)

    def get_bill_pay_complete_message(self):
        return self.actions.get_text(self.BILL_PAY_COMPLETE_MESSAGE)

    def get_payee_name_result(self):
        return self.actions.get_text(self.PAYEE_NAME_RESULT)

    def get_amount_result(self):
        return self.actions.get_text(self.AMOUNT_RESULT)

    def get_from_account_id_result(self):
        return self.actions.get_text(self.FROM_ACCOUNT_RESULT)

    def get_customer_menu(self):
        return self.customer_menu
