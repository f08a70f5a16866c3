from selenium.webdriver.common.by import By

from .element_actions import ElementActions


class CustomerMenu:
    """Account services menu shown on every screen after login.

    Each ``goto_*`` clicks the link and returns the target page object without
    checking that the navigation happened.
    """

    LOGOUT_LINK = (By.XPATH, "//a[text()='Log Out']")
    OPEN_NEW_ACCOUNT_LINK = (By.XPATH, "//a[text()='Open New Account']")
    ACCOUNTS_OVERVIEW_LINK = (By.XPATH, "//a[text()='Accounts Overview']")
    TRANSFER_FUNDS_LINK = (By.XPATH, "//a[text()='Transfer Funds']")
    BILL_PAY_LINK = (By.XPATH, "//a[text()='Bill Pay']")
    REQUEST_LOAN_LINK = (By.XPATH, "//a[text()='Request Loan']")

    def __init__(self, driver):
        self.driver = driver
        self.actions = ElementActions(driver)

    # target pages embed this menu, so they are imported on use
    def logout(self):
        from .login_page import LoginPage

        self.actions.click(self.LOGOUT_LINK)
        return LoginPage(self.driver)

    def goto_open_new_account(self):
        from .open_new_account_page import OpenNewAccountPage

        self.actions.click(self.OPEN_NEW_ACCOUNT_LINK)
        return OpenNewAccountPage(self.driver)

    def goto_accounts_overview(self):
        from .accounts_overview_page import AccountsOverviewPage

        self.actions.click(self.ACCOUNTS_OVERVIEW_LINK)
        return AccountsOverviewPage(self.driver)

    def goto_transfer_funds(self):
        from .transfer_page import TransferFundsPage

        self.actions.click(self.TRANSFER_FUNDS_LINK)
        return TransferFundsPage(self.driver)

    def goto_bill_pay(self):
        from .bill_pay_page import BillPayPage

        self.actions.click(self.BILL_PAY_LINK)
        return BillPayPage(self.driver)

    def goto_request_loan(self):
        from .request_loan_page import RequestLoanPage

        self.actions.click(self.REQUEST_LOAN_LINK)
        return RequestLoanPage(self.driver)
