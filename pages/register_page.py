from selenium.webdriver.common.by import By

from .customer_menu import CustomerMenu
from .element_actions import ElementActions


class RegisterPage:
    FIRST_NAME_FIELD = (By.ID, "customer.firstName")
    LAST_NAME_FIELD = (By.ID, "customer.lastName")
    ADDRESS_FIELD = (By.ID, "customer.address.street")
    CITY_FIELD = (By.ID, "customer.address.city")
    STATE_FIELD = (By.ID, "customer.address.state")
    ZIP_CODE_FIELD = (By.ID, "customer.address.zipCode")
    PHONE_FIELD = (By.ID, "customer.phoneNumber")
    SSN_FIELD = (By.ID, "customer.ssn")
    USERNAME_FIELD = (By.ID, "customer.username")
    PASSWORD_FIELD = (By.ID, "customer.password")
    REPEAT_PASSWORD_FIELD = (By.ID, "repeatedPassword")
    REGISTER_BUTTON = (By.CSS_SELECTOR, "input[value='Register']")

    # Customer Created screen, reached on the same page object
    WELCOME_MESSAGE = (By.CSS_SELECTOR, "#rightPanel .title")
    PROMPT_MESSAGE = (By.CSS_SELECTOR, "#rightPanel p")

    def __init__(self, driver):
        self.driver = driver
        self.actions = ElementActions(driver)
        self.customer_menu = CustomerMenu(driver)

    def register(self, first_name, last_name, address, city, state, zip_code, phone, ssn, username, password):
        self.actions.fill(self.FIRST_NAME_FIELD, first_name)
        self.actions.fill(self.LAST_NAME_FIELD, last_name)
        self.actions.fill(self.ADDRESS_FIELD, address)
        self.actions.fill(self.CITY_FIELD, city)
        self.actions.fill(self.STATE_FIELD, state)
        self.actions.fill(self.ZIP_CODE_FIELD, zip_code)
        self.actions.fill(self.PHONE_FIELD, phone)
        self.actions.fill(self.SSN_FIELD, ssn)
        self.actions.fill(self.USERNAME_FIELD, username)
        self.actions.fill(self.PASSWORD_FIELD, password)
        self.actions.fill(self.REPEAT_PASSWORD_FIELD, password)
        self.actions.click(self.REGISTER_BUTTON)

    def get_welcome_message(self):
        return self.actions.get_text(self.WELCOME_MESSAGE)

    def get_prompt_message(self):
        return self.actions.get_text(self.PROMPT_MESSAGE)

    def get_customer_menu(self):
        return self.customer_menu
