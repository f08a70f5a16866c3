from selenium.webdriver.common.by import By

from .element_actions import ElementActions


class Navigator:
    """Top-left marketing menu. Its targets are outside the banking flow, so nothing is returned."""

    SOLUTIONS_LINK = (By.XPATH, "//ul[@class='leftmenu']/li[text()='Solutions']")
    ABOUT_US_LINK = (By.XPATH, "//ul[@class='leftmenu']/li/a[text()='About Us']")
    SERVICES_LINK = (By.XPATH, "//ul[@class='leftmenu']/li/a[text()='Services']")
    PRODUCTS_LINK = (By.XPATH, "//ul[@class='leftmenu']/li/a[text()='Products']")
    LOCATIONS_LINK = (By.XPATH, "//ul[@class='leftmenu']/li/a[text()='Locations']")
    ADMIN_PAGE_LINK = (By.XPATH, "//ul[@class='leftmenu']/li/a[text()='Admin Page']")
    BILL_PAY_LINK = (By.XPATH, "//ul[@class='leftmenu']/li/a[text()='Bill Pay']")

    def __init__(self, driver):
        self.driver = driver
        self.actions = ElementActions(driver)

    def navigate_to_solutions(self):
        self.actions.click(self.SOLUTIONS_LINK)

    def navigate_to_about_us(self):
        self.actions.click(self.ABOUT_US_LINK)

    def navigate_to_services(self):
        self.actions.click(self.SERVICES_LINK)

    def navigate_to_products(self):
        self.actions.click(self.PRODUCTS_LINK)

    def navigate_to_locations(self):
        self.actions.click(self.LOCATIONS_LINK)

    def navigate_to_admin_page(self):
        self.actions.click(self.ADMIN_PAGE_LINK)

    def navigate_to_bill_pay(self):
        self.actions.click(self.BILL_PAY_LINK)
