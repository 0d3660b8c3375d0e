from selenium.common.exceptions import TimeoutException
from selenium.webdriver.common.by import By
from selenium.webdriver.support import expected_conditions as EC
from loguru import logger

from pages.base_page import BasePage


class SearchResultsPage(BasePage):
    SEARCH_RESULTS = (By.XPATH, "//div[contains(@class, 'item-box')]")
    NO_RESULT_MESSAGE = (By.XPATH, "//div[@class='no-result']")
    SEARCH_PAGE_HEADER = (By.XPATH, "//div[@class='page-title']//h1")
    RESULTS_OR_EMPTY = (By.XPATH, "//div[contains(@class, 'item-box')] | //div[@class='no-result']")

    def _wait_for_results(self):
        # Either product boxes or the no-result message appear once the search has rendered
        try:
            self.wait().until(EC.presence_of_element_located(self.RESULTS_OR_EMPTY))
        except TimeoutException:
            logger.warning("Search results did not render within the wait")

    def get_search_results_count(self) -> int:
        self._wait_for_results()
        count = len(self.driver.find_elements(*self.SEARCH_RESULTS))
        logger.info(f"Search results count: {count}")
        return count

    def are_search_results_displayed(self) -> bool:
        has_results = self.get_search_results_count() > 0
        logger.info(f"Search results displayed: {has_results}")
        return has_results

    def is_no_result_message_displayed(self) -> bool:
        return self.is_displayed(self.NO_RESULT_MESSAGE, "No result message")

    def is_search_page_header_displayed(self) -> bool:
        return self.is_displayed(self.SEARCH_PAGE_HEADER, "Search page header")
