"""Screenshot capture for failed trials"""

from datetime import datetime
from pathlib import Path

from loguru import logger

MAX_NAME_LENGTH = 80


def safe_file_stem(name: str) -> str:
    """Turn a test name into a filesystem-safe file stem."""
    stem = name.replace(" ", "_").replace("/", "-").replace("\\", "-").replace("→", "-")
    stem = "".join(c for c in stem if c.isalnum() or c in "_-")
    return stem[:MAX_NAME_LENGTH] or "screenshot"


class ScreenshotManager:
    """Saves screenshots and page sources under ``<artifacts_dir>/screenshots``"""

    def __init__(self, driver, artifacts_dir: str | Path):
        self.driver = driver
        self.screenshots_dir = Path(artifacts_dir) / "screenshots"

    def _target(self, prefix: str, test_name: str, suffix: str) -> Path:
        self.screenshots_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")[:-3]
        return self.screenshots_dir / f"{prefix}{safe_file_stem(test_name)}_{timestamp}{suffix}"

    def capture(self, test_name: str = "screenshot") -> str:
        """
        Capture a PNG of the current browser window

        Returns:
            Path to the saved screenshot, or "" when nothing could be saved
        """
        if not self.driver:
            logger.error("No driver available for screenshot capture")
            return ""

        try:
            filepath = self._target("", test_name, ".png")
            saved = self.driver.save_screenshot(str(filepath))
        except Exception as e:
            # capture never raises
            logger.error(f"Failed to capture screenshot for {test_name}: {type(e).__name__}: {e}")
            return ""

        if not saved:
            logger.error(f"Screenshot save returned {saved} for {test_name}")
            return ""

        logger.info(f"Screenshot captured: {filepath}")
        return str(filepath)

    def capture_page_source(self, test_name: str = "page_source") -> str:
        try:
            filepath = self._target("page_source_", test_name, ".html")
            filepath.write_text(self.driver.page_source, encoding="utf-8")
        except Exception as e:
            logger.error(f"Failed to save page source for {test_name}: {e}")
            return ""

        logger.debug(f"Page source saved: {filepath}")
        return str(filepath)
