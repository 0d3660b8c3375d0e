"""Removal of old date-nested run folders (logs, screenshots)."""

import shutil
from datetime import datetime, timedelta
from pathlib import Path

from loguru import logger

DAY_FOLDER_FORMAT = "%Y %m %d"


def _remove_if_empty(directory: Path, dry_run: bool) -> None:
    if not directory.exists() or any(directory.iterdir()):
        return
    if dry_run:
        logger.info(f"[DRY RUN] Would delete empty directory: {directory}")
        return
    try:
        directory.rmdir()
        logger.info(f"Deleted empty directory: {directory}")
    except OSError as e:
        logger.warning(f"Could not delete empty directory {directory}: {e}")


def cleanup_old_runs(root: str | Path, days_to_keep: int = 7, dry_run: bool = False, now: datetime | None = None) -> dict:
    """Delete day folders (``YYYY/YYYY MM/YYYY MM DD``) older than ``days_to_keep``.

    Args:
        root: Root of the date-nested folder tree
        days_to_keep: Number of days to keep
        dry_run: Only report what would be deleted
        now: Reference time (defaults to the current time)

    Returns:
        Dictionary with cleanup statistics
    """
    root_path = Path(root)
    stats = {"deleted_dirs": 0, "freed_bytes": 0, "errors": []}

    if not root_path.exists():
        logger.warning(f"Run folder root does not exist: {root_path}")
        return stats

    cutoff_date = (now or datetime.now()) - timedelta(days=days_to_keep)
    logger.info(f"Cleaning up run folders older than {cutoff_date:%Y-%m-%d %H:%M:%S}")

    for year_dir in sorted(p for p in root_path.iterdir() if p.is_dir()):
        for month_dir in sorted(p for p in year_dir.iterdir() if p.is_dir()):
            for day_dir in sorted(p for p in month_dir.iterdir() if p.is_dir()):
                try:
                    dir_date = datetime.strptime(day_dir.name, DAY_FOLDER_FORMAT)
                except ValueError:
                    continue
                if dir_date >= cutoff_date:
                    continue

                dir_size = sum(f.stat().st_size for f in day_dir.rglob("*") if f.is_file())
                if dry_run:
                    logger.info(f"[DRY RUN] Would delete: {day_dir} ({dir_size / 1024 / 1024:.2f} MB)")
                else:
                    try:
                        shutil.rmtree(day_dir)
                    except OSError as e:
                        error_msg = f"Failed to delete {day_dir}: {e}"
                        logger.error(error_msg)
                        stats["errors"].append(error_msg)
                        continue
                    logger.info(f"Deleted: {day_dir} ({dir_size / 1024 / 1024:.2f} MB)")
                stats["deleted_dirs"] += 1
                stats["freed_bytes"] += dir_size

            _remove_if_empty(month_dir, dry_run)
        _remove_if_empty(year_dir, dry_run)

    action = "Would free" if dry_run else "Freed"
    logger.info(
        f"Cleanup {'simulation' if dry_run else 'complete'}: "
        f"{stats['deleted_dirs']} directories, {action} {stats['freed_bytes'] / 1024 / 1024:.2f} MB"
    )
    if stats["errors"]:
        logger.warning(f"Encountered {len(stats['errors'])} errors during cleanup")
    return stats
