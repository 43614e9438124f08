"""
File operation utilities.

This module provides utilities for saving and loading dashboard exports
in JSON and CSV formats.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

import pandas as pd


logger = logging.getLogger(__name__)


def save_json(data: Dict[str, Any], filepath: Path) -> bool:
    """
    Save data to JSON file.

    Args:
        data: Dictionary data to save
        filepath: Path to save the JSON file

    Returns:
        True if save successful, False otherwise
    """
    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

        logger.debug(f"Saved JSON file: {filepath}")
        return True

    except (OSError, TypeError, ValueError) as e:
        logger.error(f"Failed to save JSON file {filepath}: {e}", exc_info=True)
        return False


def load_json(filepath: Path) -> Optional[Dict[str, Any]]:
    """
    Load data from JSON file.

    Returns:
        Loaded data dictionary, or None if load failed
    """
    if not filepath.exists():
        logger.warning(f"JSON file not found: {filepath}")
        return None

    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)

        logger.debug(f"Loaded JSON file: {filepath}")
        return data

    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in file {filepath}: {e}")
        return None

    except OSError as e:
        logger.error(f"Failed to load JSON file {filepath}: {e}", exc_info=True)
        return None


def save_csv(df: pd.DataFrame, filepath: Path) -> bool:
    """
    Save DataFrame to CSV file.

    Args:
        df: Pandas DataFrame to save
        filepath: Path to save the CSV file

    Returns:
        True if save successful, False otherwise

    Examples:
        >>> df = pd.DataFrame({"bucket": ["today"], "id": ["L004"]})
        >>> save_csv(df, Path("output/exports/dashboard.csv"))
        True
    """
    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)

        df.to_csv(filepath, index=False, encoding='utf-8')

        logger.debug(f"Saved CSV file: {filepath}")
        return True

    except OSError as e:
        logger.error(f"Failed to save CSV file {filepath}: {e}", exc_info=True)
        return False


def generate_filename(prefix: str, extension: str) -> str:
    """
    Generate timestamped filename.

    Examples:
        >>> generate_filename("dashboard", "csv")
        'dashboard_20251101_103045.csv'
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{prefix}_{timestamp}.{extension}"
