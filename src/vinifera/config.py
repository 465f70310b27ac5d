"""
Vinifera Configuration
Centralized settings for the application
"""

import os
from pathlib import Path

# Flavor dataset bundled with the package
DEFAULT_DATASET_PATH = Path(__file__).parent / "data" / "wine_dataset.csv"
DATASET_PATH = Path(os.getenv("VINIFERA_DATASET_PATH", str(DEFAULT_DATASET_PATH)))

# Logging
LOG_LEVEL = os.getenv("VINIFERA_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
