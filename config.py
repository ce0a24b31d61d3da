"""Application configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Paths
BASE_DIR = Path(__file__).parent
DATA_DIR = Path(os.getenv("PRODUCT_TABLE_DATA_DIR", str(BASE_DIR / "data")))
USERS_FILE = DATA_DIR / "users.json"
CATEGORIES_FILE = DATA_DIR / "categories.json"
PRODUCTS_FILE = DATA_DIR / "products.json"

# Filter defaults
# Sentinel value of the user filter meaning "no user restriction"
ALL_USERS = "All"

# Sortable table columns, in header order
SORT_COLUMNS: dict[str, str] = {
    "id": "ID",
    "name": "Product",
    "category": "Category",
    "user": "User",
}

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# App settings
APP_TITLE = "Product Categories"
APP_PORT = int(os.getenv("APP_PORT", "8080"))
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
