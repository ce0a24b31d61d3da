"""Product Categories table - Main entry point."""
import logging

from nicegui import app, ui

from config import APP_TITLE, APP_PORT, APP_HOST, LOG_LEVEL
from src.services import ProductTable
from src.ui.pages.products import products_page

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Load and join the bundled data once at start so broken fixtures fail here
ProductTable.from_fixtures()


@ui.page("/")
def index(search: str | None = None, user: str | None = None):
    products_page(search=search, user=user)


@app.get("/_health")
async def health_check():
    return {"status": "ok", "app": "product-categories"}


ui.run(
    title=APP_TITLE,
    host=APP_HOST,
    port=APP_PORT,
    reload=False,
    dark=False,
)
