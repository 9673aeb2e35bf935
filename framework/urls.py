from framework.config import get_settings

# Search results page, relative to the landing page
SEARCH_PATH = "search/"


def home_url() -> str:
    return get_settings().base_url


def search_url(query: str = "") -> str:
    base = home_url().rstrip("/")
    url = f"{base}/{SEARCH_PATH}"
    query = (query or "").lstrip("?")
    return f"{url}?{query}" if query else url
