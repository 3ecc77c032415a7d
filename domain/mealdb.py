import logging
from urllib.parse import quote, urlencode

import httpx

from domain.errors import UpstreamError, ValidationError


logger = logging.getLogger(__name__)


BASE_URL = "https://www.themealdb.com/api/json/v1/1/"


def mealdb_client_factory(base_url: str = BASE_URL) -> httpx.AsyncClient:
    return httpx.AsyncClient(base_url=base_url)


class MealDBClient:
    """TheMealDB lookups. Answers are handed back as raw JSON text."""

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        self._client = mealdb_client_factory() if client is None else client

    async def _get(self, path: str, value: str) -> str:
        url = f"{path}?{urlencode({'i': value}, quote_via=quote)}"
        logger.debug("GET %s", url)
        resp = await self._client.get(url)
        if not resp.is_success:
            raise UpstreamError("TheMealDB", resp.status_code, resp.text)
        return resp.text

    async def search_by_ingredient(self, ingredient: str) -> str:
        if not ingredient or not ingredient.strip():
            raise ValidationError("An ingredient is required.")
        return await self._get("filter.php", ingredient)

    async def lookup(self, meal_id: str) -> str:
        return await self._get("lookup.php", meal_id)

    async def close(self) -> None:
        await self._client.aclose()
