import pytest

from domain.completion import CompletionClient
from domain.llm_service import LLMService
from domain.mealdb import MealDBClient
from tests.fakes import FakeCompletion, FakeMealDB


@pytest.fixture
def fake_completion() -> FakeCompletion:
    return FakeCompletion()


@pytest.fixture
def fake_mealdb() -> FakeMealDB:
    return FakeMealDB()


@pytest.fixture
def llm(fake_completion: FakeCompletion) -> LLMService:
    completion = CompletionClient(token="test-key", client=fake_completion.http_client())
    return LLMService(completion)


@pytest.fixture
def mealdb(fake_mealdb: FakeMealDB) -> MealDBClient:
    return MealDBClient(fake_mealdb.http_client())
