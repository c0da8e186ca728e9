from typing import Dict, List
from urllib.parse import parse_qs, urlsplit
import pytest
from legacy_source_urls.entities.search import Search, SearchFilters


def get_query_params(url: str) -> Dict[str, List[str]]:
  return parse_qs(urlsplit(url).query)

@pytest.fixture
def plain_search() -> Search:
  return Search(q="test")

@pytest.fixture
def commercial_search() -> Search:
  return Search(q="x", filters=SearchFilters(commercial=True))

@pytest.fixture
def modify_search() -> Search:
  return Search(q="x", filters=SearchFilters(modify=True))

@pytest.fixture
def commercial_modify_search() -> Search:
  return Search(q="x", filters=SearchFilters(commercial=True, modify=True))
