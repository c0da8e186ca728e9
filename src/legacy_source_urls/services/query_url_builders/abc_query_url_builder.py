from abc import ABC, abstractmethod
from typing import Callable, Dict
from legacy_source_urls.entities.search import Search
from legacy_source_urls.entities.url_info import UrlInfo
from legacy_source_urls.models.enums.media_type import MediaType


class QueryUrlBuilder(ABC):
  @abstractmethod
  def get_source_name(self) -> str:
    pass

  @abstractmethod
  def get_builders(self) -> Dict[MediaType, Callable[[Search], UrlInfo]]:
    pass
