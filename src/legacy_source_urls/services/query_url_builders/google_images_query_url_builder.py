from typing import Callable, Dict
from legacy_source_urls.entities.search import Search
from legacy_source_urls.entities.url_info import UrlInfo
from legacy_source_urls.models.enums.media_type import MediaType
from legacy_source_urls.services.query_url_builders.abc_query_url_builder import QueryUrlBuilder


class GoogleImagesQueryUrlBuilder(QueryUrlBuilder):
  # sur:f    noncommercial reuse
  # sur:fc   reuse
  # sur:fm   noncommercial reuse with modification
  # sur:fmc  reuse with modification
  __url = "https://www.google.com/search"
  # Marks the request as an advanced (filtered) search
  __advanced_search_marker = "0ahUKEwjoqOr_2dLqAhXNlnIEHWoFDysQ4dUDCAY"

  def get_source_name(self) -> str:
    return "Google Images"

  def get_builders(self) -> Dict[MediaType, Callable[[Search], UrlInfo]]:
    return {MediaType.IMAGE: self.build_image}

  def build_image(self, search: Search) -> UrlInfo:
    return UrlInfo(
      url=self.__url,
      query={
        "tbm": "isch",
        "tbs": self.__get_usage_rights(search),
        "ved": self.__advanced_search_marker,
        "q": search.q
      }
    )

  def __get_usage_rights(self, search: Search) -> str:
    use = "sur:f"
    if search.is_commercial():
      use = "sur:fc"
    if search.is_modify():
      use = "sur:fm"
    if search.is_commercial() and search.is_modify():
      use = "sur:fmc"
    return use
