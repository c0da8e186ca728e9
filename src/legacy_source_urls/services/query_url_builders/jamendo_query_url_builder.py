from typing import Callable, Dict
from legacy_source_urls.entities.search import Search
from legacy_source_urls.entities.url_info import UrlInfo
from legacy_source_urls.models.enums.media_type import MediaType
from legacy_source_urls.services.query_url_builders.abc_query_url_builder import QueryUrlBuilder


class JamendoQueryUrlBuilder(QueryUrlBuilder):
  def get_source_name(self) -> str:
    return "Jamendo"

  def get_builders(self) -> Dict[MediaType, Callable[[Search], UrlInfo]]:
    return {MediaType.AUDIO: self.build_audio}

  def build_audio(self, search: Search) -> UrlInfo:
    # Everything on Jamendo is CC licensed, so there is nothing to filter
    return UrlInfo(
      url="https://www.jamendo.com/search/tracks",
      query={"q": search.q}
    )
