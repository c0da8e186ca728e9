from typing import Callable, Dict
from legacy_source_urls.entities.search import Search
from legacy_source_urls.entities.url_info import UrlInfo
from legacy_source_urls.models.enums.media_type import MediaType
from legacy_source_urls.services.query_url_builders.abc_query_url_builder import QueryUrlBuilder


class CcMixterQueryUrlBuilder(QueryUrlBuilder):
  def get_source_name(self) -> str:
    return "ccMixter"

  def get_builders(self) -> Dict[MediaType, Callable[[Search], UrlInfo]]:
    return {MediaType.AUDIO: self.build_audio}

  def build_audio(self, search: Search) -> UrlInfo:
    return UrlInfo(
      # No https here
      url="http://dig.ccmixter.org/search",
      query={
        "lic": "open",
        "searchp": search.q
      }
    )
