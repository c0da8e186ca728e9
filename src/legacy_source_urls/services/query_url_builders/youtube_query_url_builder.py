from typing import Callable, Dict
from legacy_source_urls.entities.search import Search
from legacy_source_urls.entities.url_info import PreEncoded, UrlInfo
from legacy_source_urls.models.enums.media_type import MediaType
from legacy_source_urls.services.query_url_builders.abc_query_url_builder import QueryUrlBuilder


class YoutubeQueryUrlBuilder(QueryUrlBuilder):
  # Search filter preset for "Creative Commons", already url encoded
  __cc_license_filter = PreEncoded("EgIwAQ%3D%3D")

  def get_source_name(self) -> str:
    return "YouTube"

  def get_builders(self) -> Dict[MediaType, Callable[[Search], UrlInfo]]:
    return {MediaType.VIDEO: self.build_video}

  def build_video(self, search: Search) -> UrlInfo:
    return UrlInfo(
      url="https://www.youtube.com/results",
      query={
        "search_query": search.q,
        "sp": self.__cc_license_filter
      }
    )
