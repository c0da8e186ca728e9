from typing import Callable, Dict
from legacy_source_urls.entities.search import Search
from legacy_source_urls.entities.url_info import UrlInfo
from legacy_source_urls.models.enums.media_type import MediaType
from legacy_source_urls.services.query_url_builders.abc_query_url_builder import QueryUrlBuilder


class SoundcloudQueryUrlBuilder(QueryUrlBuilder):
  def get_source_name(self) -> str:
    return "SoundCloud"

  def get_builders(self) -> Dict[MediaType, Callable[[Search], UrlInfo]]:
    return {MediaType.AUDIO: self.build_audio}

  def build_audio(self, search: Search) -> UrlInfo:
    return UrlInfo(
      url="https://soundcloud.com/search/sounds",
      query={
        "q": search.q,
        "filter.license": self.__get_license(search)
      }
    )

  def __get_license(self, search: Search) -> str:
    license_filter = "to_share"
    if search.is_commercial():
      license_filter = "to_use_commercially"
      if search.is_modify():
        license_filter = "to_modify_commercially"
    return license_filter
