from typing import Callable, Dict
from legacy_source_urls.entities.search import Search
from legacy_source_urls.entities.url_info import UrlInfo
from legacy_source_urls.models.enums.media_type import MediaType
from legacy_source_urls.services.query_url_builders.abc_query_url_builder import QueryUrlBuilder


class OpenClipArtLibraryQueryUrlBuilder(QueryUrlBuilder):
  def get_source_name(self) -> str:
    return "Open Clip Art Library"

  def get_builders(self) -> Dict[MediaType, Callable[[Search], UrlInfo]]:
    return {MediaType.IMAGE: self.build_image}

  def build_image(self, search: Search) -> UrlInfo:
    return UrlInfo(
      url="http://www.openclipart.org/search/",
      query={"query": search.q}
    )
