from typing import Callable, Dict
from legacy_source_urls.entities.search import Search
from legacy_source_urls.entities.url_info import UrlInfo
from legacy_source_urls.models.enums.media_type import MediaType
from legacy_source_urls.services.query_url_builders.abc_query_url_builder import QueryUrlBuilder


class EuropeanaQueryUrlBuilder(QueryUrlBuilder):
  __url = "https://www.europeana.eu/en/search"

  def get_source_name(self) -> str:
    return "Europeana"

  def get_builders(self) -> Dict[MediaType, Callable[[Search], UrlInfo]]:
    return {
      MediaType.AUDIO: self.build_audio,
      MediaType.VIDEO: self.build_video
    }

  def build_audio(self, search: Search) -> UrlInfo:
    return self.__build(search, 'TYPE:"SOUND"')

  def build_video(self, search: Search) -> UrlInfo:
    return self.__build(search, 'TYPE:"VIDEO"')

  def __build(self, search: Search, content_type: str) -> UrlInfo:
    return UrlInfo(
      url=self.__url,
      query={
        "page": 1,
        "qf": content_type,
        "query": self.__get_query(search)
      }
    )

  def __get_query(self, search: Search) -> str:
    # Only CC licensed works
    query = f"{search.q} AND RIGHTS:*creative*"
    if search.is_commercial():
      assert search.filters is not None
      if search.filters.commercial:
        query += " AND NOT RIGHTS:*nc*"
      if search.filters.modify:
        query += " AND NOT RIGHTS:*nd*"
    return query
