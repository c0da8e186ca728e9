from typing import Callable, Dict
from legacy_source_urls.entities.search import Search
from legacy_source_urls.entities.url_info import UrlInfo
from legacy_source_urls.models.enums.media_type import MediaType
from legacy_source_urls.services.query_url_builders.abc_query_url_builder import QueryUrlBuilder


class WikimediaCommonsQueryUrlBuilder(QueryUrlBuilder):
  __url = "https://commons.wikimedia.org/w/index.php"
  # Same advanced search state for audio and video
  __advanced_search = '{"fields":{"filetype":"audio"}}'

  def get_source_name(self) -> str:
    return "Wikimedia Commons"

  def get_builders(self) -> Dict[MediaType, Callable[[Search], UrlInfo]]:
    return {
      MediaType.AUDIO: self.build_audio,
      MediaType.VIDEO: self.build_video
    }

  def build_audio(self, search: Search) -> UrlInfo:
    return self.__build(f"{search.q} filetype:audio")

  def build_video(self, search: Search) -> UrlInfo:
    return self.__build(f"{search.q} filetype:video")

  def __build(self, search_term: str) -> UrlInfo:
    return UrlInfo(
      url=self.__url,
      query={
        "sort": "relevance",
        "search": search_term,
        "title": "Special:Search",
        "advancedSearch-current": self.__advanced_search
      }
    )
