"""Resolve a legacy source and media type to a search results url."""
import logging
from typing import Any, Callable, Dict, List, Mapping
from dacite import DaciteError
from legacy_source_urls.entities.search import Search
from legacy_source_urls.entities.url_info import UrlInfo
from legacy_source_urls.exceptions.invalid_query_exception import InvalidQueryException
from legacy_source_urls.exceptions.unknown_source_exception import UnknownSourceException
from legacy_source_urls.exceptions.unsupported_media_type_exception import UnsupportedMediaTypeException
from legacy_source_urls.models.enums.media_type import MediaType
from legacy_source_urls.services.misc.url_builder import build_url
from legacy_source_urls.services.query_url_builders.abc_query_url_builder import QueryUrlBuilder
from legacy_source_urls.services.query_url_builders.ccmixter_query_url_builder import CcMixterQueryUrlBuilder
from legacy_source_urls.services.query_url_builders.europeana_query_url_builder import EuropeanaQueryUrlBuilder
from legacy_source_urls.services.query_url_builders.google_images_query_url_builder import GoogleImagesQueryUrlBuilder
from legacy_source_urls.services.query_url_builders.jamendo_query_url_builder import JamendoQueryUrlBuilder
from legacy_source_urls.services.query_url_builders.open_clip_art_library_query_url_builder import (
  OpenClipArtLibraryQueryUrlBuilder
)
from legacy_source_urls.services.query_url_builders.soundcloud_query_url_builder import SoundcloudQueryUrlBuilder
from legacy_source_urls.services.query_url_builders.wikimedia_commons_query_url_builder import (
  WikimediaCommonsQueryUrlBuilder
)
from legacy_source_urls.services.query_url_builders.youtube_query_url_builder import YoutubeQueryUrlBuilder


UrlGetter = Callable[[str, Search | Mapping[str, Any] | None], str]


def _build_legacy_source_map(query_url_builders: List[QueryUrlBuilder]) -> Dict[str, Dict[str, Callable[[Search], UrlInfo]]]:
  legacy_source_map = {}
  for query_url_builder in query_url_builders:
    builders = query_url_builder.get_builders()
    legacy_source_map[query_url_builder.get_source_name()] = {
      media_type.value: builder for media_type, builder in builders.items()
    }
  return legacy_source_map

LEGACY_SOURCE_MAP = _build_legacy_source_map([
  EuropeanaQueryUrlBuilder(),
  WikimediaCommonsQueryUrlBuilder(),
  JamendoQueryUrlBuilder(),
  CcMixterQueryUrlBuilder(),
  SoundcloudQueryUrlBuilder(),
  YoutubeQueryUrlBuilder(),
  GoogleImagesQueryUrlBuilder(),
  OpenClipArtLibraryQueryUrlBuilder()
])


def make_url_getter(media_type: MediaType | str) -> UrlGetter:
  """Bind a media type and return a function of (source_name, search) that builds the url.

  Raises InvalidQueryException when the search is missing, UnknownSourceException when
  the source is not registered and UnsupportedMediaTypeException when the source
  has no builder for the media type.
  """
  type_value = _get_type_value(media_type)

  def get_url(source_name: str, search: Search | Mapping[str, Any] | None) -> str:
    if not search:
      logging.warning("Rejected empty query for %s (%s)", source_name, type_value)
      raise InvalidQueryException(source_name, type_value)
    source = LEGACY_SOURCE_MAP.get(source_name)
    if source is None:
      logging.warning("Rejected unknown legacy source: %s", source_name)
      raise UnknownSourceException(source_name)
    get_source_url_info = source.get(type_value)
    if get_source_url_info is None:
      logging.warning("Rejected %s search for %s", type_value, source_name)
      raise UnsupportedMediaTypeException(source_name, type_value)
    if not isinstance(search, Search):
      try:
        search = Search.from_dict(search)
      except (DaciteError, TypeError, ValueError) as e:
        logging.warning("Rejected malformed query for %s (%s): %s", source_name, type_value, e)
        raise InvalidQueryException(source_name, type_value) from e
    url_info = get_source_url_info(search)
    url = build_url(url_info.url, url_info.query)
    logging.debug("Built %s url for %s: %s", type_value, source_name, url)
    return url

  return get_url

def get_legacy_source_url(
  media_type: MediaType | str,
  source_name: str,
  search: Search | Mapping[str, Any] | None
) -> str:
  return make_url_getter(media_type)(source_name, search)

def get_legacy_sources(media_type: MediaType | str) -> List[str]:
  type_value = _get_type_value(media_type)
  return [name for name, builders in LEGACY_SOURCE_MAP.items() if type_value in builders]

def _get_type_value(media_type: MediaType | str) -> str:
  if isinstance(media_type, MediaType):
    return media_type.value
  return str(media_type)
