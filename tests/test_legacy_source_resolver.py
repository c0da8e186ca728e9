import logging
import pytest
from conftest import get_query_params
from legacy_source_urls.entities.search import Search
from legacy_source_urls.exceptions.invalid_query_exception import InvalidQueryException
from legacy_source_urls.exceptions.unknown_source_exception import UnknownSourceException
from legacy_source_urls.exceptions.unsupported_media_type_exception import UnsupportedMediaTypeException
from legacy_source_urls.models.enums.media_type import MediaType
from legacy_source_urls.services.legacy_source_resolver import (
  LEGACY_SOURCE_MAP,
  get_legacy_source_url,
  get_legacy_sources,
  make_url_getter
)


BASE_URLS = {
  ("Europeana", "audio"): "https://www.europeana.eu/en/search",
  ("Europeana", "video"): "https://www.europeana.eu/en/search",
  ("Wikimedia Commons", "audio"): "https://commons.wikimedia.org/w/index.php",
  ("Wikimedia Commons", "video"): "https://commons.wikimedia.org/w/index.php",
  ("Jamendo", "audio"): "https://www.jamendo.com/search/tracks",
  ("ccMixter", "audio"): "http://dig.ccmixter.org/search",
  ("SoundCloud", "audio"): "https://soundcloud.com/search/sounds",
  ("YouTube", "video"): "https://www.youtube.com/results",
  ("Google Images", "image"): "https://www.google.com/search",
  ("Open Clip Art Library", "image"): "http://www.openclipart.org/search/",
}


def test_registry_covers_every_source_and_type():
  registered = {
    (source_name, media_type)
    for source_name, builders in LEGACY_SOURCE_MAP.items()
    for media_type in builders
  }
  assert registered == set(BASE_URLS)

@pytest.mark.parametrize("source_name, media_type", list(BASE_URLS))
def test_url_starts_with_base_url(source_name, media_type, plain_search):
  url = make_url_getter(media_type)(source_name, plain_search)
  assert url.startswith(BASE_URLS[(source_name, media_type)] + "?")

@pytest.mark.parametrize("source_name", ["Jamendo", "NotASource"])
@pytest.mark.parametrize("search", [None, {}])
def test_missing_search_is_invalid(source_name, search):
  with pytest.raises(InvalidQueryException) as exc_info:
    make_url_getter(MediaType.AUDIO)(source_name, search)
  assert str(exc_info.value) == f"Please provide a valid query to search {source_name} for audio files."
  assert exc_info.value.get_source_name() == source_name
  assert exc_info.value.get_media_type() == "audio"

def test_unknown_source(plain_search):
  with pytest.raises(UnknownSourceException) as exc_info:
    make_url_getter(MediaType.IMAGE)("NotASource", plain_search)
  assert str(exc_info.value) == "No data available for provided legacy source: NotASource"
  assert exc_info.value.get_source_name() == "NotASource"

def test_unsupported_media_type(plain_search):
  with pytest.raises(UnsupportedMediaTypeException) as exc_info:
    make_url_getter(MediaType.VIDEO)("Jamendo", plain_search)
  assert str(exc_info.value) == "Jamendo does not offer meta search for video"
  assert exc_info.value.get_media_type() == "video"

def test_unknown_media_type_string_is_unsupported(plain_search):
  with pytest.raises(UnsupportedMediaTypeException):
    make_url_getter("text")("Jamendo", plain_search)

def test_media_type_enum_and_value_are_interchangeable(plain_search):
  assert make_url_getter(MediaType.AUDIO)("Jamendo", plain_search) == make_url_getter("audio")("Jamendo", plain_search)

def test_soundcloud_license(plain_search, commercial_search, commercial_modify_search):
  get_url = make_url_getter(MediaType.AUDIO)
  assert get_query_params(get_url("SoundCloud", plain_search))["filter.license"] == ["to_share"]
  assert get_query_params(get_url("SoundCloud", commercial_search))["filter.license"] == ["to_use_commercially"]
  assert get_query_params(get_url("SoundCloud", commercial_modify_search))["filter.license"] == ["to_modify_commercially"]

def test_google_images_usage_rights(commercial_search, commercial_modify_search):
  get_url = make_url_getter(MediaType.IMAGE)
  assert get_query_params(get_url("Google Images", Search(q="x")))["tbs"] == ["sur:f"]
  assert get_query_params(get_url("Google Images", commercial_search))["tbs"] == ["sur:fc"]
  assert get_query_params(get_url("Google Images", commercial_modify_search))["tbs"] == ["sur:fmc"]

def test_youtube_license_preset_is_not_encoded_twice():
  url = make_url_getter(MediaType.VIDEO)("YouTube", Search(q="cute cats"))
  assert url == "https://www.youtube.com/results?search_query=cute%20cats&sp=EgIwAQ%3D%3D"

def test_jamendo_full_url():
  url = make_url_getter(MediaType.AUDIO)("Jamendo", Search(q="rock & roll"))
  assert url == "https://www.jamendo.com/search/tracks?q=rock%20%26%20roll"

def test_wikimedia_commons_video_keeps_audio_filter():
  url = make_url_getter(MediaType.VIDEO)("Wikimedia Commons", Search(q="ocean"))
  params = get_query_params(url)
  assert params["search"] == ["ocean filetype:video"]
  assert params["advancedSearch-current"] == ['{"fields":{"filetype":"audio"}}']

def test_mapping_search_is_accepted():
  get_url = make_url_getter(MediaType.AUDIO)
  url = get_url("SoundCloud", {"q": "x", "filters": {"commercial": True}})
  assert url == get_url("SoundCloud", Search.from_dict({"q": "x", "filters": {"commercial": True}}))
  assert get_query_params(url)["filter.license"] == ["to_use_commercially"]

def test_idempotent(commercial_modify_search):
  get_url = make_url_getter(MediaType.AUDIO)
  assert get_url("Europeana", commercial_modify_search) == get_url("Europeana", commercial_modify_search)

def test_uncurried_form(plain_search):
  assert get_legacy_source_url("video", "YouTube", plain_search) == make_url_getter("video")("YouTube", plain_search)

def test_legacy_sources_per_media_type():
  assert get_legacy_sources(MediaType.IMAGE) == ["Google Images", "Open Clip Art Library"]
  assert get_legacy_sources("audio") == ["Europeana", "Wikimedia Commons", "Jamendo", "ccMixter", "SoundCloud"]
  assert get_legacy_sources(MediaType.VIDEO) == ["Europeana", "Wikimedia Commons", "YouTube"]

def test_rejections_are_logged(caplog, plain_search):
  with caplog.at_level(logging.WARNING):
    with pytest.raises(UnknownSourceException):
      make_url_getter(MediaType.AUDIO)("NotASource", plain_search)
  assert "NotASource" in caplog.text

@pytest.mark.parametrize("search", [
  {"filters": {"commercial": True}},
  {"q": "x", "filters": "commercial"},
  "cats"
])
def test_malformed_mapping_search_is_invalid(search):
  with pytest.raises(InvalidQueryException) as exc_info:
    make_url_getter(MediaType.AUDIO)("SoundCloud", search)
  assert exc_info.value.get_source_name() == "SoundCloud"
  assert exc_info.value.get_media_type() == "audio"

def test_mapping_filter_flags_only_need_to_be_truthy():
  get_url = make_url_getter(MediaType.AUDIO)
  url = get_url("SoundCloud", {"q": "x", "filters": {"commercial": 1, "modify": 0}})
  assert get_query_params(url)["filter.license"] == ["to_use_commercially"]
  url = get_url("SoundCloud", {"q": "x", "filters": {"commercial": 1, "modify": 1}})
  assert get_query_params(url)["filter.license"] == ["to_modify_commercially"]
