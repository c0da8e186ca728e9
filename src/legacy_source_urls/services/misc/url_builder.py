from typing import Mapping
from urllib.parse import quote
from legacy_source_urls.entities.url_info import PreEncoded


# Same set encodeURIComponent leaves alone
SAFE_CHARACTERS = "-_.!~*'()"


def build_url(base_url: str, query_params: Mapping[str, str | int] | None = None) -> str:
  if not query_params:
    return base_url
  pairs = []
  for key, value in query_params.items():
    pairs.append(f"{encode_component(key)}={encode_component(value)}")
  separator = "&" if "?" in base_url else "?"
  return f"{base_url}{separator}{'&'.join(pairs)}"

def encode_component(value: str | int) -> str:
  if isinstance(value, PreEncoded):
    return str(value)
  return quote(str(value), safe=SAFE_CHARACTERS)
