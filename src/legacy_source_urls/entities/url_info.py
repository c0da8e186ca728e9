from dataclasses import dataclass, field
from typing import Dict


class PreEncoded(str):
  """A query value the platform expects already percent-encoded. Written to the URL as-is."""

@dataclass(frozen=True)
class UrlInfo:
  url: str
  query: Dict[str, str | int] = field(default_factory=dict)
