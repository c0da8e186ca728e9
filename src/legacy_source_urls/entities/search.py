from dataclasses import dataclass
from typing import Any, Mapping
from dacite import Config, from_dict


@dataclass(frozen=True)
class SearchFilters:
  commercial: bool = False
  modify: bool = False

@dataclass(frozen=True)
class Search:
  q: str
  filters: SearchFilters | None = None

  @classmethod
  def from_dict(cls, data: Mapping[str, Any]) -> "Search":
    # Filter flags only need to be truthy
    return from_dict(data_class=cls, data=dict(data), config=Config(cast=[bool]))

  def is_commercial(self) -> bool:
    return bool(self.filters and self.filters.commercial)

  def is_modify(self) -> bool:
    return bool(self.filters and self.filters.modify)
