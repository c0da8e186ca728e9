from dataclasses import dataclass, field
from legacy_source_urls.entities.search import SearchFilters


@dataclass
class QuickSettings:
  default_filters: SearchFilters = field(default_factory=SearchFilters)
