from dataclasses import dataclass, field
from legacy_source_urls.models.configs.quick_settings import QuickSettings
from legacy_source_urls.models.configs.system_config import SystemConfig


@dataclass
class FullConfig:
  quick_settings: QuickSettings = field(default_factory=QuickSettings)
  system: SystemConfig = field(default_factory=SystemConfig)
