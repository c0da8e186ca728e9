from dataclasses import dataclass, field


@dataclass
class LoggingConfig:
  level: str = "INFO"

@dataclass
class SystemConfig:
  logging: LoggingConfig = field(default_factory=LoggingConfig)
