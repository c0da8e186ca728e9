from enum import Enum


class MediaType(Enum):
  IMAGE = "image"
  AUDIO = "audio"
  VIDEO = "video"
