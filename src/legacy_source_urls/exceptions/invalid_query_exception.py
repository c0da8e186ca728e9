class InvalidQueryException(Exception):
  __source_name: str
  __media_type: str

  def __init__(self, source_name: str, media_type: str, message: str | None = None):
    if message is None:
      message = f"Please provide a valid query to search {source_name} for {media_type} files."
    super().__init__(message)
    self.__source_name = source_name
    self.__media_type = media_type

  def get_source_name(self) -> str:
    return self.__source_name

  def get_media_type(self) -> str:
    return self.__media_type
