class UnknownSourceException(Exception):
  __source_name: str

  def __init__(self, source_name: str, message: str | None = None):
    if message is None:
      message = f"No data available for provided legacy source: {source_name}"
    super().__init__(message)
    self.__source_name = source_name

  def get_source_name(self) -> str:
    return self.__source_name
