#!/usr/bin/env python3

import argparse
from functools import partial
import logging
import os
import sys
import time
from typing import List
import yaml
from dacite import from_dict
from legacy_source_urls.entities.search import Search, SearchFilters
from legacy_source_urls.exceptions.invalid_query_exception import InvalidQueryException
from legacy_source_urls.exceptions.unknown_source_exception import UnknownSourceException
from legacy_source_urls.exceptions.unsupported_media_type_exception import UnsupportedMediaTypeException
from legacy_source_urls.models.configs.full_config import FullConfig
from legacy_source_urls.models.enums.media_type import MediaType
from legacy_source_urls.services.legacy_source_resolver import (
  LEGACY_SOURCE_MAP,
  get_legacy_sources,
  make_url_getter
)


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def start(argv: List[str] | None = None) -> None:
  args = parse_args(argv)
  config = load_config(args.config)
  try:
    configure_logger(args.log_level or config.system.logging.level)
  except ValueError as e:
    logging.error("Invalid log level: %s", e)
    sys.exit(1)
  try:
    args.func(config, args)
  except (InvalidQueryException, UnknownSourceException, UnsupportedMediaTypeException) as e:
    logging.error("%s", e)
    sys.exit(1)

def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
  parser = argparse.ArgumentParser(
    prog="legacy-source-urls",
    description="Build search result urls for legacy media sources."
  )
  parser.add_argument("--config", default="config.yml")
  parser.add_argument("--log-level", default=None, type=str.upper, choices=LOG_LEVELS)
  subparsers = parser.add_subparsers(dest="command")
  subparsers.required = True
  for media_type in MediaType:
    media_type_parser = subparsers.add_parser(media_type.value)
    media_type_parser.add_argument("source")
    media_type_parser.add_argument("query")
    media_type_parser.add_argument("--commercial", action="store_true")
    media_type_parser.add_argument("--modify", action="store_true")
    media_type_parser.set_defaults(func=partial(print_url, media_type))
  list_parser = subparsers.add_parser("list")
  list_parser.add_argument("media_type", nargs="?", choices=[media_type.value for media_type in MediaType])
  list_parser.set_defaults(func=print_sources)
  return parser.parse_args(argv)

def load_config(path: str) -> FullConfig:
  if not os.path.exists(path):
    return FullConfig()
  with open(path, "r", encoding='utf-8') as config_file:
    raw_config = yaml.safe_load(config_file) or {}
  return from_dict(data_class=FullConfig, data=raw_config)

def print_url(media_type: MediaType, config: FullConfig, args: argparse.Namespace) -> None:
  if args.commercial or args.modify:
    filters = SearchFilters(commercial=args.commercial, modify=args.modify)
  else:
    filters = config.quick_settings.default_filters
  search = Search(q=args.query, filters=filters)
  get_url = make_url_getter(media_type)
  print(get_url(args.source, search))

def print_sources(config: FullConfig, args: argparse.Namespace) -> None:    # pylint: disable=unused-argument
  if args.media_type:
    source_names = get_legacy_sources(args.media_type)
  else:
    source_names = list(LEGACY_SOURCE_MAP)
  for source_name in source_names:
    print(source_name)

def configure_logger(level: str = "INFO"):
  def custom_time(record):
    t = time.localtime(record.created)
    return time.strftime("%Y-%m-%d %H:%M:%S", t) + f".{int(record.msecs):03d}"
  logging.basicConfig(
    format='[%(asctime)s] [%(levelname)s] %(message)s',
    datefmt=''
  )
  logging.getLogger().setLevel(level.upper())
  logging.Formatter.converter = time.localtime
  logging.Formatter.formatTime = lambda self, record, datefmt=None: custom_time(record)


if __name__ == "__main__":
  start()
