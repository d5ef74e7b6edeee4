# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from argparse import ArgumentParser
from collections import OrderedDict
from enum import IntEnum, auto
from typing import Any, NamedTuple

import configargparse
import structlog
from typing_extensions import assert_never


def create_parser(*, prefix: str | None = None, add_help: bool = True) -> ArgumentParser:
    return configargparse.ArgumentParser(auto_env_var_prefix=prefix or 'tagcodec_', add_help=add_help)


def get_level_styles(colors: bool = True) -> dict[str, str]:
    import colorama
    if not colors:
        return {}
    return {
        'critical': colorama.Style.BRIGHT + colorama.Fore.RED,
        'exception': colorama.Fore.RED,
        'error': colorama.Fore.RED,
        'warn': colorama.Fore.YELLOW,
        'warning': colorama.Fore.YELLOW,
        'info': colorama.Fore.GREEN,
        'debug': colorama.Style.BRIGHT + colorama.Fore.CYAN,
        'notset': colorama.Back.RED,
    }


class LoggingOutput(IntEnum):
    NULL = auto()
    PRETTY = auto()
    JSON = auto()


class LoggingOptions(NamedTuple):
    debug: bool


def process_logging_output(argv: list[str]) -> LoggingOutput:
    """Extract logging output before argv parsing."""
    parser = create_parser(add_help=False)

    log_args = parser.add_mutually_exclusive_group()
    log_args.add_argument('--json-logs', action='store_true')
    log_args.add_argument('--disable-logs', action='store_true')

    args, remaining_argv = parser.parse_known_args(argv)
    argv.clear()
    argv.extend(remaining_argv)

    if args.json_logs:
        return LoggingOutput.JSON

    if args.disable_logs:
        return LoggingOutput.NULL

    return LoggingOutput.PRETTY


def process_logging_options(argv: list[str]) -> LoggingOptions:
    """Extract logging-specific options that are processed before argv parsing."""
    parser = create_parser(add_help=False)
    parser.add_argument('--debug', action='store_true')

    args, remaining_argv = parser.parse_known_args(argv)
    argv.clear()
    argv.extend(remaining_argv)

    return LoggingOptions(debug=args.debug)


def setup_logging(*, logging_output: LoggingOutput, logging_options: LoggingOptions) -> None:
    import logging
    import logging.config

    # common timestamper for structlog loggers and foreign (stdlib) loggers
    timestamper = structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S")

    # processors for foreign loggers
    pre_chain = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        timestamper,
    ]

    match logging_output:
        case LoggingOutput.NULL:
            handlers = ['null']
        case LoggingOutput.PRETTY:
            handlers = ['pretty']
        case LoggingOutput.JSON:
            handlers = ['json']
        case _:
            assert_never(logging_output)

    # See: https://docs.python.org/3/library/logging.config.html#configuration-dictionary-schema
    logging.config.dictConfig({
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'colored': {
                    '()': structlog.stdlib.ProcessorFormatter,
                    'processor': structlog.dev.ConsoleRenderer(colors=True, level_styles=get_level_styles()),
                    'foreign_pre_chain': pre_chain,
                },
                'json': {
                    '()': structlog.stdlib.ProcessorFormatter,
                    'processor': structlog.processors.JSONRenderer(),
                    'foreign_pre_chain': pre_chain,
                },
            },
            'handlers': {
                'pretty': {
                    'level': 'DEBUG',
                    'class': 'logging.StreamHandler',
                    'formatter': 'colored',
                },
                'json': {
                    'level': 'DEBUG',
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                },
                'null': {
                    'class': 'logging.NullHandler',
                },
            },
            'loggers': {
                '': {
                    'handlers': handlers,
                    'level': 'DEBUG' if logging_options.debug else 'INFO',
                },
            }
    })

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        timestamper,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]

    structlog.configure(
        processors=processors,
        context_class=OrderedDict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
