"""
Command line access to the saved filters.

Usage:
    task-filters [--db PATH] [--config FILE] list
    task-filters add "Due today" --sql "WHERE dueDate <= now()"
    task-filters find "due today"
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .constants import LOG_LEVELS, MAX_SQLITE_INTEGER, MIN_SQLITE_INTEGER
from .container import ServiceContainer
from .exceptions import FilterStoreException, handle_exception
from .models.domain import Filter
from .repositories import FilterRepository
from .utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _print_filter(filter: Filter):
    print(json.dumps(filter.to_dict(), indent=2))


def list_filters(repo: FilterRepository, args) -> int:
    frame = repo.get_all_frame()
    if frame.empty:
        print("No filters stored")
    else:
        print(frame[['id', 'title', 'color', 'icon', 'order']].to_string(index=False))
    return 0


def show_filter(repo: FilterRepository, args) -> int:
    filter = repo.get_by_id(args.id)
    if filter is None:
        print(f"Filter {args.id} not found", file=sys.stderr)
        return 1
    _print_filter(filter)
    return 0


def find_filter(repo: FilterRepository, args) -> int:
    filter = repo.get_by_name(args.title)
    if filter is None:
        print(f"No filter titled '{args.title}'", file=sys.stderr)
        return 1
    _print_filter(filter)
    return 0


def add_filter(repo: FilterRepository, args) -> int:
    filter_id = repo.insert(Filter(
        title=args.title,
        sql=args.sql,
        values=args.values,
        criterion=args.criterion,
        color=args.color,
        icon=args.icon,
        order=args.order
    ))
    print(filter_id)
    return 0


def rename_filter(repo: FilterRepository, args) -> int:
    filter = repo.get_by_id(args.id)
    if filter is None:
        print(f"Filter {args.id} not found", file=sys.stderr)
        return 1
    filter.title = args.title
    repo.update(filter)
    return 0


def delete_filter(repo: FilterRepository, args) -> int:
    repo.delete(args.id)
    return 0


def sqlite_integer(text: str) -> int:
    """argparse type for integers that fit a SQLite INTEGER column."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: '{text}'")
    if not MIN_SQLITE_INTEGER <= value <= MAX_SQLITE_INTEGER:
        raise argparse.ArgumentTypeError(f"{value} is outside the 64-bit integer range")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='task-filters', description='Manage saved task filters')
    parser.add_argument('--db', type=str, default=None,
                        help='Path to the SQLite database (overrides configuration)')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to configuration file')
    parser.add_argument('--log-level', type=str.upper, choices=LOG_LEVELS, default=None,
                        help='Logging level (overrides configuration)')

    subparsers = parser.add_subparsers(dest='command', required=True)

    list_parser = subparsers.add_parser('list', help='List all filters')
    list_parser.set_defaults(handler=list_filters)

    show_parser = subparsers.add_parser('show', help='Show a filter by id')
    show_parser.add_argument('id', type=sqlite_integer)
    show_parser.set_defaults(handler=show_filter)

    find_parser = subparsers.add_parser('find', help='Find a filter by title (case-insensitive)')
    find_parser.add_argument('title')
    find_parser.set_defaults(handler=find_filter)

    add_parser = subparsers.add_parser('add', help='Add a filter and print its id')
    add_parser.add_argument('title')
    add_parser.add_argument('--sql', default=None)
    add_parser.add_argument('--values', default=None)
    add_parser.add_argument('--criterion', default=None)
    add_parser.add_argument('--color', type=sqlite_integer, default=0)
    add_parser.add_argument('--icon', type=sqlite_integer, default=-1)
    add_parser.add_argument('--order', type=sqlite_integer, default=-1)
    add_parser.set_defaults(handler=add_filter)

    rename_parser = subparsers.add_parser('rename', help='Change the title of a filter')
    rename_parser.add_argument('id', type=sqlite_integer)
    rename_parser.add_argument('title')
    rename_parser.set_defaults(handler=rename_filter)

    delete_parser = subparsers.add_parser('delete', help='Delete a filter by id')
    delete_parser.add_argument('id', type=sqlite_integer)
    delete_parser.set_defaults(handler=delete_filter)

    health_parser = subparsers.add_parser('health', help='Report database health')
    health_parser.set_defaults(handler=None)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        container = ServiceContainer(config_path=args.config, db_path=args.db)
        log_config = container.config.logging
        setup_logging(args.log_level or log_config.level, log_config.file)

        if args.command == 'health':
            health = container.database.health_check()
            print(json.dumps(health, indent=2))
            return 0 if health['status'] == 'healthy' else 1

        return args.handler(container.filter_repository, args)

    except FilterStoreException as e:
        handle_exception(e, logger, reraise=False)
        print(f"Error: {e.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
