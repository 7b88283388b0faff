import argparse
import os
import sys
from typing import List

from dotenv import load_dotenv
from loguru import logger

from github_activity.cache import CacheStore
from github_activity.client import ActivityError, ActivityFetcher
from github_activity.display import display_activity
from github_activity.models import Cache

USAGE = "Usage: github-activity <username> [event-type]"


def setup_logging():
    log_level = os.getenv("LOG_LEVEL", "WARNING").upper()
    try:
        logger.level(log_level)
    except ValueError:
        log_level = "WARNING"
    logger.remove()
    logger.add(sys.stderr, level=log_level)


def report_activity(
    username: str,
    filter_type: str,
    cache: Cache,
    store: CacheStore,
    fetcher: ActivityFetcher,
) -> Cache:
    """
    Print the recent activity of a user, from cache when fresh.

    Returns the cache as it stands after this run. It is saved to disk only
    when a fetch succeeded with a non-empty result.
    """
    entry, found = store.get(cache, username)
    if found:
        print(f"Using cached data for '{username}':\n")
        if not entry.events:
            print(f"No recent activities found for user '{username}'")
            return cache
        display_activity(entry.events, filter_type)
        return cache

    logger.info(f"Fetching data for '{username}' from GitHub API...")
    try:
        events = fetcher.fetch(username)
    except ActivityError as e:
        logger.error(f"Fetching activity for '{username}' failed: {type(e).__name__}")
        print(e)
        return cache

    if not events:
        print(f"No recent activities found for user '{username}'")
        return cache

    cache = store.put(cache, username, events)
    store.save(cache)

    print(f"Recent activity for '{username}':\n")
    display_activity(events, filter_type)
    return cache


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="github-activity",
        description="Show a GitHub user's recent public activity",
        add_help=False,
    )
    parser.add_argument("username", nargs="?", help="GitHub username")
    parser.add_argument("event_type", nargs="?", default="", help="Only show events of this type, e.g. PushEvent")
    return parser


def main(argv: List[str] | None = None):
    """Command line entry point"""
    load_dotenv("gh.env")
    setup_logging()

    args, extra = build_parser().parse_known_args(argv)
    if args.username is None or extra:
        print(USAGE)
        return

    if not args.username:
        print("Please provide a GitHub username.")
        return

    store = CacheStore()
    cache = store.load()
    report_activity(args.username, args.event_type, cache, store, ActivityFetcher())


if __name__ == "__main__":
    main()
