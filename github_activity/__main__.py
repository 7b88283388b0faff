"""
Entry point for running the GitHub activity tool as a module.

Usage:
    python -m github_activity <username> [event-type]
"""

from github_activity.app import main

if __name__ == "__main__":
    main()
