"""Allow ``python -m activitylist``."""

from activitylist.cli import cli

if __name__ == "__main__":
    cli()
