"""Run the CLI with `python -m meilisdk`."""

from meilisdk.cli.main import run

if __name__ == "__main__":
    run()
