import argparse

from cardmax.api.app import run as run_api
from cardmax.integrations.telegram_bot import main as run_bot


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="CardMax unified entrypoint")
    parser.add_argument(
        "mode",
        nargs="?",
        choices=["api", "bot"],
        default="api",
        help="Run mode: api (default), bot",
    )
    return parser


def main() -> None:
    args = build_parser().parse_args()

    if args.mode == "bot":
        run_bot()
        return

    run_api()


if __name__ == "__main__":
    main()
