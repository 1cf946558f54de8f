import logging
from pathlib import Path

import click

from completion_cli.version import __version__
from completion_cli.logutil import setup_logging
from completion_cli.config import ConfigError, DEFAULT_ENV_FILE, load_settings
from completion_cli.llm import build_request
from completion_cli.requester import run_once


class FriendlyException(click.ClickException):
    pass


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--verbose", "verbose", is_flag=True, help="Enable verbose logging (DEBUG)")
@click.option(
    "--env-file",
    "env_file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_ENV_FILE,
    show_default=True,
    help="Env file merged into the environment before lookup (optional)",
)
@click.option("--mask-key", is_flag=True, help="Mask the API key when echoing configuration")
@click.version_option(version=__version__, prog_name="completion-cli")
def cli(verbose: bool, env_file: Path, mask_key: bool):
    """Send one text-completion request and print the first choice."""
    setup_logging(debug=verbose)
    try:
        settings = load_settings(env_file=env_file)
    except ConfigError as e:
        raise FriendlyException(str(e))

    try:
        request = build_request()
    except ValueError as e:
        raise FriendlyException(f"Invalid completion request: {e}")

    run_once(settings, mask_key=mask_key, request=request)


def main():
    try:
        cli(prog_name="completion-cli")
    except FriendlyException as e:
        raise click.ClickException(str(e))
    except Exception as e:
        logging.getLogger(__name__).exception("Unhandled error")
        raise click.ClickException(f"Unexpected error: {e}")


if __name__ == "__main__":
    main()
