"""Command-line interface for safe backup."""

import logging
import sys
import click
from typing import Optional

from .core.backup_tool import SafeBackup
from .core.errors import InvalidPathError, OperationIOError, SafeBackupError

FILENAME_PROMPT = "Please enter your file name: "
COMMAND_PROMPT = "Please enter your command (backup, restore, delete): "


def setup_logging(level: str, log_file: Optional[str] = None):
    """Set up logging configuration."""
    # Convert string level to logging constant
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {level}')

    # Create formatter
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Set up root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Clear existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Console handler on stderr so prompts on stdout stay readable
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Add file handler if specified
    if log_file:
        try:
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            click.echo(f"Warning: Could not set up file logging: {e}", err=True)


def read_input(prompt: str, max_length: int = 255) -> str:
    """Prompt for one line of input and return it trimmed.

    Args:
        prompt: Prompt text shown to the user.
        max_length: Longest accepted input after trimming.

    Returns:
        The trimmed input, possibly empty. End of input reads as an
        empty line.

    Raises:
        InvalidPathError: If the trimmed input is longer than ``max_length``.
        OperationIOError: If standard input cannot be read.
    """
    try:
        value = click.prompt(prompt, default="", show_default=False, prompt_suffix="")
    except (click.Abort, EOFError):
        value = ""
    except OSError as e:
        raise OperationIOError("Could not read input", e) from e
    value = value.strip()
    if len(value) > max_length:
        raise InvalidPathError(value, "too long", "Input too long")
    return value


@click.command()
@click.option('--config', '-c', 'config_path',
              help='Path to configuration file')
@click.option('--log-level', default=None,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Diagnostic logging level (default from config, else WARNING)')
@click.option('--log-file',
              help='Diagnostic log file path')
def cli(config_path: Optional[str], log_level: Optional[str], log_file: Optional[str]):
    """Safe Backup - back up, restore or delete one file in the current directory.

    The file name and the command are read from interactive prompts.
    """
    try:
        app = SafeBackup(config_path)
    except SafeBackupError as e:
        click.echo(f"Failed to initialize application: {e}", err=True)
        sys.exit(1)

    # Logging settings come from the loaded config unless overridden
    logging_config = app.config_manager.get_logging_config()
    setup_logging(log_level or logging_config.get('level', 'WARNING'),
                  log_file or logging_config.get('file'))

    try:
        filename = read_input(FILENAME_PROMPT, app.max_input_length)

        # Validate the filename before asking for a command
        app.validator.validate(filename)

        command = read_input(COMMAND_PROMPT, app.max_input_length)
        app.run(filename, command)

    except SafeBackupError as e:
        click.echo(f"Error: {e}", err=True)
        app.record_error(e)
        sys.exit(1)


def main():
    """Main CLI entry point."""
    cli()


if __name__ == '__main__':
    main()
