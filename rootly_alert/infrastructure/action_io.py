"""
GitHub Actions Output Handling

Architectural Intent:
- Publishes step outputs and failure status the way the Actions runner
  expects them
- Keeps runner file formats out of the CLI and the use cases

Design Decisions:
- Outputs are appended to the file named by GITHUB_OUTPUT; multi-line values
  use the heredoc form with a random delimiter
- Outside a runner, outputs are printed as name=value on stdout
- Failure is reported through the error log and exit status 1
"""

import logging
import os
import sys
import uuid
from typing import NoReturn

logger = logging.getLogger(__name__)

OUTPUT_FILE_VARIABLE = "GITHUB_OUTPUT"


def format_output(name: str, value: str) -> str:
    if "\n" not in value and "\r" not in value:
        return f"{name}={value}\n"
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


def set_output(name: str, value: str) -> None:
    """Publish a step output."""
    output_path = os.environ.get(OUTPUT_FILE_VARIABLE, "")
    line = format_output(name, value)
    if not output_path:
        sys.stdout.write(line)
        return

    with open(output_path, "a", encoding="utf-8") as f:
        f.write(line)
    logger.debug("Wrote output %s to %s", name, output_path)


def set_failed(message: str) -> NoReturn:
    """Report the step as failed and exit with status 1."""
    logger.error(message)
    raise SystemExit(1)
