"""Seed job entrypoint.

Runs once, out of band, to prepare the `users` table for the API service:

    python -m jobs.seed.app.main

The job always exits 0; a failure is visible only in the logs.
"""

import os

from common.logging import configure_logging

from .seed import run


def main() -> int:
    """Run the job.

    Returns:
        int: The process exit code.
    """
    configure_logging(os.getenv("LOG_LEVEL", "INFO"))
    run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
