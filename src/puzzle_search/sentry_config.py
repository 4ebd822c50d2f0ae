"""Sentry error monitoring configuration for the puzzle-search CLI."""

import os
import sentry_sdk
from dotenv import load_dotenv


def init_sentry(release: str = None) -> bool:
    """Initialize Sentry error monitoring.

    Reads SENTRY_DSN and ENVIRONMENT from the environment (or a .env file).

    Args:
        release: Release name reported with every event.

    Returns:
        True if Sentry was initialized, False if DSN not configured.
    """
    load_dotenv()

    dsn = os.getenv("SENTRY_DSN")
    if not dsn:
        return False

    sentry_sdk.init(
        dsn=dsn,
        environment=os.getenv("ENVIRONMENT", "development"),
        release=release,
        send_default_pii=False,
        traces_sample_rate=0.0,
        attach_stacktrace=True,
    )
    return True


def tag_run(puzzle: str, input_path: str):
    """Attach the puzzle kind and input file to subsequent events."""
    sentry_sdk.set_tag("puzzle", puzzle)
    sentry_sdk.set_context("input", {"path": input_path})


def capture_exception(exception: Exception = None):
    """Capture an exception and send to Sentry.

    A no-op when Sentry was never initialized.
    """
    sentry_sdk.capture_exception(exception)
