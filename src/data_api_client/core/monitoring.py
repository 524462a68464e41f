"""Sentry integration for error tracking and performance monitoring.

The CLI initializes Sentry right after logging setup. Without a DSN in
DATA_API_SENTRY_DSN the SDK stays disabled and spans are no-ops.
"""

import os

import sentry_sdk

from data_api_client.__about__ import __version__

SENTRY_DSN_ENV = "DATA_API_SENTRY_DSN"


def setup_sentry(environment: str = "local") -> None:
    sentry_sdk.init(
        dsn=os.environ.get(SENTRY_DSN_ENV),
        traces_sample_rate=0.03,
        environment=environment,
        release=__version__,
        attach_stacktrace=True,
        send_default_pii=False,
    )
