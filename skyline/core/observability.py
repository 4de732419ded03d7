import sentry_sdk

from skyline.settings import Settings

ENTRY_POINTS = frozenset({"cli", "api"})


def init_sentry(app_settings: Settings, entry_point: str) -> bool:
    """Report errors to Sentry when a DSN is configured.

    Events are tagged with the entry point (`cli` or `api`) and the
    User-Agent sent to GitHub, so CLI runs and API requests can be told
    apart. Returns whether Sentry was initialized.
    """

    if entry_point not in ENTRY_POINTS:
        raise ValueError(f"Unknown entry point {entry_point!r}")
    if not app_settings.sentry_dsn:
        return False

    sentry_sdk.init(
        dsn=app_settings.sentry_dsn,
        environment=app_settings.environment,
        release=app_settings.release,
        traces_sample_rate=app_settings.sentry_traces_sample_rate,
        send_default_pii=False,
    )
    sentry_sdk.set_tag("entry_point", entry_point)
    sentry_sdk.set_tag("github.user_agent", app_settings.user_agent)
    return True
