import pytest

from skyline.core.observability import init_sentry
from skyline.main import create_app
from skyline.settings import Settings


class FakeSentry:
    """Record calls made to the sentry_sdk module."""

    def __init__(self) -> None:
        self.init_calls: list[dict[str, object]] = []
        self.tags: dict[str, str] = {}

    def init(self, **kwargs) -> None:
        self.init_calls.append(kwargs)

    def set_tag(self, key: str, value: str) -> None:
        self.tags[key] = value


@pytest.fixture
def fake_sentry(monkeypatch: pytest.MonkeyPatch) -> FakeSentry:
    fake = FakeSentry()
    monkeypatch.setattr("skyline.core.observability.sentry_sdk.init", fake.init)
    monkeypatch.setattr("skyline.core.observability.sentry_sdk.set_tag", fake.set_tag)
    return fake


def test_sentry_stays_off_without_dsn(fake_sentry: FakeSentry) -> None:
    initialized = init_sentry(Settings(sentry_dsn=None), entry_point="cli")

    assert initialized is False
    assert fake_sentry.init_calls == []
    assert fake_sentry.tags == {}


@pytest.mark.parametrize("entry_point", ["cli", "api"])
def test_sentry_events_are_tagged_with_entry_point_and_user_agent(
    fake_sentry: FakeSentry, entry_point: str
) -> None:
    settings = Settings(
        sentry_dsn="https://examplePublicKey@o0.ingest.sentry.io/0",
        environment="production",
        release="skylineg@0.0.1",
        sentry_traces_sample_rate=0.2,
        user_agent="skylineg-ci",
    )

    initialized = init_sentry(settings, entry_point=entry_point)

    assert initialized is True
    assert fake_sentry.init_calls == [
        {
            "dsn": "https://examplePublicKey@o0.ingest.sentry.io/0",
            "environment": "production",
            "release": "skylineg@0.0.1",
            "traces_sample_rate": 0.2,
            "send_default_pii": False,
        }
    ]
    assert fake_sentry.tags == {
        "entry_point": entry_point,
        "github.user_agent": "skylineg-ci",
    }


def test_unknown_entry_point_is_rejected(fake_sentry: FakeSentry) -> None:
    with pytest.raises(ValueError, match="Unknown entry point"):
        init_sentry(Settings(sentry_dsn="https://key@o0.ingest.sentry.io/0"), "worker")

    assert fake_sentry.init_calls == []


def test_create_app_tags_sentry_as_api(fake_sentry: FakeSentry) -> None:
    create_app(Settings(sentry_dsn="https://key@o0.ingest.sentry.io/0"))

    assert len(fake_sentry.init_calls) == 1
    assert fake_sentry.tags["entry_point"] == "api"
