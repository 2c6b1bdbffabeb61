import pytest

from contribgraph.models import Calendar, ContributionDay


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("GH_TOKEN", "GITHUB_TOKEN", "GH_PROFILE_USER", "CONTRIB_OUTPUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def single_day_calendar() -> Calendar:
    day = ContributionDay(date="2024-03-05", count=3, weekday=2)
    return Calendar(weeks=((day,),), total=3)
