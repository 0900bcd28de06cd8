"""Unit tests for the 7-day frequency/symptom alert scan."""
from datetime import timedelta

from app.services.alert_service import AlertService
from tests.factories import FIXED_NOW, make_daily_entries, make_entry


def alert_types(alerts):
    return [a.type for a in alerts]


class TestFrequencyAlert:
    """Tests for the low recording frequency (constipation) alert."""

    def test_three_entries_raise_constipation_only(self):
        entries = make_daily_entries([4, 4, 4])

        alerts = AlertService.scan(entries, now=FIXED_NOW)

        assert alert_types(alerts) == ["constipation"]
        assert alerts[0].severity == "medium"

    def test_four_entries_raise_nothing(self):
        entries = make_daily_entries([4, 4, 4, 4])

        assert AlertService.scan(entries, now=FIXED_NOW) == []

    def test_no_entries_raise_constipation(self):
        assert alert_types(AlertService.scan([], now=FIXED_NOW)) == ["constipation"]
        assert alert_types(AlertService.scan(None, now=FIXED_NOW)) == ["constipation"]

    def test_entries_older_than_seven_days_ignored(self):
        entries = make_daily_entries(
            [4] * 10, start=FIXED_NOW - timedelta(days=7)
        )

        assert alert_types(AlertService.scan(entries, now=FIXED_NOW)) == ["constipation"]


class TestDiarrheaAlert:
    """Tests for the high Bristol type (diarrhea) alert."""

    def test_three_loose_entries_raise_diarrhea(self):
        entries = make_daily_entries([6, 7, 6, 4])

        alerts = AlertService.scan(entries, now=FIXED_NOW)

        assert alert_types(alerts) == ["diarrhea"]
        assert alerts[0].severity == "high"

    def test_two_loose_entries_do_not_raise_diarrhea(self):
        entries = make_daily_entries([6, 7, 4, 4])

        assert AlertService.scan(entries, now=FIXED_NOW) == []

    def test_type_five_is_not_loose(self):
        entries = make_daily_entries([5, 5, 5, 5])

        assert AlertService.scan(entries, now=FIXED_NOW) == []


class TestSymptomAlert:
    """Tests for the concerning symptom alert."""

    def test_concerning_symptom_matches_case_insensitively(self):
        entries = make_daily_entries([4] * 4)
        entries[2].symptoms = ["Blood"]

        alerts = AlertService.scan(entries, now=FIXED_NOW)

        assert alert_types(alerts) == ["symptoms"]
        assert alerts[0].severity == "high"

    def test_symptom_must_match_whole_tag(self):
        entries = make_daily_entries([4] * 4)
        entries[0].symptoms = ["blood in stool"]

        assert AlertService.scan(entries, now=FIXED_NOW) == []

    def test_all_three_alerts_can_fire_together(self):
        entries = make_daily_entries([7, 7, 7])
        entries[0].symptoms = ["fever"]

        alerts = AlertService.scan(entries, now=FIXED_NOW)

        assert alert_types(alerts) == ["constipation", "diarrhea", "symptoms"]


class TestAlertShape:
    def test_alert_timestamp_is_reference_time(self):
        alerts = AlertService.scan([], now=FIXED_NOW)

        assert alerts[0].timestamp == FIXED_NOW.isoformat()
        assert alerts[0].message

    def test_recent_entries_window(self):
        inside = make_entry(timestamp=FIXED_NOW - timedelta(days=6, hours=23))
        outside = make_entry(timestamp=FIXED_NOW - timedelta(days=7))

        assert AlertService.recent_entries([inside, outside], FIXED_NOW) == [inside]
