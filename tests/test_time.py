from datetime import datetime, timedelta, timezone

import pytest

from cloudwatch_logs_url import epoch_millis, relative_millis, to_millis

JST = timezone(timedelta(hours=9))


class TestTimeHelpers:

    def test_epoch_millis_aware(self):
        assert epoch_millis(datetime(2024, 7, 1, tzinfo=JST)) == 1719759600000
        assert epoch_millis(
            datetime(2024, 7, 31, 14, 59, 59, tzinfo=timezone.utc)) == 1722437999000

    def test_epoch_millis_naive_is_utc(self):
        assert epoch_millis(datetime(2024, 6, 30, 15)) == 1719759600000

    def test_epoch_millis_keeps_milliseconds(self):
        dt = datetime(1970, 1, 1, 0, 0, 1, 250000, tzinfo=timezone.utc)
        assert epoch_millis(dt) == 1250

    def test_relative_millis(self):
        assert relative_millis(timedelta(minutes=30)) == -1800000
        assert relative_millis(timedelta(minutes=-30)) == -1800000
        assert relative_millis(timedelta(0)) == 0

    def test_to_millis(self):
        assert to_millis(None) is None
        assert to_millis(-1800000) == -1800000
        assert to_millis(timedelta(hours=1)) == -3600000
        assert to_millis(datetime(1970, 1, 1, tzinfo=timezone.utc)) == 0

    @pytest.mark.parametrize('value', [True, '1719759600000', 1.5])
    def test_to_millis_rejects_other_types(self, value):
        with pytest.raises(TypeError):
            to_millis(value)
