import re
import time

from bsn.timedata import elapsed_time, get_time

BASE = 1_600_000_000
PATTERN = r"\d{4}:\d{2}:\d{2} \d{2}:\d{2}:\d{2}:\d{1,3}"


def _to_epoch(text):
    stamp, millis = text.rsplit(":", 1)
    parsed = time.strptime(stamp, "%Y:%m:%d %H:%M:%S")
    return time.mktime(parsed) + int(millis) / 1000.0


def test_elapsed_time_with_borrow():
    assert elapsed_time((5, 100), (3, 200)) == (1, 999_999_900)


def test_elapsed_time_round_trip():
    now, ref = (12, 500), (7, 300)
    sec, nsec = elapsed_time(now, ref)
    assert (ref[0] + sec, ref[1] + nsec) == now


def test_elapsed_time_nanoseconds_in_range():
    sec, nsec = elapsed_time((10, 0), (4, 999_999_999))
    assert 0 <= nsec < 1_000_000_000
    assert sec * 1_000_000_000 + nsec == 10 * 1_000_000_000 - (4 * 1_000_000_000 + 999_999_999)


def test_get_time_format():
    text = get_time(float(BASE))
    assert re.fullmatch(PATTERN, text)
    assert text.endswith(":0")


def test_get_time_milliseconds():
    assert get_time(BASE + 0.25).endswith(":250")


def test_get_time_rounds_up_to_next_second():
    assert get_time(BASE + 0.9996) == get_time(float(BASE + 1))


def test_get_time_default_is_now():
    before = time.time()
    text = get_time()
    after = time.time()
    assert re.fullmatch(PATTERN, text)
    moment = _to_epoch(text)
    assert before - 1.0 <= moment <= after + 1.0