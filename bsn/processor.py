"""Sensor identification and fusion of per-sensor risk values."""

from __future__ import annotations

import re
from collections.abc import Iterable

_SENSOR_IDS = {
    "thermometer": 0,
    "ecg": 1,
    "oximeter": 2,
    "abps": 3,
    "abpd": 4,
    "glucosemeter": 5,
}

_NUMBER = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)

_BLOOD_PRESSURE_INDICES = (3, 4)


def get_sensor_id(sensor_type: str) -> int:
    """Return the numeric id of a sensor type, or -1 if it is unknown."""
    try:
        return _SENSOR_IDS[sensor_type]
    except KeyError:
        print(f"UNKNOWN TYPE {sensor_type}")
        return -1


def get_value(packet: str) -> float:
    """Parse the number that follows the first '-' in ``packet``."""
    tail = packet[packet.find("-") + 1:]
    match = _NUMBER.match(tail)
    if match is None:
        raise ValueError(f"no number in packet {packet!r}")
    return float(match.group(0))


def data_fuse(packets: Iterable[float]) -> float:
    """Fuse per-sensor risk values into one overall risk percentage.

    Negative entries are ignored. Entries 3 and 4 (the two blood-pressure
    readings) are averaged into one value. Returns -1 if nothing was usable.
    """
    total = 0.0
    count = 0
    bpr_sum = 0.0
    values: list[float] = []

    for index, packet in enumerate(packets):
        if int(packet) >= 0:
            if index in _BLOOD_PRESSURE_INDICES:
                bpr_sum += packet
            else:
                total += packet
                values.append(packet)
            count += 1

        if index == 4 and bpr_sum >= 0.0:
            bpr_sum /= 2
            total += bpr_sum
            values.append(bpr_sum)

    if count == 0:
        return -1

    avg = total / count
    deviations = [value - avg for value in values]
    low = min([1000.0, *deviations])
    high = max([-1.0, *deviations])

    if high - low > 0.0:
        weights = [(dev - low) / (high - low) for dev in deviations]
        weighted = sum(value * weight for value, weight in zip(values, weights))
        risk_status = weighted / sum(weights)
    else:
        risk_status = avg

    if risk_status > 66.0:
        print(f"============ EMERGENCY ============({risk_status:g}%)")
    else:
        print(f"General risk status: {risk_status:g}%")

    return risk_status