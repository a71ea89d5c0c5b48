"""Knowledge repository: persists component messages and answers queries about them."""

from __future__ import annotations

import logging
import time
from collections import deque
from collections.abc import Callable, Mapping
from pathlib import Path

from bsn.messages import LogEntry, PersistMessage
from bsn.utils import split

_log = logging.getLogger(__name__)

COMPONENTS = ("g3t1_1", "g3t1_2", "g3t1_3", "g3t1_4", "g3t1_5", "g3t1_6")

# Field prefixes of the target-system report, in component order.
_SENSOR_FIELDS = ("trm", "ecg", "oxi", "abps", "abpd", "glc")

# Log files, in the order they are flushed.
_LOG_KINDS = (
    "status",
    "energystatus",
    "voltagestatus",
    "event",
    "uncertainty",
    "adaptation",
)

TIME_WINDOW_SECONDS = 10.1
FLUSH_EVERY = 30
REQUESTERS = ("/engine", "/enactor")


def fetch_formula(directory: str | Path, name: str) -> str:
    """Return the first line of ``<directory>/<name>.formula``, or "" if unreadable."""
    path = Path(directory) / f"{name}.formula"
    try:
        with path.open(encoding="utf-8") as handle:
            return handle.readline().rstrip("\r\n")
    except OSError:
        _log.error("Could not load %s formula into memory", name)
        return ""


class DataAccess:
    """Stores status, energy, voltage, event, uncertainty and adaptation records.

    Records are buffered and appended to one log file per kind in
    ``log_dir`` every thirty messages. Queries from the engine or the
    enactor return reliabilities, costs, recent events or the formulas read
    from ``formula_dir``.
    """

    def __init__(
        self,
        log_dir: str | Path,
        formula_dir: str | Path,
        frequency: float = 1.0,
        clock: Callable[[], int] | None = None,
        monotonic: Callable[[], float] | None = None,
    ) -> None:
        self.log_dir = Path(log_dir)
        self.formula_dir = Path(formula_dir)
        self.frequency = frequency
        self._clock = clock if clock is not None else time.time_ns
        self._monotonic = monotonic if monotonic is not None else time.monotonic

        self.logical_clock = 0
        self.buffer_size = 1000
        self.log_paths: dict[str, Path] = {}
        self._pending: dict[str, list[LogEntry]] = {kind: [] for kind in _LOG_KINDS}

        self.status: dict[str, deque[tuple[float, str]]] = {}
        self.events: dict[str, deque[str]] = {}

        self.components_reliabilities: dict[str, float] = {}
        self.components_batteries: dict[str, float] = {}
        self.components_voltages: dict[str, float] = {}
        self.components_costs_engine: dict[str, float] = {}
        self.components_costs_enactor: dict[str, float] = {}
        self.contexts: dict[str, int] = {}

        self.reliability_formula = ""
        self.cost_formula = ""

        self.count_to_calc_and_reset = 0
        self.count_to_fetch = 0
        self.arrived_status = 0

    def set_up(self) -> None:
        """Create empty log files, load the formulas and reset component data."""
        stamp = self._clock()
        self.log_dir.mkdir(parents=True, exist_ok=True)
        for kind in _LOG_KINDS:
            path = self.log_dir / f"{kind}_{stamp}.log"
            path.write_text("\n", encoding="utf-8")
            self.log_paths[kind] = path

        self.buffer_size = 1000
        self.reliability_formula = fetch_formula(self.formula_dir, "reliability")
        self.cost_formula = fetch_formula(self.formula_dir, "cost")

        self.count_to_calc_and_reset = 0
        self.arrived_status = 0

        for component in COMPONENTS:
            self.components_batteries[component] = 100
            self.components_voltages[component] = 0
            self.components_costs_enactor[component] = 0
            self.components_costs_engine[component] = 0
            self.components_reliabilities[component] = 1

    def process_target_system_data(self, data: Mapping[str, float]) -> None:
        """Update batteries and voltages from a target-system report.

        ``data`` holds ``<sensor>_batt`` and ``<sensor>_volt`` for the sensors
        trm, ecg, oxi, abps, abpd and glc.
        """
        for component, sensor in zip(COMPONENTS, _SENSOR_FIELDS):
            self.components_batteries[component] = data[f"{sensor}_batt"]
        for component, sensor in zip(COMPONENTS, _SENSOR_FIELDS):
            self.components_voltages[component] = data[f"{sensor}_volt"]

    def body(self) -> None:
        """Run one cycle: periodically recompute reliabilities and reload formulas."""
        self.count_to_fetch += 1
        self.count_to_calc_and_reset += 1

        if self.count_to_calc_and_reset >= self.frequency:
            self.apply_time_window()
            for component in sorted(self.status):
                self.calculate_component_reliability(component)
            self.count_to_calc_and_reset = 0

        if self.count_to_fetch >= self.frequency * 10:
            self.reliability_formula = fetch_formula(self.formula_dir, "reliability")
            self.cost_formula = fetch_formula(self.formula_dir, "cost")
            self.count_to_fetch = 0

    def receive_persist_message(self, msg: PersistMessage) -> None:
        """Record ``msg`` according to its type and update component data."""
        _log.info("I heard: [%s]", msg.type)
        self.logical_clock += 1

        if msg.type == "Status":
            self.arrived_status += 1
            self._persist("status", "Status", msg.timestamp, msg.source, msg.target, msg.content)
            self.status.setdefault(msg.source, deque()).append(
                (self._monotonic(), msg.content)
            )
        elif msg.type == "VoltageStatus":
            component = msg.source[1:]
            self.components_voltages[component] = float(msg.content)
            self._persist(
                "voltagestatus", "VoltageStatus",
                msg.timestamp, msg.source, msg.target, msg.content,
            )
        elif msg.type == "EnergyStatus":
            if msg.source != "/engine":
                component = msg.source[1:]
                cost = float(msg.content)
                self.components_costs_engine[component] = (
                    self.components_costs_engine.get(component, 0) + cost
                )
                self.components_costs_enactor[component] = (
                    self.components_costs_enactor.get(component, 0) + cost
                )
                self._persist(
                    "energystatus", "EnergyStatus",
                    msg.timestamp, msg.source, msg.target, msg.content,
                )
            else:
                for component, cost in self._parse_costs(msg.content):
                    self._persist(
                        "energystatus", "EnergyStatus",
                        msg.timestamp, component, msg.target, f"{cost:f}",
                    )
        elif msg.type == "Event":
            self._persist("event", "Event", msg.timestamp, msg.source, msg.target, msg.content)
            history = self.events.setdefault(msg.source, deque())
            if len(history) > self.buffer_size:
                history.popleft()
            history.append(msg.content)
            self.contexts[msg.source[1:]] = 1 if msg.content == "activate" else 0
        elif msg.type == "Uncertainty":
            self._persist(
                "uncertainty", "Uncertainty",
                msg.timestamp, msg.source, msg.target, msg.content,
            )
        elif msg.type == "AdaptationCommand":
            self._persist(
                "adaptation", "Adaptation",
                msg.timestamp, msg.source, msg.target, msg.content,
            )
        else:
            _log.info("(Could not identify message type!!)")

    @staticmethod
    def _parse_costs(content: str) -> list[tuple[str, float]]:
        pairs = []
        for token in content.replace(";", " ").split():
            parts = token.replace(":", " ").split()
            if len(parts) < 2:
                raise ValueError(f"malformed cost entry {token!r}")
            pairs.append((parts[0], float(parts[1])))
        return pairs

    def process_query(self, name: str, query: str) -> str:
        """Answer ``query`` from requester ``name``; malformed queries yield ""."""
        content = ""
        try:
            if name not in REQUESTERS:
                return content
            parts = split(query, ":")

            if len(parts) == 1:
                if parts[0] == "reliability_formula":
                    content = self.reliability_formula
                elif parts[0] == "cost_formula":
                    content = self.cost_formula

            if len(parts) > 1:
                if parts[1] == "reliability":
                    self.apply_time_window()
                    for component in sorted(self.status):
                        content += self.calculate_component_reliability(component)
                elif parts[1] == "event":
                    content += self._recent_events(int(parts[2]))
                elif parts[1] == "cost":
                    self.apply_time_window()
                    for component in sorted(self.status):
                        content += self.calculate_component_cost(component, name)
        except Exception:  # any malformed query yields whatever was built so far
            pass
        return content

    def _recent_events(self, count: int) -> str:
        result = ""
        for source in sorted(self.events):
            history = self.events[source]
            if count <= 0 or count > len(history):
                continue
            recent = list(history)[len(history) - count:]
            joined = "".join(recent)
            self.contexts[source[1:]] = 1 if joined == "activate" else 0
            result += source + ":" + "".join(item + "," for item in recent) + ";"
        return result

    def _persist(
        self, kind: str, name: str, timestamp: int, source: str, target: str, content: str
    ) -> None:
        self._pending[kind].append(
            LogEntry(name, timestamp, self.logical_clock, source, target, content)
        )
        if self.logical_clock % FLUSH_EVERY == 0:
            self.flush()

    def flush(self) -> None:
        """Append all buffered records to their log files and clear the buffers."""
        if not self.log_paths:
            raise RuntimeError("set_up() must be called before flush()")
        for kind in _LOG_KINDS:
            entries = self._pending[kind]
            with self.log_paths[kind].open("a", encoding="utf-8") as handle:
                handle.writelines(entry.to_csv() + "\n" for entry in entries)
            entries.clear()

    def calculate_component_reliability(self, component: str) -> str:
        """Compute the reliability of ``component`` and return its report fragment."""
        report = component + ":"
        seen = False
        successes = 0
        total = 0
        for _, state in self.status.setdefault(component, deque()):
            if state == "success":
                successes += 1
                total += 1
            elif state == "fail":
                total += 1
            else:
                report += state + ","
            seen = True

        reliability = successes / total if total > 0 else 0
        report += f"{reliability:f};"
        self.components_reliabilities[component[1:]] = reliability
        return report if seen else ""

    def calculate_component_cost(self, component: str, req_name: str) -> str:
        """Return the cost report fragment of ``component`` and reset the requester's cost."""
        report = component + ":"
        key = component[1:]
        if req_name in REQUESTERS:
            cost = self.components_costs_engine.setdefault(key, 0)
            voltage = self.components_voltages.setdefault(key, 0)
            report += f"{cost:f}`{voltage:f};"
            if req_name == "/engine":
                self.components_costs_engine[key] = 0
            else:
                self.components_costs_enactor[key] = 0
        return report

    def apply_time_window(self) -> None:
        """Drop status entries older than the time window."""
        now = self._monotonic()
        for history in self.status.values():
            while history and now - history[0][0] >= TIME_WINDOW_SECONDS:
                history.popleft()