# bsn

Building blocks for simulating and monitoring a body sensor network:

- value ranges for vital signs,
- a Markov-chain data generator and a simulated patient,
- fusion of several sensors' risk values into a single risk status,
- battery bookkeeping and time helpers,
- the logging, fault-injection and knowledge-repository components of a
  self-adaptive monitoring system.

The components are driven through plain Python calls. The package needs
nothing beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it holds |
| --- | --- |
| `bsn.ranges` | `Range`: a closed interval with membership test and linear conversion |
| `bsn.utils` | `split`: split a string on a separator, dropping empty pieces |
| `bsn.battery` | `Battery`: capacity, level and per-unit consumption / generation |
| `bsn.processor` | `get_sensor_id`, `get_value`, `data_fuse` for sensor packets |
| `bsn.timedata` | `elapsed_time` and `get_time` |
| `bsn.generator` | `Markov` and `DataGenerator` for simulated vital signs |
| `bsn.patient` | `PatientModule`: a simulated patient producing vital signs |
| `bsn.messages` | `Message`, `PersistMessage`, `LogEntry` records |
| `bsn.logger` | `Logger`: turns component messages into persist messages |
| `bsn.injector` | `InjectionProfile`, `Injector`: noise and voltage fault injection |
| `bsn.data_access` | `DataAccess`, `fetch_formula`: the knowledge repository |

## Examples

### Ranges and strings

```python
from bsn.ranges import Range
from bsn.utils import split

normal = Range(36.5, 37.5)
normal.in_range(37.0)                  # True
Range(0.0, 10.0).convert(2, 3, 10.0)   # 3.0
normal.to_print()                      # '(36.500000 - 37.500000)'

split("trm,,ecg,oxi", ",")             # ['trm', 'ecg', 'oxi']
```

A range whose lower bound is above its upper bound raises `ValueError`.

### Batteries

```python
from bsn.battery import Battery

battery = Battery("Battery", 10.0, 10.0, 0.1)
battery.consume(5)       # current_level is now 9.5
battery.generate(2)      # about 9.7; never above the capacity
```

The level never drops below zero. A capacity that is not positive, a level
outside `[0, capacity]` or a unit outside `[0, capacity]` raises `ValueError`.

### Sensor packets and data fusion

```python
from bsn.processor import get_sensor_id, get_value, data_fuse

get_sensor_id("oximeter")      # 2; unknown types give -1
get_value("thermometer-36.8")  # 36.8
data_fuse([70.0, 60.0, 50.0])  # about 66.67
data_fuse([])                  # -1
```

`data_fuse` ignores negative entries, averages entries 3 and 4 (the two
blood-pressure readings) into one value, weights each value by its
normalised deviation from the mean, and prints the resulting risk status
(flagging an emergency above 66%).

### Time helpers

```python
from bsn.timedata import elapsed_time, get_time

elapsed_time((5, 100), (3, 900))   # (1, 999999200), as (seconds, nanoseconds)
get_time()                         # local time as 'YYYY:MM:DD HH:MM:SS:millis'
```

### Simulated vital signs

```python
from bsn.generator import DataGenerator, Markov
from bsn.ranges import Range

transitions = [
    0, 100, 0, 0, 0,
    0, 0, 100, 0, 0,
    0, 0, 0, 100, 0,
    0, 0, 0, 0, 100,
    100, 0, 0, 0, 0,
]
states = [Range(1, 3), Range(4, 6), Range(7, 9), Range(10, 11), Range(12, 13)]

generator = DataGenerator(Markov(transitions, states, 4))
generator.set_seed(42)
generator.next_state()   # state 4 moves to state 0
generator.get_value()    # a value in [1, 3]
```

Each row of five transition values holds cumulative thresholds against a
roll of 1 to 100. A current state outside 0..4 raises `IndexError`.

`PatientModule` builds one such generator per vital sign from a mapping of
parameters: `vitalSigns` (comma separated), and for each sign
`<sign>_Change`, `<sign>_Offset`, `<sign>_State0` to `<sign>_State4`,
`<sign>_LowRisk`, `<sign>_MidRisk0`, `<sign>_MidRisk1`, `<sign>_HighRisk0`
and `<sign>_HighRisk1`. Call `set_up()`, then `body()` once per cycle
(1000 cycles per second) and `get_patient_data(sign)` for a reading.

### Logger

```python
from bsn.logger import Logger
from bsn.messages import Message

logger = Logger()
logger.set_up()
logger.receive_status(Message("/g3t1_1", "/engine", "success"))
logger.published
# [('persist', PersistMessage(..., type='Status', ...)),
#  ('status', Message(source='/g3t1_1', target='/engine', content='success'))]
```

Pass `publish=callable(topic, message)` to send messages elsewhere instead
of collecting them in `published`.

### Fault injection

```python
from bsn.injector import InjectionProfile, Injector

profile = InjectionProfile(type="step", amplitude=0.5, duration=2, begin=1, frequency=0.1)
injector = Injector({"g3t1_1": profile}, frequency=1.0)
injector.body()
injector.published[0]
# ('uncertainty_/g3t1_1',
#  Message(source='/injector', target='/g3t1_1', content='noise_factor=0.500000'))
```

Noise types are `step`, `ramp` and `random`; voltage factors are drawn
between `volt_min` and `volt_max` at the end of each voltage window.

### Knowledge repository

```python
from bsn.data_access import DataAccess
from bsn.messages import PersistMessage

repository = DataAccess("logs", "models")
repository.set_up()
repository.receive_persist_message(
    PersistMessage(source="/g3t1_1", target="/engine", type="Status", content="success")
)
repository.process_query("/engine", "all:reliability")   # '/g3t1_1:1.000000;'
repository.flush()
```

`set_up()` creates one log file per record kind in the log directory and
reads `reliability.formula` and `cost.formula` from the formula directory.
Records are appended as comma separated lines every thirty messages, or on
`flush()`. Queries are accepted from `/engine` and `/enactor`:
`reliability_formula`, `cost_formula`, `<any>:reliability`, `<any>:cost`
and `<any>:event:<n>`. Status entries older than 10.1 seconds are dropped
before reliabilities and costs are computed.

## What the package does not do

- There is no command-line program; everything is used from Python.
- There is no message transport. Components hand their messages to a
  `publish` callable or collect them in a `published` list; wiring them
  together over a network is left to the caller.
- It does not map sensor readings onto risk percentages; `data_fuse`
  expects those percentages to be supplied.