import pytest

from bsn.generator import DataGenerator, Markov
from bsn.ranges import Range

CYCLE = [
    0, 100, 0, 0, 0,
    0, 0, 100, 0, 0,
    0, 0, 0, 100, 0,
    0, 0, 0, 0, 100,
    100, 0, 0, 0, 0,
]


@pytest.fixture
def states():
    return [Range(1, 3), Range(4, 6), Range(7, 9), Range(10, 11), Range(12, 13)]


@pytest.fixture
def markov(states):
    return Markov(transitions=list(CYCLE), states=states, current_state=4)


def test_get_value(markov, states):
    generator = DataGenerator(markov)
    for _ in range(10):
        assert states[4].in_range(generator.get_value())


def test_get_value_with_wrong_current_state(markov, states):
    markov.current_state = 3
    generator = DataGenerator(markov)
    assert not states[4].in_range(generator.get_value())


def test_get_value_with_out_of_bounds_state(markov):
    markov.current_state = 10
    generator = DataGenerator(markov)
    with pytest.raises(IndexError, match="out of bounds"):
        generator.get_value()


def test_negative_state_is_out_of_bounds(markov):
    markov.current_state = -1
    generator = DataGenerator(markov)
    with pytest.raises(IndexError):
        generator.get_value()


def test_next_state(markov, states):
    generator = DataGenerator(markov)
    generator.next_state()
    assert generator.markov.current_state == 0
    assert states[0].in_range(generator.get_value())


def test_next_but_same_state(markov, states):
    markov.transitions = [
        0, 100, 0, 0, 0,
        0, 0, 100, 0, 0,
        0, 0, 0, 100, 0,
        0, 0, 0, 0, 100,
        0, 0, 0, 0, 100,
    ]
    generator = DataGenerator(markov)
    generator.next_state()
    assert generator.markov.current_state == 4
    assert states[4].in_range(generator.get_value())


def test_full_cycle(markov):
    generator = DataGenerator(markov)
    visited = []
    for _ in range(5):
        generator.next_state()
        visited.append(generator.markov.current_state)
    assert visited == [0, 1, 2, 3, 4]


def test_generator_copies_chain(markov):
    generator = DataGenerator(markov)
    generator.next_state()
    assert markov.current_state == 4
    assert generator.markov.current_state == 0


def test_same_seed_same_values(markov):
    first = DataGenerator(markov)
    second = DataGenerator(markov)
    first.set_seed(42)
    second.set_seed(42)
    assert [first.get_value() for _ in range(5)] == [second.get_value() for _ in range(5)]


def test_default_markov():
    chain = Markov()
    assert len(chain.transitions) == 25
    assert len(chain.states) == 5
    assert chain.current_state == 0
    assert str(chain) == "Markov \n"