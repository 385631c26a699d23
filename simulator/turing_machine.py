from collections import namedtuple
from enum import Enum
from types import MappingProxyType


class Direction(Enum):
    LEFT = "L"
    RIGHT = "R"

    @property
    def offset(self):
        return 1 if self is Direction.RIGHT else -1

    @classmethod
    def parse(cls, token):
        if isinstance(token, cls):
            return token
        try:
            return cls(token)
        except ValueError:
            raise ValueError(f"Direction must be 'L' or 'R', got {token!r}.") from None


class StepResult(Enum):
    MOVED = "moved"
    STUCK = "stuck"


class Halt(Enum):
    ACCEPTED = "accepted"
    STUCK = "stuck"
    BUDGET_EXHAUSTED = "budget_exhausted"


Transition = namedtuple("Transition", ["next_state", "write_symbol", "direction"])
RunResult = namedtuple("RunResult", ["accepted", "steps_taken", "outcome"])
Snapshot = namedtuple("Snapshot", ["tape", "head_position", "current_state"])


class Tape:
    """Sparse two-way infinite tape. Only non-blank cells are stored."""

    def __init__(self, blank_symbol="_"):
        self.blank_symbol = blank_symbol
        self.cells = {}

    def __len__(self):
        return len(self.cells)

    def load(self, symbols):
        self.cells.clear()
        for position, symbol in enumerate(symbols):
            self.write(position, symbol)

    def read(self, position):
        return self.cells.get(position, self.blank_symbol)

    def write(self, position, symbol):
        if symbol == self.blank_symbol:
            self.cells.pop(position, None)
        else:
            self.cells[position] = symbol

    def bounds(self):
        """Return (min, max) occupied positions, or None for a blank tape."""
        if not self.cells:
            return None
        return min(self.cells), max(self.cells)

    def render(self):
        bounds = self.bounds()
        if bounds is None:
            return self.blank_symbol
        min_pos, max_pos = bounds
        return "".join(self.read(pos) for pos in range(min_pos, max_pos + 1))


def _parse_rules(transition_rules):
    table = {}
    for key, value in transition_rules.items():
        if isinstance(key, str):
            if "," not in key:
                raise ValueError(f"Rule key {key!r} must have the form 'state,symbol'.")
            state, symbol = key.split(",", 1)
        else:
            state, symbol = key
        if isinstance(value, str) or len(value) != 3:
            raise ValueError(f"Rule {key!r} must map to [next_state, write_symbol, direction], got {value!r}.")
        next_state, write_symbol, direction = value
        table[(state, symbol)] = Transition(next_state, write_symbol, Direction.parse(direction))
    return MappingProxyType(table)


class TuringMachine:
    def __init__(self, transition_rules, blank_symbol="_", initial_state="q0", final_states=()):
        self.transitions = _parse_rules(transition_rules)
        self.blank_symbol = blank_symbol
        self.initial_state = initial_state
        self.final_states = frozenset(final_states)
        self.tape = Tape(blank_symbol)
        self.head = 0
        self.current_state = initial_state

    def write_input(self, input_string):
        self.tape.load(input_string)
        self.head = 0
        self.current_state = self.initial_state

    load = write_input

    def reset(self):
        self.write_input("")

    def read_symbol(self):
        return self.tape.read(self.head)

    def write_symbol(self, symbol):
        self.tape.write(self.head, symbol)

    def move_head(self, direction):
        self.head += Direction.parse(direction).offset

    def is_accepting(self):
        return self.current_state in self.final_states

    def step(self):
        key = (self.current_state, self.read_symbol())
        transition = self.transitions.get(key)
        if transition is None:
            return StepResult.STUCK
        self.write_symbol(transition.write_symbol)
        self.move_head(transition.direction)
        self.current_state = transition.next_state
        return StepResult.MOVED

    def run(self, max_steps=1000):
        """
        Run until the machine accepts, gets stuck, or spends max_steps.
        Acceptance is checked before every step, so a machine already in a
        final state accepts in zero steps.
        """
        if max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {max_steps}.")
        steps = 0
        while steps < max_steps:
            if self.is_accepting():
                return RunResult(True, steps, Halt.ACCEPTED)
            if self.step() is StepResult.STUCK:
                return RunResult(False, steps, Halt.STUCK)
            steps += 1
        if self.is_accepting():
            return RunResult(True, steps, Halt.ACCEPTED)
        return RunResult(False, steps, Halt.BUDGET_EXHAUSTED)

    def get_tape_contents(self):
        return self.tape.render()

    def snapshot(self):
        return Snapshot(self.tape.render(), self.head, self.current_state)

    def to_rules(self):
        """Transition table in 'state,symbol' -> [next, write, dir] form for JSON output."""
        return {
            f"{state},{symbol}": [t.next_state, t.write_symbol, t.direction.value]
            for (state, symbol), t in self.transitions.items()
        }

    def states(self):
        found = {self.initial_state, *self.final_states}
        for (state, _), transition in self.transitions.items():
            found.add(state)
            found.add(transition.next_state)
        return sorted(found, key=str)

    def symbols(self):
        found = {self.blank_symbol}
        for (_, symbol), transition in self.transitions.items():
            found.add(symbol)
            found.add(transition.write_symbol)
        return sorted(found, key=str)

    def visualize(self, window=3):
        """Display a small window around the head."""
        bounds = self.tape.bounds()
        if bounds is None:
            tape_range = range(self.head - window, self.head + window + 1)
        else:
            min_pos = min(bounds[0], self.head) - window
            max_pos = max(bounds[1], self.head) + window
            tape_range = range(min_pos, max_pos + 1)

        tape_str = ""
        head_str = ""
        for pos in tape_range:
            symbol = self.tape.read(pos)
            tape_str += f"{symbol} "
            head_str += "^ " if pos == self.head else "  "
        print(tape_str.rstrip())
        print(head_str.rstrip())
        print(f"State: {self.current_state}, Accepting: {self.is_accepting()}")
