"""Levenshtein edit distance and edit operations between two strings.

The distance is read off a matrix filled according to the Wagner-Fischer
algorithm. A minimal list of edit operations is recovered by walking back
through the same matrix from the bottom-right cell to the top-left one.
"""


import logging


from dataclasses import dataclass
from enum import Enum
from typing import List, NamedTuple, Optional, Sequence, Tuple


INSERT_COST = 1
REMOVE_COST = 1
SWAP_COST = 1


class Op(Enum):
    INSERT = 'insert'
    REMOVE = 'remove'
    KEEP = 'keep'
    SWAP = 'swap'

    def __str__(self) -> str:
        return self.value


class Operation(NamedTuple):
    """One step of turning the source string into the target string.

    index is the position of char in the intermediate result at the time the
    operation is applied, and result is that intermediate result after
    applying it.
    """
    type: Op
    char: str
    index: int
    result: str

    def __str__(self) -> str:
        return f'{self.type!s:>6} {self.char} at index {self.index}: {self.result}'


class InvalidCostConfig(ValueError):
    pass


@dataclass(frozen=True)
class Costs:
    insert: int = INSERT_COST
    remove: int = REMOVE_COST
    swap: int = SWAP_COST

    def __post_init__(self):
        for name in ('insert', 'remove', 'swap'):
            cost = getattr(self, name)
            if isinstance(cost, bool) or not isinstance(cost, int) or cost < 0:
                raise InvalidCostConfig(
                    f'{name} cost must be a non-negative integer, got {cost!r}')


Row = Tuple[int, ...]
Step = Tuple[Op, str, int]


class Matrix:
    """Edit matrix for a source and a target string.

    Cell (i, j) holds the minimum cost of turning the first i characters of
    the source into the first j characters of the target. The table is
    filled once on construction and read-only afterwards.
    """

    def __init__(self, source: str, target: str, costs: Optional[Costs]=None):
        self.source = source
        self.target = target
        self.costs = Costs() if costs is None else costs
        self.rows = fill(source, target, self.costs)
        logging.debug('Built %dx%d matrix for %r -> %r, distance %d',
                len(self.rows), len(self.rows[0]), source, target,
                self.distance())

    def cell(self, i: int, j: int) -> int:
        return self.rows[i][j]

    def distance(self) -> int:
        return self.rows[-1][-1]

    def operations(self) -> List[Operation]:
        return backtrace(self)

    def __repr__(self) -> str:
        return f'Matrix({self.source!r}, {self.target!r}, {self.costs!r})'


def fill(source: str, target: str, costs: Costs) -> Tuple[Row, ...]:
    height = len(source) + 1
    width = len(target) + 1
    result = [[0 for j in range(width)] for i in range(height)]
    for i in range(height):
        result[i][0] = i * costs.remove
    for j in range(width):
        result[0][j] = j * costs.insert
    # Left, upper and upper-left neighbours are final before each cell
    for i in range(1, height):
        for j in range(1, width):
            ins_cost = result[i][j - 1] + costs.insert
            rem_cost = result[i - 1][j] + costs.remove
            keep_swap_cost = result[i - 1][j - 1]
            if source[i - 1] != target[j - 1]:
                keep_swap_cost += costs.swap
            result[i][j] = min((ins_cost, rem_cost, keep_swap_cost))
    return tuple(tuple(row) for row in result)


def build(source: str, target: str, costs: Optional[Costs]=None) -> Matrix:
    return Matrix(source, target, costs)


def distance(source: str, target: str, costs: Optional[Costs]=None) -> int:
    return build(source, target, costs).distance()


def operations(source: str, target: str, costs: Optional[Costs]=None) -> List[Operation]:
    return build(source, target, costs).operations()


def backtrace(matrix: Matrix) -> List[Operation]:
    """Returns a minimal list of operations, earliest first.

    Ties between equally cheap paths are broken by trying insert, remove,
    keep and swap in that order.
    """
    steps = walk(matrix)
    steps.reverse()
    ops: List[Operation] = []
    prev = matrix.source
    for op, char, index in steps:
        if op == Op.INSERT:
            result = prev[:index] + char + prev[index:]
        elif op == Op.REMOVE:
            result = prev[:index] + prev[index + 1:]
        elif op == Op.SWAP:
            result = prev[:index] + char + prev[index + 1:]
        else:
            result = prev
        ops.append(Operation(op, char, index, result))
        logging.debug('%s', ops[-1])
        prev = result
    assert prev == matrix.target
    return ops


def walk(matrix: Matrix) -> List[Step]:
    """Returns the steps from the bottom-right cell to (0, 0), latest first."""
    source, target, costs = matrix.source, matrix.target, matrix.costs
    cell = matrix.cell
    steps: List[Step] = []
    i = len(source)
    j = len(target)
    while i > 0 or j > 0:
        here = cell(i, j)
        if j > 0 and cell(i, j - 1) + costs.insert == here:
            steps.append((Op.INSERT, target[j - 1], j - 1))
            j -= 1
        elif i > 0 and cell(i - 1, j) + costs.remove == here:
            # Removed character sits right after the j already built ones
            steps.append((Op.REMOVE, source[i - 1], j))
            i -= 1
        elif i > 0 and j > 0 and source[i - 1] == target[j - 1] \
                and cell(i - 1, j - 1) == here:
            steps.append((Op.KEEP, target[j - 1], j - 1))
            i -= 1
            j -= 1
        else:
            assert i > 0 and j > 0
            assert cell(i - 1, j - 1) + costs.swap == here
            steps.append((Op.SWAP, target[j - 1], j - 1))
            i -= 1
            j -= 1
    return steps


def pp_matrix(matrix: Matrix) -> str:
    """Pretty-print a matrix
    """
    header = ('', '') + tuple(matrix.target)
    lines = [header]
    for i, row in enumerate(matrix.rows):
        label = matrix.source[i - 1] if i > 0 else ''
        lines.append((label,) + tuple(str(c) for c in row))
    width = max(len(c) for line in lines for c in line)
    return '\n'.join(
        ' '.join(c.rjust(width) for c in line).rstrip()
        for line in lines
    )


def replay(source: str, ops: Sequence[Operation]) -> str:
    """Applies ops to source and returns the final string.

    Unlike reading off the last result, this recomputes every step from the
    type, char and index fields alone.
    """
    current = source
    for op in ops:
        if op.type == Op.INSERT:
            current = current[:op.index] + op.char + current[op.index:]
        elif op.type == Op.REMOVE:
            assert current[op.index] == op.char
            current = current[:op.index] + current[op.index + 1:]
        elif op.type == Op.SWAP:
            current = current[:op.index] + op.char + current[op.index + 1:]
        else:
            assert current[op.index] == op.char
    return current
