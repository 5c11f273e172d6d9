# ml/datasets.py
import itertools

import numpy as np

from ml.errors import InvalidArgument
from ml.utils import Example

# gate predicates over a tuple of 0/1 inputs
GATES = {
    'AND': lambda bits: all(bits),
    'OR': lambda bits: any(bits),
    # exactly one input set; equals the usual XOR for two inputs
    'XOR': lambda bits: sum(bits) == 1,
}


def input_vectors(inputs=4):
    """All 2**inputs binary vectors, from 0...0 up to 1...1."""
    if inputs <= 0:
        raise InvalidArgument(f"inputs must be positive, got {inputs!r}")
    return [np.array(bits, dtype=float) for bits in itertools.product((0, 1), repeat=int(inputs))]


def truth_table(gate, inputs=4):
    try:
        fn = GATES[gate.upper()]
    except KeyError:
        raise InvalidArgument(f"Unknown gate {gate!r}, expected one of {sorted(GATES)}") from None
    return [Example(x, int(fn(tuple(int(b) for b in x)))) for x in input_vectors(inputs)]


AND_TRAINING_SET = truth_table('AND')
OR_TRAINING_SET = truth_table('OR')
XOR_TRAINING_SET = truth_table('XOR')
