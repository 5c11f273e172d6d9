# ml/utils.py
from collections.abc import Mapping
from pathlib import Path
from typing import NamedTuple

import numpy as np

from ml.errors import InvalidArgument


class Example(NamedTuple):
    """One labeled row of a training or test set; unpacks as (x, y)."""
    input: np.ndarray
    output: int


def as_example(row):
    if isinstance(row, Example):
        return row
    if isinstance(row, Mapping):
        try:
            x, y = row["input"], row["output"]
        except KeyError as e:
            raise InvalidArgument(f"Example mapping is missing key {e}") from e
    else:
        try:
            x, y = row
        except (TypeError, ValueError) as e:
            raise InvalidArgument(f"Cannot read example from {row!r}") from e
    return Example(np.asarray(x, dtype=float), y)


def as_examples(rows):
    """Normalize Examples, (x, y) pairs or {'input', 'output'} mappings."""
    return [as_example(row) for row in rows]


def dimensions_of(examples):
    if len(examples) == 0:
        return 0
    return len(as_example(examples[0]).input)


def parse_custom_points(txt):
    """
    Parse lines of x1,...,xn,y into examples.
    Blank lines and lines starting with '#' are skipped; every row must have
    the same number of columns and y must be 0 or 1.
    """
    pts = []
    width = None
    for lineno, ln in enumerate(txt.splitlines(), start=1):
        ln = ln.strip()
        if not ln or ln.startswith('#'):
            continue
        parts = [p.strip() for p in ln.split(',')]
        if len(parts) < 2:
            raise InvalidArgument(f"line {lineno}: expected x1,...,xn,y, got {ln!r}")
        if width is None:
            width = len(parts)
        elif len(parts) != width:
            raise InvalidArgument(f"line {lineno}: expected {width} columns, got {len(parts)}")
        try:
            values = [float(p) for p in parts]
        except ValueError as e:
            raise InvalidArgument(f"line {lineno}: {e}") from e
        y = values[-1]
        if y not in (0.0, 1.0):
            raise InvalidArgument(f"line {lineno}: label must be 0 or 1, got {parts[-1]!r}")
        pts.append(Example(np.array(values[:-1]), int(y)))
    return pts


def load_training_set(path):
    path = Path(path)
    if not path.is_file():
        raise InvalidArgument(f"Training set file not found: {path}")
    return parse_custom_points(path.read_text())
