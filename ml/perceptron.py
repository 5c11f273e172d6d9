# ml/perceptron.py
import logging
import numbers

import numpy as np

from ml.errors import DimensionMismatch, InvalidArgument
from ml.utils import as_examples

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 200


class Perceptron:
    """
    Single-layer binary perceptron with a fixed output threshold.
    - dimensions : number of inputs (length of the weight vector)
    - learning_rate : step size of the weight correction
    - threshold : output is 1 when the weighted sum is strictly above it
    Weights start at zero and are the only state changed by learn(...).
    """
    def __init__(self, dimensions, learning_rate, threshold):
        if isinstance(dimensions, bool) or not isinstance(dimensions, numbers.Integral) or dimensions <= 0:
            raise InvalidArgument(f"dimensions must be a positive integer, got {dimensions!r}")
        # also rejects NaN
        if not learning_rate > 0:
            raise InvalidArgument(f"learning_rate must be positive, got {learning_rate!r}")
        self.w = np.zeros(int(dimensions))
        self.learning_rate = float(learning_rate)
        self.threshold = float(threshold)
        self.history = []

    @property
    def dimensions(self):
        return len(self.w)

    @property
    def weights(self):
        return self.w.copy()

    def _check_input(self, x):
        x = np.asarray(x, dtype=float)
        if x.ndim != 1 or len(x) != len(self.w):
            raise DimensionMismatch(len(self.w), x.size if x.ndim != 1 else len(x))
        return x

    def net(self, x):
        x = self._check_input(x)
        return float(np.dot(x, self.w))

    def output(self, x):
        return 1 if self.net(x) > self.threshold else 0

    def test(self, examples):
        """Return the number of examples whose output differs from the desired one."""
        errors = 0
        for x, y in as_examples(examples):
            if self.output(x) != y:
                errors += 1
        return errors

    def converged(self, examples):
        return self.test(examples) == 0

    def learn_one_pass(self, examples):
        # each correction uses the weights as they stand when the example is reached
        for x, y in as_examples(examples):
            x = self._check_input(x)
            actual = self.output(x)
            self.w = self.w + self.learning_rate * (y - actual) * x

    def learn(self, examples, limit=DEFAULT_LIMIT, callback=None):
        """
        Train until every example is classified correctly or `limit` passes ran.
        examples: sequence of Example / (x, y) pairs / {'input': x, 'output': y}
        callback: function(iteration, errors) - called after each pass
        Progress of every pass is also kept in self.history as (iteration, errors).
        """
        if isinstance(limit, bool) or not isinstance(limit, numbers.Integral) or limit < 0:
            raise InvalidArgument(f"limit must be a non-negative integer, got {limit!r}")
        examples = as_examples(examples)
        for x, y in examples:
            self._check_input(x)
            if y not in (0, 1):
                raise InvalidArgument(f"labels must be 0 or 1, got {y!r}",
                                      details={"input": x.tolist()})

        self.history = []
        count = 0
        errors = self.test(examples)
        while errors != 0 and count < limit:
            self.learn_one_pass(examples)
            count += 1
            errors = self.test(examples)
            self.history.append((count, errors))
            logger.info("training iteration # %d, errors found: %d", count, errors)
            if callback is not None:
                callback(count, errors)

        if errors == 0:
            logger.info("converged after %d iteration(s), weights=%s", count, self.w.tolist())
        else:
            logger.info("iteration limit %d reached with %d error(s)", limit, errors)
