# Unless explicitly stated otherwise all files in this repository are licensed
# under the Apache License Version 2.0.

from typing import NamedTuple, Tuple
from unittest.mock import ANY

from statscollector.stats_collector import StatsCollector

__all__ = [
    "ANY",
    "Call",
    "Expectation",
    "MockCollector",
    "UnexpectedCallError",
    "new_mock_collector",
]


class UnexpectedCallError(AssertionError):
    """Raised when a MockCollector call matches no registered expectation."""


class Call(NamedTuple):
    method: str
    args: Tuple = ()


class Expectation:
    """A canned response for calls to one method with matching arguments.

    Built with `MockCollector.on` and configured by chaining, e.g.
    `collector.on("close").raises(RuntimeError("boom")).once()`.
    """

    def __init__(self, method, args):
        self.method = method
        self.args = tuple(args)
        self.return_value = None
        self.side_effect = None
        self.repeatability = None
        self.call_count = 0

    def returns(self, value):
        self.return_value = value
        return self

    def raises(self, exc):
        def _raise(*args):
            raise exc

        self.side_effect = _raise
        return self

    def run(self, fn):
        """Call fn with the call arguments before returning."""
        self.side_effect = fn
        return self

    def times(self, n):
        self.repeatability = n
        return self

    def once(self):
        return self.times(1)

    def matches(self, method, args):
        if method != self.method or len(args) != len(self.args):
            return False
        if self.repeatability is not None and self.call_count >= self.repeatability:
            return False
        return all(expected == actual for expected, actual in zip(self.args, args))

    def satisfied(self):
        return self.repeatability is None or self.call_count >= self.repeatability

    def __call__(self, *args):
        self.call_count += 1
        if self.side_effect is not None:
            self.side_effect(*args)
        return self.return_value

    def __repr__(self):
        return "Expectation(%s%r, calls=%d)" % (
            self.method,
            self.args,
            self.call_count,
        )


class MockCollector(StatsCollector):
    """
    Stands in for a real collector in tests. Nothing is written anywhere;
    every call is appended to `calls` with its arguments, in order.

    `store_point` and `close` are expected with any arguments from the
    start, so code under test can use the collector without further setup.
    """

    def __init__(self):
        self.calls = []
        self.expectations = []
        self.on("store_point", ANY, ANY, ANY, ANY)
        self.on("close")

    def on(self, method, *args):
        """Register an expectation. Later expectations win over earlier ones."""
        expectation = Expectation(method, args)
        self.expectations.append(expectation)
        return expectation

    def clear_expectations(self):
        self.expectations = []

    def _called(self, method, *args):
        self.calls.append(Call(method, args))
        for expectation in reversed(self.expectations):
            if expectation.matches(method, args):
                return expectation(*args)
        raise UnexpectedCallError(
            "Unexpected call %s%r; expectations: %r"
            % (method, args, self.expectations)
        )

    def store_point(self, namespace, tags, fields, timestamp):
        return self._called("store_point", namespace, tags, fields, timestamp)

    def close(self):
        return self._called("close")

    def calls_for(self, method):
        return [c for c in self.calls if c.method == method]

    def assert_called_with(self, method, *args):
        if Call(method, args) not in self.calls:
            raise AssertionError(
                "Expected call %s%r not found in %r" % (method, args, self.calls)
            )

    def assert_number_of_calls(self, method, n):
        actual = len(self.calls_for(method))
        if actual != n:
            raise AssertionError(
                "Expected %s to be called %d times, called %d times"
                % (method, n, actual)
            )

    def assert_not_called(self, method):
        self.assert_number_of_calls(method, 0)

    def assert_expectations(self):
        unmet = [e for e in self.expectations if not e.satisfied()]
        if unmet:
            raise AssertionError("Unmet expectations: %r" % (unmet,))


def new_mock_collector():
    return MockCollector()
