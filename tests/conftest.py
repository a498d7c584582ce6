import pytest


class CountingSource:
    """Iterator over a list that records how many pulls it served."""

    def __init__(self, items):
        self._items = list(items)
        self._position = 0
        self.pulls = 0

    def __iter__(self):
        return self

    def __next__(self):
        self.pulls += 1
        if self._position >= len(self._items):
            raise StopIteration
        value = self._items[self._position]
        self._position += 1
        return value


@pytest.fixture
def counting_source():
    return CountingSource
