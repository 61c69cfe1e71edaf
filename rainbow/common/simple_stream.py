from dataclasses import dataclass
from itertools import islice

from typing import TypeVar, Iterable, Callable, List, Dict, Any, Optional, Iterator

from rainbow.common.logger import get_logger

T = TypeVar('T')
X = TypeVar('X')
Y = TypeVar('Y')
Z = TypeVar('Z')

_logger = get_logger('SimpleStream')


class StreamConsumedError(RuntimeError):
    def __init__(self):
        super().__init__('The stream has already been consumed. Please create a new stream.')


class SimpleStream:
    """ Single-use lazy stream

        Intermediate operations are only recorded. Nothing is pulled from the source until a terminal operation
        (e.g., "to_list", "find_first", "count") is invoked, and a stream can only be consumed once.
    """
    def __init__(self, source: Iterable[T]):
        self._source = source
        self._operations: List[Operation] = []
        self._consumed = False

    @classmethod
    def of(cls, *values: T) -> 'SimpleStream':
        return cls(values)

    @classmethod
    def from_iterable(cls, iterable: Iterable[T]) -> 'SimpleStream':
        return cls(iterable)

    @classmethod
    def lines(cls, path: str, encoding: str = 'utf-8') -> 'SimpleStream':
        """ Create a stream of the lines of a text file (without line breaks)

            The file is opened when the stream is consumed. IO errors, like a missing file, propagate from the
            terminal operation.
        """
        def read_lines():
            with open(path, 'r', encoding=encoding) as f:
                for line in f:
                    yield line.rstrip('\r\n')

        return cls(read_lines())

    @classmethod
    def generate(cls, supplier: Callable[[], T]) -> 'SimpleStream':
        """ Create an infinite stream. Use "limit" or a short-circuiting operation to stop it. """
        def supply():
            while True:
                yield supplier()

        return cls(supply())

    @classmethod
    def iterate(cls, seed: T, executable: Callable[[T], T]) -> 'SimpleStream':
        def iterate():
            value = seed
            while True:
                yield value
                value = executable(value)

        return cls(iterate())

    def peek(self, executable: Callable[[X], None]):
        return self._add('peek', executable)

    def filter(self, executable: Callable[[X], bool]):
        return self._add('filter', executable)

    def map(self, executable: Callable[[X], Y]):
        return self._add('map', executable)

    def flat_map(self, executable: Callable[[X], Iterable[Y]]):
        return self._add('flat_map', executable)

    def distinct(self):
        return self._add('distinct')

    def sorted(self, key: Optional[Callable[[X], Any]] = None, reverse: bool = False):
        return self._add('sorted', key, reverse=reverse)

    def skip(self, count: int):
        if count < 0:
            raise ValueError(f'The number of skipped items must not be negative ({count} given).')
        return self._add('skip', size=count)

    def limit(self, count: int):
        if count < 0:
            raise ValueError(f'The maximum number of items must not be negative ({count} given).')
        return self._add('limit', size=count)

    def run(self):
        for __ in self._run():
            pass  # Drain the stream for the side effects only.

    def to_iter(self) -> Iterator[Any]:
        return self._run()

    def to_list(self) -> List[Any]:
        return [item for item in self._run()]

    def to_map(self, key_mapper: Callable[[X], Y], value_mapper: Callable[[X], Z]) -> Dict[Y, Z]:
        result: Dict[Y, Z] = dict()

        for item in self._run():
            result[key_mapper(item)] = value_mapper(item)

        return result

    def group_by(self, classifier: Callable[[X], Y]) -> Dict[Y, List[X]]:
        result: Dict[Y, List[X]] = dict()

        for item in self._run():
            key = classifier(item)
            if key not in result:
                result[key] = list()
            result[key].append(item)

        return result

    def partition_by(self, predicate: Callable[[X], bool]) -> Dict[bool, List[X]]:
        result: Dict[bool, List[X]] = {False: list(), True: list()}

        for item in self._run():
            result[bool(predicate(item))].append(item)

        return result

    def find_first(self) -> Any:
        for item in self._run():
            return item
        return None

    def find_any(self) -> Any:
        # Sequential streams always yield the first item.
        return self.find_first()

    def any_match(self, predicate: Callable[[X], bool]) -> bool:
        for item in self._run():
            if predicate(item):
                return True
        return False

    def all_match(self, predicate: Callable[[X], bool]) -> bool:
        for item in self._run():
            if not predicate(item):
                return False
        return True

    def none_match(self, predicate: Callable[[X], bool]) -> bool:
        for item in self._run():
            if predicate(item):
                return False
        return True

    def max(self, key: Optional[Callable[[X], Any]] = None) -> Any:
        return self._find_extreme(key, lambda candidate, current: candidate > current)

    def min(self, key: Optional[Callable[[X], Any]] = None) -> Any:
        return self._find_extreme(key, lambda candidate, current: candidate < current)

    def count(self) -> int:
        total = 0
        for __ in self._run():
            total += 1
        return total

    def for_each(self, executable: Callable[[X], None]):
        for item in self._run():
            executable(item)

    def _add(self, op: str, executable: Optional[Callable] = None, **options):
        if self._consumed:
            raise StreamConsumedError()
        self._operations.append(Operation(op=op, executable=executable, options=options))
        return self

    def _find_extreme(self, key: Optional[Callable[[X], Any]], is_better: Callable[[Any, Any], bool]) -> Any:
        found = False
        result = None
        result_key = None

        for item in self._run():
            item_key = key(item) if key else item
            # Only a strictly better item replaces the current one so that the first one wins on ties.
            if not found or is_better(item_key, result_key):
                found = True
                result = item
                result_key = item_key

        return result

    def _run(self) -> Iterator[Any]:
        if self._consumed:
            raise StreamConsumedError()

        self._consumed = True

        _logger.debug(f'Running the stream with {[o.op for o in self._operations]}')

        items: Iterable[Any] = self._source
        for operation in self._operations:
            items = operation.apply(items)

        return iter(items)


@dataclass(frozen=True)
class Operation:
    op: str
    executable: Optional[Callable] = None
    options: Optional[Dict[str, Any]] = None

    def apply(self, items: Iterable[Any]) -> Iterable[Any]:
        options = self.options or dict()

        if self.op == 'peek':
            return self._peek(items)
        elif self.op == 'filter':
            return (item for item in items if self.executable(item))
        elif self.op == 'map':
            return (self.executable(item) for item in items)
        elif self.op == 'flat_map':
            return (sub_item for item in items for sub_item in self.executable(item))
        elif self.op == 'distinct':
            return self._distinct(items)
        elif self.op == 'sorted':
            return self._sort(items, options.get('reverse', False))
        elif self.op == 'skip':
            return islice(items, options['size'], None)
        elif self.op == 'limit':
            return islice(items, options['size'])
        else:
            raise RuntimeError(f'Unknown stream operation: {self.op}')

    def _peek(self, items: Iterable[Any]) -> Iterator[Any]:
        for item in items:
            self.executable(item)
            yield item

    @staticmethod
    def _distinct(items: Iterable[Any]) -> Iterator[Any]:
        seen = []
        seen_hashable = set()

        for item in items:
            try:
                if item in seen_hashable:
                    continue
                seen_hashable.add(item)
            except TypeError:
                # Unhashable items fall back to the equality check.
                if item in seen:
                    continue
                seen.append(item)
            yield item

    def _sort(self, items: Iterable[Any], reverse: bool) -> Iterator[Any]:
        # The sort is deferred until the first item is requested.
        for item in sorted(items, key=self.executable, reverse=reverse):
            yield item
