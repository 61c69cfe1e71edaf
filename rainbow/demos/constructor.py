from typing import Any, List, Optional, Tuple

from rainbow.common import randoms
from rainbow.common.simple_stream import SimpleStream
from rainbow.demos.base import BaseDemo, demonstration


class StreamConstructorDemo(BaseDemo):
    """ Ways to build a stream """
    group_name = 'constructor'
    description = 'Build streams from values, arrays, files and functions'

    @demonstration
    def from_value(self) -> List[Any]:
        """ A stream of arbitrary values """
        return self._collect(SimpleStream.of(1, 2, 3, 'a', 'b'))

    @demonstration
    def from_array(self) -> List[int]:
        numbers = [1, 2, 3, 4, 5]
        return self._collect(SimpleStream.from_iterable(numbers))

    @demonstration
    def from_file(self, path: Optional[str] = None) -> List[str]:
        """ A stream of the lines of a text file, by default this very module """
        return self._collect(SimpleStream.lines(path or __file__))

    @demonstration
    def from_function(self) -> Tuple[List[float], List[int]]:
        """ Infinite streams from generator functions, bounded by "limit" """
        rng = randoms.current()

        doubles = self._collect(SimpleStream.generate(rng.random).limit(10))
        ints = self._collect(SimpleStream(randoms.ints(0, 100, rng)).limit(10))

        return doubles, ints

    def _collect(self, stream: SimpleStream) -> List[Any]:
        return stream.peek(self._print).to_list()
