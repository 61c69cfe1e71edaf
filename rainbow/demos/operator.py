from decimal import Decimal
from typing import List, Optional

from rainbow.cart.models import Sku, SkuCategory
from rainbow.common import randoms
from rainbow.common.simple_stream import SimpleStream
from rainbow.demos.base import BaseDemo, demonstration


def by_total_price(sku: Sku) -> Decimal:
    return sku.total_price


class StreamOperatorDemo(BaseDemo):
    """
    Intermediate and terminal operations

    Stateless intermediate operations (filter, map, flat_map, peek) handle each item as it flows through the stream.
    Stateful ones (distinct, sorted, skip, limit) need to see the earlier items, and "sorted" needs all of them.

    Short-circuiting terminal operations (any/all/none match, find first/any) stop pulling items as soon as the
    answer is known. The "peek" calls in those demonstrations show how many items were actually pulled.
    """
    group_name = 'operator'
    description = 'Intermediate and terminal operations on the sample cart'

    @demonstration
    def filter(self) -> List[Sku]:
        """ Keep the books only """
        return self._stream() \
            .filter(lambda sku: sku.sku_category == SkuCategory.BOOKS) \
            .peek(self._print_json) \
            .to_list()

    @demonstration
    def map(self) -> List[str]:
        return self._stream() \
            .map(lambda sku: sku.sku_name) \
            .peek(self._print_json) \
            .to_list()

    @demonstration
    def flat_map(self) -> List[str]:
        """ Turn every name into a stream of its characters """
        return self._stream() \
            .flat_map(lambda sku: list(sku.sku_name)) \
            .peek(self._print_json) \
            .to_list()

    @demonstration
    def peek(self) -> List[Sku]:
        """ Observe the items without consuming them """
        return self._stream() \
            .peek(lambda sku: self._print(sku.sku_name)) \
            .peek(self._print_json) \
            .to_list()

    @demonstration
    def distinct(self) -> List[SkuCategory]:
        return self._stream() \
            .map(lambda sku: sku.sku_category) \
            .distinct() \
            .peek(self._print_json) \
            .to_list()

    @demonstration
    def sorted(self) -> List[Sku]:
        """ Sort by the total price, most expensive first """
        return self._sorted_by_total_price() \
            .peek(self._print_json) \
            .to_list()

    @demonstration
    def skip(self) -> List[Sku]:
        return self._sorted_by_total_price() \
            .skip(3) \
            .peek(lambda sku: self._print_json(sku, pretty=True)) \
            .to_list()

    @demonstration
    def limit(self) -> List[Sku]:
        """ Combined with "skip", this is pagination """
        return self._sorted_by_total_price() \
            .limit(3) \
            .peek(lambda sku: self._print_json(sku, pretty=True)) \
            .to_list()

    @demonstration
    def all_match(self) -> bool:
        match = self._stream() \
            .peek(self._print_json) \
            .all_match(lambda sku: sku.total_price > 100)
        self._print(match)
        return match

    @demonstration
    def any_match(self) -> bool:
        match = self._stream() \
            .peek(self._print_json) \
            .any_match(lambda sku: sku.total_price < 2000)
        self._print(match)
        return match

    @demonstration
    def none_match(self) -> bool:
        match = self._stream() \
            .peek(self._print_json) \
            .none_match(lambda sku: sku.total_price > 3_000)
        self._print(match)
        return match

    @demonstration
    def find_first(self) -> Optional[Sku]:
        found = self._stream() \
            .peek(self._print_json) \
            .find_first()
        self._print_json(found, pretty=True)
        return found

    @demonstration
    def find_any(self) -> Optional[Sku]:
        found = self._stream() \
            .peek(self._print_json) \
            .find_any()
        self._print_json(found, pretty=True)
        return found

    @demonstration
    def max(self) -> Optional[Decimal]:
        result = self._stream().map(by_total_price).max()
        self._print(result)
        return result

    @demonstration
    def min(self) -> Optional[Decimal]:
        result = self._stream().map(by_total_price).min()
        self._print(result)
        return result

    @demonstration
    def count(self) -> int:
        result = self._stream().count()
        self._print(result)
        return result

    @demonstration
    def random_ints(self) -> List[int]:
        """ Random numbers from the random number generator of the current thread """
        return SimpleStream(randoms.ints(0, 100)) \
            .limit(10) \
            .peek(self._print) \
            .to_list()

    @demonstration
    def verify_code(self, length: int = 5) -> str:
        code = randoms.verify_code(length)
        self._print(code)
        return code

    def _sorted_by_total_price(self) -> SimpleStream:
        return self._stream().sorted(by_total_price, reverse=True)
