from typing import Dict, List, Tuple

from rainbow.cart.models import Sku, SkuCategory
from rainbow.common.simple_stream import SimpleStream
from rainbow.demos.base import BaseDemo, demonstration

SAMPLE_NAMES = ('abc', 'lili', 'wangwu', '李四', '张三')


def starts_with_latin_letter(name: str) -> bool:
    code = ord(name[0])
    return (65 <= code <= 90) or (97 <= code <= 122)


class StreamCollectorDemo(BaseDemo):
    """ Common collectors """
    group_name = 'collector'
    description = 'Collect the sample cart into lists and maps'

    @demonstration
    def to_list(self) -> List[Sku]:
        result = self._stream() \
            .filter(lambda sku: sku.total_price > 1000) \
            .to_list()
        self._print_json(result, pretty=True)
        return result

    @demonstration
    def group(self) -> Dict[SkuCategory, List[Sku]]:
        result = self._stream().group_by(lambda sku: sku.sku_category)
        self._print_json(result, pretty=True)
        return result

    @demonstration
    def partition(self) -> Tuple[Dict[bool, List[Sku]], Dict[bool, List[str]]]:
        # Whether the total price is over 1000
        partition = self._stream().partition_by(lambda sku: sku.total_price > 1000)
        self._print_json(partition, pretty=True)

        names = SimpleStream.of(*SAMPLE_NAMES).partition_by(starts_with_latin_letter)
        for is_latin_name, grouped_names in names.items():
            self._print('Latin names:' if is_latin_name else 'Other names:')
            for name in grouped_names:
                self._print(f'\t{name}')

        return partition, names
