from decimal import Decimal
from typing import List, Union

from imagination.decorator import service

from rainbow.cart.models import Sku, SkuCategory


@service.registered()
class CartService:
    """ Sample catalog provider

        Every call builds a new list of new items so that no demonstration can observe the changes of another one.
    """

    @staticmethod
    def make_sku(sku_id: int,
                 sku_name: str,
                 sku_price: Union[Decimal, int, str],
                 total_num: int,
                 sku_category: SkuCategory) -> Sku:
        return Sku(sku_id=sku_id,
                   sku_name=sku_name,
                   sku_price=Decimal(str(sku_price)),
                   total_num=total_num,
                   sku_category=sku_category)

    @classmethod
    def get_cart_sku_list(cls) -> List[Sku]:
        return [
            cls.make_sku(654032, 'Drone', '4999.00', 1, SkuCategory.ELECTRONICS),
            cls.make_sku(642934, 'VR Headset', '2299.00', 1, SkuCategory.ELECTRONICS),
            cls.make_sku(645321, 'Plain Shirt', '409.00', 3, SkuCategory.CLOTHING),
            cls.make_sku(654327, 'Jeans', '528.00', 1, SkuCategory.CLOTHING),
            cls.make_sku(675489, 'Treadmill', '2699.00', 1, SkuCategory.SPORTS),
            cls.make_sku(644564, 'Thinking in Java', '79.80', 1, SkuCategory.BOOKS),
            cls.make_sku(678678, 'Core Java', '149.00', 1, SkuCategory.BOOKS),
            cls.make_sku(697894, 'Algorithms', '78.20', 1, SkuCategory.BOOKS),
            cls.make_sku(696968, 'TensorFlow Guide', '85.10', 1, SkuCategory.BOOKS),
        ]

    @classmethod
    def get_sample_items(cls) -> List[Sku]:
        return cls.get_cart_sku_list()
