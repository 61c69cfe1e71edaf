from decimal import Decimal
from enum import Enum, unique

from pydantic import BaseModel, ConfigDict, Field, computed_field


@unique
class SkuCategory(Enum):
    CLOTHING = (10, 'Clothing')
    ELECTRONICS = (20, 'Electronics')
    SPORTS = (30, 'Sports')
    BOOKS = (40, 'Books')

    def __init__(self, code: int, label: str):
        self.code = code
        self.label = label

    @classmethod
    def from_code(cls, code: int) -> 'SkuCategory':
        for category in cls:
            if category.code == code:
                return category
        raise ValueError(f'Unknown SKU category code: {code}')

    def __str__(self):
        return self.label


class Sku(BaseModel):
    """
    A product line in a shopping cart

    The total price is always derived from the unit price and the quantity.
    """
    model_config = ConfigDict(frozen=True)

    sku_id: int
    sku_name: str
    sku_price: Decimal = Field(ge=0)
    total_num: int = Field(ge=0)
    sku_category: SkuCategory

    @computed_field
    @property
    def total_price(self) -> Decimal:
        return self.sku_price * self.total_num

    def __repr__(self):
        return f'Sku({self.sku_id}, {self.sku_name!r}, {self.sku_category.name}, {self.sku_price} x {self.total_num})'
