from decimal import Decimal
from unittest import TestCase

from imagination import container
from pydantic import ValidationError

from rainbow.cart.models import Sku, SkuCategory
from rainbow.cart.service import CartService
from rainbow.common.simple_stream import SimpleStream


class TestSkuCategory(TestCase):
    def test_codes_and_labels(self):
        self.assertEqual([10, 20, 30, 40], [category.code for category in SkuCategory])
        self.assertEqual('Books', SkuCategory.BOOKS.label)
        self.assertIs(SkuCategory.SPORTS, SkuCategory.from_code(30))

        with self.assertRaises(ValueError):
            SkuCategory.from_code(99)


class TestSku(TestCase):
    def test_total_price_is_derived(self):
        sku = CartService.make_sku(1, 'tshirt', 50, 2, SkuCategory.CLOTHING)

        self.assertEqual(Decimal('100'), sku.total_price)
        self.assertEqual(Decimal('100'), sku.model_dump()['total_price'])

    def test_immutability_and_equality(self):
        sku = CartService.make_sku(1, 'tshirt', 50, 2, SkuCategory.CLOTHING)

        with self.assertRaises(ValidationError):
            sku.total_num = 5

        self.assertEqual(sku, CartService.make_sku(1, 'tshirt', '50', 2, SkuCategory.CLOTHING))
        self.assertEqual(hash(sku), hash(CartService.make_sku(1, 'tshirt', '50.0', 2, SkuCategory.CLOTHING)))

    def test_invalid_values(self):
        with self.assertRaises(ValidationError):
            CartService.make_sku(1, 'tshirt', -1, 2, SkuCategory.CLOTHING)

        with self.assertRaises(ValidationError):
            CartService.make_sku(1, 'tshirt', 50, -2, SkuCategory.CLOTHING)

        with self.assertRaises(ValidationError):
            Sku(sku_id=1, sku_name='tshirt', sku_price=Decimal('50'), total_num=2, sku_category='FOOD')


class TestCartService(TestCase):
    def test_non_empty(self):
        self.assertGreater(len(CartService.get_cart_sku_list()), 0)
        self.assertGreater(len(CartService.get_sample_items()), 0)

    def test_deterministic_and_fresh(self):
        first = CartService.get_cart_sku_list()
        second = CartService.get_cart_sku_list()

        self.assertListEqual(first, second)
        self.assertIsNot(first, second)

        for a, b in zip(first, second):
            self.assertIsNot(a, b)

    def test_item_invariants(self):
        for sku in CartService.get_sample_items():
            self.assertEqual(sku.sku_price * sku.total_num, sku.total_price)
            self.assertGreaterEqual(sku.total_price, 0)
            self.assertIn(sku.sku_category, list(SkuCategory))

    def test_every_category_is_represented(self):
        categories = {sku.sku_category for sku in CartService.get_cart_sku_list()}
        self.assertSetEqual(set(SkuCategory), categories)

    def test_registered_in_container(self):
        cart_service: CartService = container.get(CartService)
        self.assertListEqual(CartService.get_cart_sku_list(), cart_service.get_cart_sku_list())

    def test_filter_by_total_price(self):
        tshirt = CartService.make_sku(1, 'tshirt', 50, 2, SkuCategory.CLOTHING)
        novel = CartService.make_sku(2, 'novel', 20, 1, SkuCategory.BOOKS)

        self.assertListEqual([], SimpleStream.of(tshirt, novel).filter(lambda sku: sku.total_price > 1000).to_list())
        self.assertListEqual([tshirt], SimpleStream.of(tshirt, novel).filter(lambda sku: sku.total_price > 50).to_list())

    def test_most_expensive_first(self):
        items = CartService.get_cart_sku_list()
        first = SimpleStream(items).sorted(lambda sku: sku.total_price, reverse=True).find_first()

        self.assertEqual(max(sku.total_price for sku in items), first.total_price)

        # Ties keep the original order.
        a = CartService.make_sku(1, 'a', 10, 1, SkuCategory.BOOKS)
        b = CartService.make_sku(2, 'b', 5, 2, SkuCategory.BOOKS)
        c = CartService.make_sku(3, 'c', 1, 1, SkuCategory.BOOKS)
        self.assertIs(a, SimpleStream.of(c, a, b).sorted(lambda sku: sku.total_price, reverse=True).find_first())
