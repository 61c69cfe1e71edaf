from decimal import Decimal
from typing import Optional

import click

from rainbow.cart.models import SkuCategory
from rainbow.cart.service import CartService
from rainbow.cli.helpers.command.decorator import command
from rainbow.cli.helpers.command.group import AliasedGroup
from rainbow.cli.helpers.command.spec import ArgumentSpec, OUTPUT_SPEC
from rainbow.cli.helpers.iterator_printer import OutputFormat, show_iterator
from rainbow.common import randoms
from rainbow.common.simple_stream import SimpleStream


@click.group('cart', cls=AliasedGroup)
def cart_command_group():
    """ Inspect the sample cart """


@command(cart_command_group,
         'list',
         specs=[
             OUTPUT_SPEC,
             ArgumentSpec(
                 name='category',
                 arg_names=['--category', '-c'],
                 as_option=True,
                 help='Only show the items of this category',
                 choices=[category.name for category in SkuCategory],
             ),
             ArgumentSpec(
                 name='min_total',
                 arg_names=['--min-total'],
                 as_option=True,
                 help='Only show the items whose total price is greater than this amount',
             ),
         ])
def list_items(output: str = OutputFormat.JSON, category: Optional[str] = None, min_total: Optional[float] = None):
    """ List the items in the sample cart """
    stream = SimpleStream(CartService.get_cart_sku_list())

    if category:
        stream.filter(lambda sku: sku.sku_category == SkuCategory[category])

    if min_total is not None:
        threshold = Decimal(str(min_total))
        stream.filter(lambda sku: sku.total_price > threshold)

    show_iterator(output, stream.to_iter())


@command(cart_command_group,
         specs=[
             ArgumentSpec(
                 name='length',
                 arg_names=['--length', '-l'],
                 as_option=True,
                 help='The number of characters',
             ),
         ])
def code(length: int = 5):
    """ Generate a random verification code """
    click.echo(randoms.verify_code(length))
