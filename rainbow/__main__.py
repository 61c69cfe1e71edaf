import sys

import click

from rainbow.cli.cart.commands import cart_command_group
from rainbow.cli.demos.commands import demos_command_group
from rainbow.cli.helpers.command.decorator import command
from rainbow.cli.helpers.command.group import AliasedGroup
from rainbow.common.logger import get_logger
from rainbow.constants import __version__

APP_NAME = 'rainbow'

__library_version = __version__
__python_version = str(sys.version).replace("\n", " ")
__app_signature = f'{APP_NAME} {__library_version} with Python {__python_version}'


@click.group(APP_NAME, cls=AliasedGroup)
@click.version_option(__version__, message="%(version)s")
def rainbow():
    """
    Rainbow

    Walk through stream processing with a sample shopping cart
    """
    get_logger(APP_NAME).debug(__app_signature)


@command(rainbow)
def version():
    """ Show the version of CLI/library """
    click.echo(__app_signature)


# noinspection PyTypeChecker
rainbow.add_command(demos_command_group)
# noinspection PyTypeChecker
rainbow.add_command(cart_command_group)

if __name__ == "__main__":
    rainbow.main(prog_name=APP_NAME)
