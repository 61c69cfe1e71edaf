from typing import Any, Callable, List, Optional

from imagination import container

from rainbow.cart.models import Sku
from rainbow.cart.service import CartService
from rainbow.cli.helpers.exporter import to_json
from rainbow.common.console import Console
from rainbow.common.logger import get_logger_for
from rainbow.common.simple_stream import SimpleStream


class DemoNotFoundError(RuntimeError):
    def __init__(self, group_name: str, demo_name: str, available_demo_names: List[str]):
        super().__init__(f'Demonstration "{demo_name}" is not available in "{group_name}". '
                         f'Available: {", ".join(available_demo_names)}')


def demonstration(handler: Callable) -> Callable:
    """ Mark the method as a runnable demonstration """
    handler.__demonstration__ = True
    return handler


class BaseDemo:
    """ Base of a group of demonstrations

        Every demonstration prints its result through the console and returns it.
    """
    group_name: str = None
    description: str = None

    def __init__(self, console: Optional[Console] = None, cart_service: Optional[CartService] = None):
        self._console: Console = console or container.get(Console)
        self._cart_service: CartService = cart_service or container.get(CartService)
        self._logger = get_logger_for(self)

    @classmethod
    def list_demos(cls) -> List[str]:
        names = []
        for klass in reversed(cls.__mro__):
            for name, member in vars(klass).items():
                if getattr(member, '__demonstration__', False) and name not in names:
                    names.append(name)
        return names

    def run(self, name: str, **kwargs) -> Any:
        if name not in self.list_demos():
            raise DemoNotFoundError(self.group_name, name, self.list_demos())

        logger = self._logger.fork(trace_id=f'{self.group_name}/{name}')
        logger.debug(f'BEGIN: {kwargs}')

        result = getattr(self, name)(**kwargs)

        logger.debug(f'END: {result!r}')

        return result

    def _items(self) -> List[Sku]:
        return self._cart_service.get_cart_sku_list()

    def _stream(self) -> SimpleStream:
        return SimpleStream(self._items())

    def _print(self, content: Any):
        self._console.print(content)

    def _print_json(self, content: Any, pretty: bool = False):
        self._console.print(to_json(content, indent=2 if pretty else None))
