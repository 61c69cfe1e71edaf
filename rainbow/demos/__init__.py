from typing import Dict, Type

from rainbow.demos.base import BaseDemo, DemoNotFoundError, demonstration
from rainbow.demos.collector import StreamCollectorDemo
from rainbow.demos.constructor import StreamConstructorDemo
from rainbow.demos.operator import StreamOperatorDemo


def get_demo_groups() -> Dict[str, Type[BaseDemo]]:
    return {
        demo_class.group_name: demo_class
        for demo_class in (StreamConstructorDemo, StreamOperatorDemo, StreamCollectorDemo)
    }
