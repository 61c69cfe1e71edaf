from typing import Optional

import click

from rainbow.cli.helpers.command.decorator import command
from rainbow.cli.helpers.command.group import AliasedGroup
from rainbow.cli.helpers.command.spec import ArgumentSpec
from rainbow.cli.helpers.printer import echo_header, echo_list
from rainbow.demos import get_demo_groups

GROUP_SPEC = ArgumentSpec(
    name='group',
    help='Demonstration group',
    choices=list(get_demo_groups().keys()),
)


@click.group('demos', cls=AliasedGroup, aliases=['demo'])
def demos_command_group():
    """ Run the stream processing demonstrations """


@command(demos_command_group,
         'list',
         specs=[GROUP_SPEC])
def list_demos(group: Optional[str] = None):
    """ List the demonstrations """
    for group_name, demo_class in get_demo_groups().items():
        if group and group != group_name:
            continue
        echo_list(f'{group_name}: {demo_class.description}', demo_class.list_demos())


@command(demos_command_group,
         specs=[
             GROUP_SPEC,
             ArgumentSpec(
                 name='name',
                 help='Demonstration name',
             ),
             ArgumentSpec(
                 name='file',
                 arg_names=['--file', '-f'],
                 as_option=True,
                 help='The text file to read (only for "from_file")',
             ),
         ])
def run(group: str, name: str, file: Optional[str] = None):
    """ Run one demonstration, e.g., "rainbow demos run operator sorted" """
    options = dict()

    if file:
        if name != 'from_file':
            raise click.UsageError('The file option is only applicable to "from_file".')
        options['path'] = file

    get_demo_groups()[group]().run(name, **options)


@command(demos_command_group,
         specs=[GROUP_SPEC])
def run_all(group: Optional[str] = None):
    """ Run every demonstration, one after another """
    for group_name, demo_class in get_demo_groups().items():
        if group and group != group_name:
            continue

        demo = demo_class()

        for demo_name in demo_class.list_demos():
            echo_header(f'{group_name}/{demo_name}')
            demo.run(demo_name)
