from typing import List

import click


def echo_header(title: str):
    """ Print the title as a highlighted block """
    padding = ' ' * (len(title) + 4)

    for line in (padding, f'  {title}  ', padding):
        click.secho(line, bold=True, bg='blue', fg='white')


def echo_list(title: str, items: List[str]):
    click.secho(title)
    for item in items:
        click.secho(f'  ● {item}')
