import csv
import io
from typing import Any, Iterable

import click

from rainbow.cli.helpers.exporter import normalize, to_json, to_yaml


class OutputFormat:
    JSON = 'json'
    YAML = 'yaml'
    CSV = 'csv'


def show_iterator(output_format: str, iterator: Iterable[Any]) -> int:
    """ Print every item from the iterator as one list and return the number of printed items """
    if output_format == OutputFormat.JSON:
        return _print_json(iterator)
    elif output_format == OutputFormat.YAML:
        return _print_yaml(iterator)
    elif output_format == OutputFormat.CSV:
        return _print_csv(iterator)
    else:
        raise ValueError(f'The given output format ({output_format}) is not available.')


def _indent(text: str) -> str:
    return '\n'.join(f'  {line}' for line in text.rstrip('\n').split('\n'))


def _print_json(iterator: Iterable[Any]) -> int:
    row_count = 0

    # Items are printed as soon as they arrive.
    for row in iterator:
        click.echo('[' if row_count == 0 else ',')
        click.echo(_indent(to_json(row)), nl=False)
        row_count += 1

    click.echo('\n]' if row_count else '[]')

    return row_count


def _print_yaml(iterator: Iterable[Any]) -> int:
    row_count = 0

    for row in iterator:
        click.echo(f'- {_indent(to_yaml(row)).lstrip()}')
        row_count += 1

    if row_count == 0:
        click.echo('[]')

    return row_count


def _print_csv(iterator: Iterable[Any]) -> int:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator='\n')
    headers = []
    row_count = 0

    for row in iterator:
        normalized = normalize(row)

        if not headers:
            headers.extend(normalized.keys())
            writer.writerow(headers)

        writer.writerow([normalized.get(h) for h in headers])
        row_count += 1

    click.echo(buffer.getvalue(), nl=False)

    return row_count
