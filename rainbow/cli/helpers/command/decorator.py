import inspect
import re
from traceback import print_exc
from typing import Callable, List, Optional, Union, get_args, get_origin

import click
from click import Group

from rainbow.cli.helpers.command.spec import ArgumentSpec
from rainbow.common.logger import get_logger
from rainbow.feature_flags import in_global_debug_mode

_logger = get_logger('@command')


def command(command_group: Group,
            alternate_command_name: Optional[str] = None,
            specs: Optional[List[ArgumentSpec]] = None):
    """
    Register the handler as a command of the group.

    Every parameter of the handler becomes a CLI argument. A parameter with a default value or an Optional type is
    not required. Use "specs" to turn a parameter into an option, to give it a help text or to limit its choices.
    """
    spec_map = {spec.name: spec for spec in (specs or list())}

    def decorator(handler: Callable):
        command_name = alternate_command_name or re.sub(r'_', '-', handler.__name__)

        def handle_invocation(**kwargs):
            if in_global_debug_mode:
                # In the debug mode, the error is not handled so that the full detail is shown.
                handler(**kwargs)
                return

            try:
                handler(**kwargs)
            except (TypeError, AttributeError, IndexError, KeyError) as e:
                click.secho('Unexpected programming error', fg='red', err=True)
                print_exc()
                raise SystemExit(1) from e
            except Exception as e:
                click.secho(f'{type(e).__name__}: ', fg='red', bold=True, nl=False, err=True)
                click.secho(str(e), fg='red', err=True)
                raise SystemExit(1) from e

        handle_invocation.__doc__ = handler.__doc__

        command_obj = command_group.command(command_name)(handle_invocation)

        for param_name, param in inspect.signature(handler).parameters.items():
            spec = spec_map.get(param_name) or ArgumentSpec(name=param_name)
            param_type, optional = _reflect_type(param.annotation)
            has_default = param.default is not inspect.Parameter.empty

            settings = dict(type=click.Choice(spec.choices) if spec.choices else param_type,
                            required=not (optional or has_default),
                            default=param.default if has_default else None)

            _logger.debug(f'{command_name}/{param_name}: {spec.get_argument_names()} {settings}')

            if spec.as_option:
                click.option(*spec.get_argument_names(),
                             help=spec.help,
                             show_default=settings['default'] is not None,
                             **settings)(command_obj)
            else:
                click.argument(*spec.get_argument_names(), **settings)(command_obj)

        return command_obj

    return decorator


def _reflect_type(annotation):
    """ Get the parameter type and whether it is Optional """
    if annotation is inspect.Parameter.empty:
        return str, False

    if get_origin(annotation) is Union:
        type_args = get_args(annotation)
        return [t for t in type_args if t is not type(None)][0], type(None) in type_args

    if inspect.isclass(annotation):
        return annotation, False

    raise RuntimeError(f'Programming Error: The parameter type {annotation} is not supported by @command.')
