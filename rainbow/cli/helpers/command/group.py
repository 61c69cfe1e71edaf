from typing import Optional

from click import Group, Command, Context


class AliasedGroup(Group):
    """ A click group whose sub-groups can be called by their aliases, e.g., "rainbow demo list" """

    def __init__(self, *args, **kwargs):
        self.aliases = kwargs.pop('aliases', [])
        super().__init__(*args, **kwargs)
        self.alias_map = {}

    def add_command(self, cmd: Command, name: Optional[str] = None) -> None:
        super().add_command(cmd, name)
        for alias in getattr(cmd, 'aliases', []):
            self.alias_map[alias] = cmd.name

    def get_command(self, ctx: Context, cmd_name: str) -> Optional[Command]:
        return super().get_command(ctx, self.alias_map.get(cmd_name, cmd_name))
