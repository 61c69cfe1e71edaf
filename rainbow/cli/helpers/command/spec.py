import re

from typing import List, Optional

from pydantic import BaseModel, Field

from rainbow.cli.helpers.iterator_printer import OutputFormat


class ArgumentSpec(BaseModel):
    """
    Overrides what @command reflects from the handler's signature for one parameter
    """
    name: str
    arg_names: List[str] = Field(default_factory=list)
    as_option: bool = False
    help: Optional[str] = None
    choices: List[str] = Field(default_factory=list)

    def get_argument_names(self) -> List[str]:
        if self.arg_names:
            return [*self.arg_names, self.name]
        elif self.as_option:
            return [f"--{re.sub(r'_', '-', self.name)}", self.name]
        else:
            return [self.name]


OUTPUT_SPEC = ArgumentSpec(
    name='output',
    arg_names=['--output', '-o'],
    as_option=True,
    choices=[OutputFormat.CSV, OutputFormat.JSON, OutputFormat.YAML],
    help='Output format',
)
