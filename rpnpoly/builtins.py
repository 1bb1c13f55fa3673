from . import commands as _  # has side effects
from .command_impl import commands


builtin_commands = dict(commands)
