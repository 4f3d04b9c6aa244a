from .commands import COMMANDS
from .errors import RpmsiteError
from .utils.loggerutils import die, set_verbose

def dispatch(args):
    cmd_class = COMMANDS.get(args.command)
    if not cmd_class:
        raise ValueError(f"Unknown command: {args.command}")
    set_verbose(1 if args.verbose else 0)
    cmd_instance = cmd_class()
    try:
        cmd_instance.run(args)
    except RpmsiteError as err:
        die(str(err), details=getattr(err, 'output', None))
