import logging
import os
import sys

import click
import tqdm
from coloredlogs import ColoredFormatter

log = logging.getLogger(__name__)  # pylint: disable=invalid-name

context_settings = {
    'help_option_names': ['-h', '--help']
}


def command(*args, **kwargs):
    command = click.command(*args, context_settings=context_settings, **kwargs)

    def wrapper(f):
        return command(log_options(f))
    return wrapper


def group(*args, **kwargs):
    return command(*args, cls=click.Group, **kwargs)


class TqdmHandler(logging.StreamHandler):
    """Tqdm aware logging StreamHandler

    Passes all log writes through tqdm to allow progress bars
    and log messages to coexist without clobbering terminal
    """
    def emit(self, record):
        tqdm.tqdm.write(self.format(record), file=sys.stderr)


class LogFormatter(ColoredFormatter):
    level_styles = {
        'warning': {'color': 'yellow'},
        'info': {'color': 'green'},
        'debug': {'color': 'blue'},
        'critical': {'color': 'red'},
        'error': {'color': 'red'},
    }

    def __init__(self):
        super().__init__("%(source)s%(message)s", level_styles=self.level_styles)

    def format(self, record):
        if record.name.startswith('codontrans.'):
            record.source = "codontrans: "
        else:
            record.source = ""
        return super().format(record)


class Log:
    """
    Set up Logging

    Messages go to stderr through tqdm so progress bars stay intact.
    The ``codontrans`` logger starts at WARNING; ``-v`` and ``-q``
    move it up and down in steps of one level.
    """
    def __init__(self):
        self.root_logger = logging.getLogger()
        self.log = logging.getLogger("codontrans")
        self.log.setLevel(logging.WARNING)
        if not any(isinstance(handler, TqdmHandler) for handler in self.root_logger.handlers):
            self.console_handler = TqdmHandler()
            self.console_handler.setLevel(logging.DEBUG)  # no filtering
            self.console_handler.setFormatter(LogFormatter())
            self.root_logger.addHandler(self.console_handler)

    def mod_level(self, n):
        new_level = self.log.getEffectiveLevel() + n*10
        clamped_level = max(logging.DEBUG, min(logging.CRITICAL, new_level))
        self.log.setLevel(clamped_level)

    @staticmethod
    def set_logfile(filename):
        log_handler = logging.FileHandler(filename)
        log_handler.setLevel(logging.DEBUG)
        formatter = logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s")
        log_handler.setFormatter(formatter)
        logging.getLogger().addHandler(log_handler)

    @classmethod
    def verbose_option(cls, ctx, param, val):
        log = ctx.ensure_object(Log)
        if val:
            log.mod_level(-val)

    @classmethod
    def quiet_option(cls, ctx, param, val):
        log = ctx.ensure_object(Log)
        if val:
            log.mod_level(val)

    @classmethod
    def logfile_option(cls, ctx, param, val):
        log = ctx.ensure_object(Log)
        if val:
            log.set_logfile(val)


verbose_option = click.option(
    "--verbose", "-v", count=True,
    help="Increase log verbosity",
    callback=Log.verbose_option,
    expose_value=False
)


quiet_option = click.option(
    "--quiet", "-q", count=True,
    help="Decrease log verbosity",
    callback=Log.quiet_option,
    expose_value=False
)

logfile_option = click.option(
    "--log-file",
    help="Specify a log file",
    callback=Log.logfile_option,
    expose_value=False
)


def enable_debug(_ctx, param, val):
    import pdb  # pylint: disable=import-outside-toplevel
    if not val:
        return

    def excepthook(typ, val, trace):
        import traceback  # pylint: disable=import-outside-toplevel
        traceback.print_exception(typ, val, trace)
        pdb.pm()

    sys.excepthook = excepthook
    log.error("Dropping into PDB on uncaught exception (pid %i)...", os.getpid())


debug_option = click.option(
    "--pdb", "-P", is_flag=True,
    help="Drop into debugger on uncaught exception",
    callback=enable_debug,
    expose_value=False
)


def log_options(f):
    f = logfile_option(f)
    f = verbose_option(f)
    f = quiet_option(f)
    f = debug_option(f)
    return f
