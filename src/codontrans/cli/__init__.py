import click

import codontrans
from codontrans.cli.shared_options import group
from codontrans.cli.show import show, table
from codontrans.cli.translate import translate


def install_profiler(ctx, attr, value):
    if not value or ctx.resilient_parsing:
        return value
    import yappi  # pylint: disable=import-outside-toplevel
    import atexit  # pylint: disable=import-outside-toplevel

    def dump_profile():
        profile = yappi.get_func_stats()
        profile.sort("ttot")
        profile.print_all(out=value, columns={
            0: ("name", 120),
            1: ("ncall", 10),
            2: ("tsub", 8),
            3: ("ttot", 8),
            4: ("tavg", 8)})

    yappi.start()
    atexit.register(dump_profile)


@group()
@click.version_option(version=codontrans.__version__)
@click.option(
    '--profile', type=click.File(mode="w"),
    callback=install_profiler, expose_value=False,
    help="Profile execution time using Yappi"
)
def main(**kwargs):
    """
    Translate nucleotide sequences to protein (frame 1)
    """


main.add_command(translate)
main.add_command(table)
main.add_command(show)
