"Implements ``codontrans show`` and ``codontrans table``"

import io
import logging

import click
from ruamel.yaml import YAML  # type: ignore

import codontrans
from codontrans.cli.shared_options import command
from codontrans.codons import AA_COLUMN, CODON_COLUMN, load_codon_table
from codontrans.exceptions import CodonTransUsageError

log = logging.getLogger(__name__)  # pylint: disable=invalid-name


def to_yaml(obj) -> str:
    """Render plain data as block style YAML"""
    yaml = YAML(typ="safe")
    yaml.default_flow_style = False
    buf = io.StringIO()
    yaml.dump(obj, buf)
    return buf.getvalue().rstrip("\n").removesuffix("\n...")


@command()
@click.argument("key", metavar="KEY", required=False)
@click.option(
    "--files", is_flag=True,
    help="List the active config files instead"
)
def show(key, files):
    """
    Show configuration

    Prints the merged configuration, or the value of the dotted
    KEY (e.g. ``translate.unknown``) only.
    """
    cfg = codontrans.get_config()
    if files:
        click.echo("\n".join(cfg.conffiles))
        return

    log.debug("querying key %s", key)
    obj = cfg.dict
    if key:
        try:
            obj = obj.lookup(key)
        except KeyError:
            raise CodonTransUsageError(f"No config key '{key}'") from None

    if isinstance(obj, dict):
        click.echo(to_yaml(dict(obj)))
    elif obj is None:
        click.echo("null")
    else:
        click.echo(str(obj))


@command()
@click.option(
    "--table", "-t", "table_path", type=click.Path(dir_okay=False),
    help="Codon table TSV to check and print (default: configured table)"
)
@click.option(
    "--strict", is_flag=True,
    help="Reject codons with letters other than T, C, A and G"
)
def table(table_path, strict):
    """
    Print the codon table

    Loads (and thereby validates) the codon table and prints it as TSV.
    """
    cfg = codontrans.get_config()
    codon_table = load_codon_table(table_path or cfg.genetic_code, strict=strict)
    click.echo(f"{CODON_COLUMN}\t{AA_COLUMN}")
    for codon, aa in codon_table.items():
        click.echo(f"{codon}\t{aa}")
    log.info("%i codons, stop codons: %s", len(codon_table),
             ", ".join(codon_table.stop_codons) or "none")
