import click

from geomutils.click_helper import NUMERIC_ARGS, RECT, enum_choice, format_vec
from geomutils.config import GeometryConfig
from geomutils.layout import Alignment, align_rectangles


@click.command(context_settings=NUMERIC_ARGS)
@click.argument("alignee", type=RECT)
@click.argument("aligner", type=RECT)
@click.option(
    "--alignment", type=enum_choice(Alignment), default=None,
    help="Anchor to align by, config value is used if omitted.",
)
@click.pass_obj
def align(config: GeometryConfig, alignee, aligner, alignment):
    """
    Moves ALIGNEE (x,y,w,h) so that its anchor matches ALIGNER one.
    """
    alignment = Alignment.parse(alignment) if alignment else config.alignment
    res = align_rectangles(alignee, aligner, alignment)
    click.echo(format_vec(res.to_vec()))
