import click

from geomutils.click_helper import NUMERIC_ARGS, RECT, format_vec
from geomutils.layout import Alignment, anchor_point


@click.command(context_settings=NUMERIC_ARGS)
@click.argument("rect", type=RECT)
def anchors(rect):
    """
    Prints all anchor points of RECT (x,y,w,h), one per line.
    """
    for alignment in Alignment:
        p = anchor_point(rect, alignment)
        click.echo(f"{alignment.name.lower()}: {format_vec(p.to_vec())}")
