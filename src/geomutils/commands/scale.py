import click

from geomutils.click_helper import NUMERIC_ARGS, RECT, format_vec
from geomutils.geometry import scale_rect


@click.command(context_settings=NUMERIC_ARGS)
@click.argument("rect", type=RECT)
@click.argument("x_scale", type=float)
@click.argument("y_scale", type=float)
def scale(rect, x_scale, y_scale):
    """
    Scales RECT (x,y,w,h) size by X_SCALE and Y_SCALE.
    """
    click.echo(format_vec(scale_rect(rect, x_scale, y_scale).to_vec()))
