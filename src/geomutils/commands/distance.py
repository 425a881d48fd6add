import click

from geomutils.click_helper import NUMERIC_ARGS, POINT, enum_choice
from geomutils.config import GeometryConfig
from geomutils.geometry import FloatPrecision, distance as points_distance


@click.command(context_settings=NUMERIC_ARGS)
@click.argument("p1", type=POINT)
@click.argument("p2", type=POINT)
@click.option("--precision", type=enum_choice(FloatPrecision), default=None)
@click.pass_obj
def distance(config: GeometryConfig, p1, p2, precision):
    """
    Distance between points P1 and P2 (x,y).
    """
    precision = FloatPrecision.parse(precision) if precision else config.precision
    click.echo(f"{points_distance(p1, p2, precision):g}")
