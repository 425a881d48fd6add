import click

from geomutils.click_helper import NUMERIC_ARGS, RECT, SIZE, enum_choice, format_vec
from geomutils.config import GeometryConfig
from geomutils.layout import ScalingPolicy, scale_rect_to_size


@click.command(context_settings=NUMERIC_ARGS)
@click.argument("rect", type=RECT)
@click.argument("size", type=SIZE)
@click.option(
    "--scaling", type=enum_choice(ScalingPolicy), default=None,
    help="Scaling policy, config value is used if omitted.",
)
@click.pass_obj
def fit(config: GeometryConfig, rect, size, scaling):
    """
    Scales RECT (x,y,w,h) to SIZE (w,h).
    """
    scaling = ScalingPolicy.parse(scaling) if scaling else config.scaling
    res = scale_rect_to_size(rect, size, scaling)
    click.echo(format_vec(res.to_vec()))
