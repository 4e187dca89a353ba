"""
CLI for h3vertex.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import click
import h3
from rich.console import Console
from rich.table import Table

from h3vertex.config import Config
from h3vertex.constants import Direction, INVALID_VERTEX_NUM
from h3vertex.generate import check_pentagon_direction_faces
from h3vertex.grid import TableGrid
from h3vertex.vertex import vertex_num_for_direction, vertex_nums_for_cell, vertex_rotations

logger = logging.getLogger("h3vertex")

DEFAULT_CONFIG = Path("config/default.yaml")


def setup_logging(log_dir: Optional[str], level: str = "INFO") -> Optional[Path]:
    """Configure logging to console and, when log_dir is set, to a file."""
    handlers = [logging.StreamHandler()]
    log_file = None

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"h3vertex_{timestamp}.log"
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='[%(asctime)s] [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S',
        handlers=handlers
    )

    return log_file


class CellParam(click.ParamType):
    """H3 cell given as a hexadecimal string."""
    name = "cell"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        if not h3.is_valid_cell(value):
            self.fail(f"{value!r} is not a valid H3 cell", param, ctx)
        return h3.str_to_int(value)


class DirectionParam(click.ParamType):
    """Direction given by name (j, jk, ...) or digit (0-7)."""
    name = "direction"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        if value.isdigit():
            return int(value)
        try:
            return Direction[value.upper()]
        except KeyError:
            self.fail(f"{value!r} is not a direction", param, ctx)


def _load_config(ctx: click.Context, resolution: Optional[int] = None) -> Config:
    params = ctx.obj
    config_path = params['config']

    # Default to config/default.yaml if it exists and no config/table provided
    if not config_path and not params['table'] and DEFAULT_CONFIG.exists():
        config_path = str(DEFAULT_CONFIG)

    if config_path:
        cfg = Config.from_yaml(config_path)
        if params['table']:
            cfg.table_path = params['table']
    elif params['table']:
        cfg = Config.from_args(table_path=params['table'])
    else:
        raise click.UsageError("Either --config or --table is required (or config/default.yaml must exist)")

    if params['log_level']:
        cfg.log_level = params['log_level']
    if params['no_log_file']:
        cfg.log_dir = None
    if resolution is not None:
        cfg.options.resolution = resolution

    cfg.validate()
    return cfg


def _load_grid(ctx: click.Context, resolution: Optional[int] = None):
    cfg = _load_config(ctx, resolution)
    setup_logging(cfg.log_dir, cfg.log_level)
    return cfg, TableGrid.from_yaml(cfg.table_path)


@click.group()
@click.option(
    '--config', '-c',
    type=click.Path(exists=True),
    help='Path to YAML configuration file'
)
@click.option(
    '--table', '-t',
    type=click.Path(exists=True),
    help='Path to YAML grid table (faces and base cell rotations)'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    help='Logging level'
)
@click.option(
    '--no-log-file',
    is_flag=True,
    help='Log to the console only'
)
@click.pass_context
def main(ctx, config, table, log_level, no_log_file):
    """
    h3vertex - vertex numbering for H3 cells.

    Examples:

        # Rotation of a cell relative to its base cell
        h3vertex --table grid.yaml rotations 8009fffffffffff

        # Vertex bordering the J neighbor
        h3vertex --table grid.yaml vertex 8009fffffffffff j
    """
    ctx.obj = {
        'config': config,
        'table': table,
        'log_level': log_level,
        'no_log_file': no_log_file,
    }


@main.command()
@click.argument('cell', type=CellParam())
@click.pass_context
def rotations(ctx, cell):
    """Print the CCW 60 degree vertex rotations of CELL."""
    try:
        _, grid = _load_grid(ctx)
        click.echo(vertex_rotations(cell, grid))
    except (KeyError, ValueError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command()
@click.argument('cell', type=CellParam())
@click.argument('direction', type=DirectionParam(), required=False)
@click.pass_context
def vertex(ctx, cell, direction):
    """Print the vertex number of CELL toward DIRECTION, or all of them."""
    try:
        _, grid = _load_grid(ctx)
        if direction is not None:
            num = vertex_num_for_direction(cell, direction, grid)
            if num == INVALID_VERTEX_NUM:
                logger.warning(f"No vertex for direction {direction} of {cell:x}")
            click.echo(num)
            return

        nums = vertex_nums_for_cell(cell, grid)
    except (KeyError, ValueError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    table = Table(title=f"{cell:x}")
    table.add_column("Direction")
    table.add_column("Vertex", justify="right")
    for d, num in nums.items():
        table.add_row(d.name, str(num))
    Console().print(table)


@main.command('check-table')
@click.option(
    '--resolution', '-r',
    type=int,
    help='Resolution of the probe cells (default from config)'
)
@click.pass_context
def check_table(ctx, resolution):
    """Check the pentagon direction-face table against the grid table."""
    try:
        cfg, grid = _load_grid(ctx, resolution)
        mismatches = check_pentagon_direction_faces(grid, cfg.options.resolution)
    except (KeyError, ValueError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if mismatches:
        click.echo(f"Mismatched base cells: {', '.join(str(bc) for bc in mismatches)}", err=True)
        sys.exit(1)
    click.echo("Pentagon direction faces match")


if __name__ == '__main__':
    main()
