"""
Command-line interface for grid_percolation.

Commands read whitespace-separated integers from a file, or from stdin when
the file argument is '-' (the default):

    grid-percolation percolate sites.txt           # N, then row/column pairs
    grid-percolation percolate sites.txt --summary
    grid-percolation show sites.txt                # final grid as text
    grid-percolation union-find pairs.txt          # n, then element pairs

Union-find options come from an optional run config YAML:

    grid-percolation percolate sites.txt --config config/quick_union.yaml
"""

import click

from ..run import RunConfig


SITE_SYMBOLS = {0: '#', 1: '.', 2: '~'}


def _load_config(config_path):
    if config_path is None:
        return RunConfig.default()
    try:
        return RunConfig.from_yaml(config_path)
    except ValueError as e:
        raise click.ClickException(f"Invalid config {config_path}: {e}")


def _run_sites(stream, config):
    from ..percolation import read_site_stream, simulate_sites

    try:
        n, sites = read_site_stream(stream.read())
        return simulate_sites(n, sites, config)
    except (ValueError, IndexError) as e:
        raise click.ClickException(str(e))


@click.group()
@click.version_option(package_name='grid_percolation')
def cli():
    """Grid Percolation - site percolation on an N x N grid."""
    pass


# ============================================================================
# Percolation Commands
# ============================================================================

@cli.command('percolate')
@click.argument('sites_file', type=click.File('r'), default='-')
@click.option('--config', '-c', 'config_path', type=click.Path(exists=True),
              help='Run config YAML file')
@click.option('--summary/--no-summary', default=None,
              help='Print open-site totals after the run (default: from config)')
def percolate(sites_file, config_path, summary):
    """Open sites one by one and report whether the system percolates."""
    config = _load_config(config_path)
    grid, steps = _run_sites(sites_file, config)

    for step in steps:
        click.echo(step.status)

    if summary is None:
        summary = config.summary
    if summary:
        n = grid.dimension
        click.echo(f"\n=== {n}x{n} grid ===")
        click.echo(f"Open sites: {grid.number_of_open_sites()}/{n * n}")
        click.echo(f"Open fraction: {grid.open_fraction():.4f}")
        click.echo(f"Percolates: {'yes' if grid.percolates() else 'no'}")


@cli.command('show')
@click.argument('sites_file', type=click.File('r'), default='-')
@click.option('--config', '-c', 'config_path', type=click.Path(exists=True),
              help='Run config YAML file')
def show(sites_file, config_path):
    """Print the final grid: '#' blocked, '.' open, '~' full."""
    config = _load_config(config_path)
    grid, _ = _run_sites(sites_file, config)

    for row in grid.as_array():
        click.echo(''.join(SITE_SYMBOLS[int(v)] for v in row))


# ============================================================================
# Union-Find Commands
# ============================================================================

@cli.command('union-find')
@click.argument('pairs_file', type=click.File('r'), default='-')
@click.option('--config', '-c', 'config_path', type=click.Path(exists=True),
              help='Run config YAML file')
def union_find(pairs_file, config_path):
    """Join element pairs and report the number of components."""
    from ..union_find import read_pair_stream, connect_pairs

    config = _load_config(config_path)
    try:
        n, pairs = read_pair_stream(pairs_file.read())
        uf, merged = connect_pairs(n, pairs, config)
    except (ValueError, IndexError) as e:
        raise click.ClickException(str(e))

    for p, q in merged:
        click.echo(f"{p} {q}")
    click.echo(f"{uf.count} components")


if __name__ == '__main__':
    cli()
