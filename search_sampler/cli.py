"""
Command Line Interface for the search sampler
"""
import asyncio
import json
import sys
import click

from search_sampler.core.config import Config
from search_sampler.core.exceptions import SearchError
from search_sampler.search.binary import binary_search_index
from search_sampler.search.linear import (
    linear_search_bool,
    linear_search_index,
    linear_search_val_and_index,
)
from search_sampler.search.parallel import parallel_search_detailed
from search_sampler.utils.benchmark import (
    DEFAULT_SIZES,
    benchmark_sizes,
    format_bytes,
    get_system_info,
)
from search_sampler.utils.logger import setup_logging


def parse_value(text: str):
    """Interpret a command line value as int, then float, else string"""
    for cast in (int, float):
        try:
            return cast(text)
        except ValueError:
            continue
    return text


def parse_values(values):
    return [parse_value(v) for v in values]


def run_parallel(config: Config, sequence, target, as_json: bool):
    try:
        outcome = asyncio.run(parallel_search_detailed(sequence, target, config.search))
    except SearchError as e:
        click.echo(f"Search error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(outcome.to_dict(), indent=2))
        return

    click.echo(f"Result: {outcome.index}")
    click.echo(f"  Found by: {outcome.found_by or 'none'}")
    click.echo(f"  Duration: {outcome.duration_ms:.3f} ms")
    if outcome.short_circuited:
        click.echo("  Workers: skipped (below parallel threshold)")
    if outcome.timed_out:
        click.echo(f"  Timed out after {config.search.timeout_seconds} seconds")
        if outcome.unconfirmed_index is not None:
            click.echo(f"  Unconfirmed match: {outcome.unconfirmed_index}")
    if outcome.worker_errors:
        click.echo(f"  Failed workers: {', '.join(outcome.worker_errors)}")


@click.group()
@click.option('--config', '-c', 'config_file', help='Configuration file path')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.pass_context
def cli(ctx, config_file, verbose):
    """Search Sampler CLI"""
    try:
        config = Config.load_from_file(config_file) if config_file else Config.from_env()
        if verbose:
            config.logging.level = "DEBUG"

        setup_logging(
            level=config.logging.level,
            log_file=config.logging.file,
            log_format=config.logging.format
        )
    except (ValueError, OSError) as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    ctx.ensure_object(dict)
    ctx.obj['config'] = config


@cli.command()
@click.argument('values', nargs=-1)
@click.option('--target', '-t', required=True, help='Value to search for')
@click.option('--shape', default='index',
              type=click.Choice(['bool', 'index', 'match']),
              help='Result shape')
def linear(values, target, shape):
    """Linear search over VALUES"""
    sequence = parse_values(values)
    target = parse_value(target)

    if shape == 'bool':
        click.echo(str(linear_search_bool(sequence, target)).lower())
    elif shape == 'match':
        match = linear_search_val_and_index(sequence, target)
        click.echo(json.dumps(match.to_dict() if match else None))
    else:
        click.echo(linear_search_index(sequence, target))


@cli.command()
@click.argument('values', nargs=-1)
@click.option('--target', '-t', required=True, help='Value to search for')
@click.option('--check-sorted', is_flag=True, help='Fail if VALUES are not sorted')
def binary(values, target, check_sorted):
    """Binary search over sorted VALUES"""
    sequence = parse_values(values)
    target = parse_value(target)

    try:
        click.echo(binary_search_index(sequence, target, check_sorted=check_sorted))
    except SearchError as e:
        click.echo(f"Search error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument('values', nargs=-1)
@click.option('--target', '-t', required=True, help='Value to search for')
@click.option('--threshold', type=int, help='Minimum size that spawns workers')
@click.option('--timeout', type=float, help='Deadline in seconds')
@click.option('--strategy', type=click.Choice(['split', 'outward']), help='How ranges are split')
@click.option('--policy', type=click.Choice(['lowest_index', 'first_reported']),
              help='Which positive report wins')
@click.option('--json', 'as_json', is_flag=True, help='Print the outcome as JSON')
@click.pass_context
def parallel(ctx, values, target, threshold, timeout, strategy, policy, as_json):
    """Parallel linear search over VALUES"""
    config = ctx.obj['config']
    overrides = {
        'parallel_threshold': threshold,
        'timeout_seconds': timeout,
        'strategy': strategy,
        'resolution': policy,
    }
    config.search = config.search.model_copy(
        update={k: v for k, v in overrides.items() if v is not None}
    )

    run_parallel(config, parse_values(values), parse_value(target), as_json)


@cli.command()
@click.option('--size', default=1_000_000, type=int, help='Length of the generated range')
@click.option('--target', default=879_654, type=int, help='Value to search for')
@click.pass_context
def demo(ctx, size, target):
    """Parallel search for TARGET in range(SIZE)"""
    run_parallel(ctx.obj['config'], range(size), target, as_json=False)


@cli.command()
@click.option('--sizes', '-n', multiple=True, type=int,
              help='Input sizes to benchmark (can be specified multiple times)')
@click.option('--output', '-o', help='Output file for results (JSON format)')
@click.pass_context
def benchmark(ctx, sizes, output):
    """Compare sequential, parallel and binary search timings"""
    config = ctx.obj['config']
    sizes = list(sizes) or DEFAULT_SIZES

    info = get_system_info()
    click.echo(f"CPUs: {info['cpu_count']} logical, {info['physical_cores']} physical")
    click.echo(f"Memory available: {format_bytes(info['memory']['available'])}")
    click.echo()

    rows = benchmark_sizes(sizes, config.search)

    click.echo(f"{'Size':>12} | {'Linear ms':>10} | {'Parallel ms':>11} | "
               f"{'Binary ms':>9} | {'Speedup':>8} | {'Lin comps':>10} | {'Bin comps':>9}")
    click.echo("-" * 88)
    for row in rows:
        click.echo(
            f"{row['n']:>12,} | {row['linear_ms']:>10.3f} | {row['parallel_ms']:>11.3f} | "
            f"{row['binary_ms']:>9.3f} | {row['speedup']:>7.3f}x | "
            f"{row['linear_comparisons']:>10,} | {row['binary_comparisons']:>9,}"
        )
        if not row['agree']:
            click.echo(f"  Warning: strategies disagree for n={row['n']}", err=True)

    if output:
        with open(output, 'w') as f:
            json.dump({"system": info, "results": rows}, f, indent=2)
        click.echo(f"\nResults saved to {output}")


@cli.command()
@click.option('--output', '-o', default='search_config.json', help='Output configuration file')
def init_config(output):
    """Initialize a configuration file with default settings"""
    config = Config()
    config.save_to_file(output)
    click.echo(f"Configuration file created: {output}")
    click.echo("Edit the file to customize settings, then use:")
    click.echo(f"  search-sampler --config {output} demo")


def main():
    """Main entry point"""
    cli()


if __name__ == '__main__':
    main()
