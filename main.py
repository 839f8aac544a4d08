import click
from rich.console import Console
from rich.table import Table

from base_classes import InvalidEvent
from config_manager import ConfigManager
from events.chord import parse_chord, unknown_modifiers
from keymap import Keymap
from utils.logging_utils import LoggingHandler


@click.group()
@click.option('-c', '--conf', default=None, help='Path to a custom configuration file')
@click.pass_context
def cli(ctx, conf):
    """
    the main entry point for the CLI click interface
    """
    ctx.ensure_object(dict)
    try:
        config_manager = ConfigManager(conf)
    except FileNotFoundError as e:
        raise click.ClickException(str(e))
    logger = LoggingHandler(config_manager, console=Console(stderr=True))
    logger.settings({'conf': conf, 'log_path': logger.log_path})
    ctx.obj['CONFIG_MANAGER'] = config_manager
    ctx.obj['LOGGER'] = logger


@cli.command()
@click.argument('chords', nargs=-1, required=True)
@click.pass_context
def parse(ctx, chords):
    """
    Parse key chords and show the event each one produces
    """
    logger = ctx.obj['LOGGER']
    failed = 0
    for chord in chords:
        try:
            event = parse_chord(chord)
        except InvalidEvent as e:
            failed += 1
            click.echo(f'{chord}: {e.user_message}', err=True)
            logger.error('cli.parse', e)
            continue
        logger.event_trace(event, component='cli.parse', chord=chord)
        click.echo(f'{chord}\t{event}\t{event!r}')
        ignored = unknown_modifiers(chord)
        if ignored:
            click.echo(f"{chord}: ignored modifier(s) {', '.join(ignored)}", err=True)
    if failed:
        ctx.exit(1)


@cli.command()
@click.option('--strict', is_flag=True, default=False, help='Reject chords with unknown modifier names')
@click.pass_context
def keys(ctx, strict):
    """
    Show the configured key bindings
    """
    config_manager = ctx.obj['CONFIG_MANAGER']
    keymap = Keymap.from_config(config_manager, logger=ctx.obj['LOGGER'], strict=True if strict else None)

    table = Table(title='Key bindings')
    table.add_column('Action', style='cyan', no_wrap=True)
    table.add_column('Key', no_wrap=True)
    for key, action in keymap.bindings():
        table.add_row(action, str(key))
    Console().print(table)

    for bad in keymap.invalid:
        click.echo(f'invalid binding: {bad.action} = {bad.chord} ({bad.reason})', err=True)
    if keymap.invalid:
        ctx.exit(1)


if __name__ == '__main__':
    cli()
