from pathlib import Path

import click

from claptheme.binder import ThemeBinder, static_head_groups
from claptheme.colorscheme import ColorScheme, load_colorscheme
from claptheme.config import Settings, load_config
from claptheme.errors import ClapThemeError
from claptheme.logger import LOG_LEVELS, configure_logging, get_logger
from claptheme.models import Attribute, ColorSpace
from claptheme.render import ScriptContext

logger = get_logger(__name__)


def _load_scheme(path: Path) -> ColorScheme:
    try:
        return load_colorscheme(path)
    except ClapThemeError as e:
        raise click.ClickException(str(e)) from e


def _load_settings(config_path: Path | None) -> Settings:
    try:
        if config_path is not None:
            # An explicit file replaces the project layer
            return load_config(project_config_path=config_path)
        return load_config()
    except ClapThemeError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.version_option(package_name="claptheme")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Log level for messages on stderr (overrides config)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """claptheme - highlight group bindings for file listings."""
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level
    if log_level:
        configure_logging(log_level, exclusive=True)


@cli.command()
@click.argument("colorscheme", type=click.Path(path_type=Path))
@click.option("--config", "config_path", type=click.Path(path_type=Path), help="Config file to use")
@click.option("--group", "-g", "groups", multiple=True, help="Head group to nest (repeatable)")
@click.option("--output", "-o", type=click.Path(path_type=Path), help="Write the script to a file")
@click.pass_context
def render(
    ctx: click.Context,
    colorscheme: Path,
    config_path: Path | None,
    groups: tuple[str, ...],
    output: Path | None,
) -> None:
    """Render the Vim script that applies the configured bindings."""
    settings = _load_settings(config_path)
    if not ctx.obj.get("log_level"):
        log_file = Path(settings.logging.file).expanduser() if settings.logging.file else None
        configure_logging(settings.logging.level, log_file, exclusive=True)

    scheme = _load_scheme(colorscheme)
    script_context = ScriptContext(scheme.to_context())
    binder = ThemeBinder(script_context, fallbacks=scheme.fallbacks)

    head_groups = list(groups) or settings.head_groups
    logger.debug("Rendering {} bindings for {}", len(settings.bindings), scheme.name)
    binder.bind_all(settings.bindings, static_head_groups(head_groups))

    header = f"claptheme bindings for {scheme.name}"
    if output is not None:
        script_context.write(output, header=header)
        click.echo(f"Wrote {len(script_context.lines)} commands to {output}")
    else:
        click.echo(script_context.script(header=header), nl=False)


@cli.command()
@click.argument("colorscheme", type=click.Path(path_type=Path))
@click.argument("group")
@click.option(
    "--attr",
    type=click.Choice([a.value for a in Attribute]),
    default=Attribute.FG.value,
    show_default=True,
    help="Attribute to read",
)
@click.option(
    "--space",
    type=click.Choice([s.value for s in ColorSpace]),
    default=ColorSpace.CTERM.value,
    show_default=True,
    help="Colour space to read",
)
@click.option("--fallback", default=None, help="Value printed when the attribute is undefined")
def resolve(colorscheme: Path, group: str, attr: str, space: str, fallback: str | None) -> None:
    """Print a highlight group's effective colour."""
    scheme = _load_scheme(colorscheme)
    color_space = ColorSpace(space)

    if fallback is None:
        fallbacks = scheme.fallbacks
        fallback = fallbacks.cterm if color_space is ColorSpace.CTERM else fallbacks.gui

    binder = ThemeBinder(scheme.to_context())
    click.echo(binder.resolve_attribute(group, Attribute(attr), color_space, fallback))


if __name__ == "__main__":
    cli()
