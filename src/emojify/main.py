#!/usr/bin/env python3
"""Command line entry point: convert text from arguments or stdin."""

import html
import json as jsonlib
import logging
import sys

import rich_click as click
from rich.console import Console
from rich.markup import escape

from .converter import get_default_converter
from .core.config import CLI_FORMATS, ConfigLoader, get_config
from .core.logging import setup_logging
from .errors import ConfigError
from .options import EmojifyOptions
from .renderers import EmojiElement

# Configure rich-click markup and colors
click.rich_click.USE_RICH_MARKUP = True

click.rich_click.STYLE_OPTION = "#ff79c6"
click.rich_click.STYLE_ARGUMENT = "#8be9fd"
click.rich_click.STYLE_COMMAND = "#50fa7b"
click.rich_click.STYLE_USAGE = "#bd93f9"
click.rich_click.STYLE_HELPTEXT = "#b3b8c0"

logger = logging.getLogger(__name__)


def render_html(parts) -> str:
    return "".join(part.to_html() if isinstance(part, EmojiElement) else html.escape(part) for part in parts)


def run(text: str, options, output_format: str) -> str:
    converter = get_default_converter()

    if output_format == "json":
        tokens = converter.tokenize(text, options)
        return jsonlib.dumps([token.to_dict() for token in tokens], ensure_ascii=False, indent=2)

    if output_format == "html":
        return render_html(converter.convert(text, options, output="emoji"))

    return converter.convert(text, options, output="unicode")


def create_rich_cli():
    """Create Rich-enhanced Click CLI interface"""
    console = Console(stderr=True)

    @click.command(context_settings={"allow_extra_args": False})
    @click.version_option(version="1.0.0", prog_name="emojify")
    @click.argument("text", nargs=-1)
    @click.option("--config", type=click.Path(dir_okay=False), help=" ⚙️  Configuration file path")
    @click.option("--shortnames/--no-shortnames", default=None, help=" 🏷️  Convert :shortcodes:")
    @click.option("--unicode/--no-unicode", "unicode_", default=None, help=" 🔣 Convert unicode emoji")
    @click.option("--ascii/--no-ascii", "ascii_", default=None, help=" 🙂 Convert ASCII emoticons like :)")
    @click.option("--format", "output_format", type=click.Choice(CLI_FORMATS), help=" 📄 Output format")
    @click.option("--debug", is_flag=True, help=" 🐛 Enable detailed debug logging")
    @click.pass_context
    def main(ctx, text, config, shortnames, unicode_, ascii_, output_format, debug):
        """✨ [bold cyan]emojify[/bold cyan] - Turn :shortcodes:, unicode and ASCII emoticons into emoji

        \b
        [bold yellow]🎯 Quick Start:[/bold yellow]
        \b
          [green]emojify "Hello :) world"[/green]              [italic]# Hello 🙂 world[/italic]
          [green]echo ":fire: <3" | emojify[/green]            [italic]# Read from stdin[/italic]
          [green]emojify --no-ascii "a :) b"[/green]           [italic]# Leave emoticons alone[/italic]
          [green]emojify --format=json ":+1:"[/green]          [italic]# Token dump[/italic]
        """
        try:
            loader = ConfigLoader(config) if config else get_config()
            options = loader.options()
            fmt = output_format or loader.cli_format
            setup_logging("DEBUG" if debug else loader.log_level)
        except ConfigError as e:
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            ctx.exit(2)

        overrides = {
            name: value
            for name, value in (
                ("convert_shortnames", shortnames),
                ("convert_unicode", unicode_),
                ("convert_ascii", ascii_),
            )
            if value is not None
        }
        if overrides:
            options = EmojifyOptions.merge(options, **overrides)

        source = " ".join(text) if text else sys.stdin.read()
        logger.debug(f"Converting {len(source)} chars as {fmt}")

        result = run(source, options, fmt)
        click.echo(result, nl=not result.endswith("\n"))

    return main


main = create_rich_cli()


if __name__ == "__main__":
    sys.exit(main())
