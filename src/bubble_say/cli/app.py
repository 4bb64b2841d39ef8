"""Typer CLI application."""

import json
import sys
from typing import Annotated, Optional

import typer
from rich.console import Console

from bubble_say.core.constants import DEFAULT_WIDTH
from bubble_say.core.style import BubbleStyle
from bubble_say.errors import InvalidConfiguration

EXIT_INVALID_CONFIGURATION = 2


def _read_message(words: Optional[list[str]]) -> str:
    """Join message words, falling back to stdin when none are given."""
    if words:
        return " ".join(words)
    return sys.stdin.read()


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="bubble-say",
        help="Render messages in ASCII speech and thought bubbles.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)
    
    def emit(words: Optional[list[str]], style: BubbleStyle, width: int, east_asian: bool, json_output: bool) -> None:
        from bubble_say.render.bubble import render
        
        try:
            block = render(_read_message(words), style, width, east_asian=east_asian)
        except InvalidConfiguration as e:
            console.print(f"[red]{e}[/]", markup=True, highlight=False)
            raise typer.Exit(EXIT_INVALID_CONFIGURATION)
        
        if json_output:
            print(json.dumps(block.to_dict(), indent=2, ensure_ascii=False))
        else:
            print(block.render(), end="")
    
    @app.command()
    def say(
        message: Annotated[Optional[list[str]], typer.Argument(help="Message words (read from stdin if omitted)")] = None,
        width: Annotated[int, typer.Option("--width", "-W", help="Wrap width in columns")] = DEFAULT_WIDTH,
        east_asian: Annotated[bool, typer.Option("--east-asian", "-e", help="Count wide CJK characters as two columns")] = False,
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Render a message in a speech bubble."""
        emit(message, BubbleStyle.SPEECH, width, east_asian, json_output)
    
    @app.command()
    def think(
        message: Annotated[Optional[list[str]], typer.Argument(help="Message words (read from stdin if omitted)")] = None,
        width: Annotated[int, typer.Option("--width", "-W", help="Wrap width in columns")] = DEFAULT_WIDTH,
        east_asian: Annotated[bool, typer.Option("--east-asian", "-e", help="Count wide CJK characters as two columns")] = False,
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Render a message in a thought bubble."""
        emit(message, BubbleStyle.THOUGHT, width, east_asian, json_output)
    
    @app.command()
    def demo(
        east_asian: Annotated[bool, typer.Option("--east-asian", "-e", help="Count wide CJK characters as two columns")] = False,
    ) -> None:
        """Print the say/think demo bubbles."""
        from bubble_say.demo import run
        run(sys.stdout, east_asian=east_asian)
    
    return app
