import typer

from semantic_overlay.cli.config import config_app
from semantic_overlay.cli.hints import hints
from semantic_overlay.cli.serve import serve_app
from semantic_overlay.cli.tokens import legend, tokens
from semantic_overlay.cli.watch import watch

app = typer.Typer(
    name="semantic-overlay",
    help="Semantic overlay CLI: semantic tokens and aligned inlay hints for source files.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("legend")(legend)
app.command("tokens")(tokens)
app.command("hints")(hints)
app.command("watch")(watch)
app.add_typer(config_app, name="config")
app.add_typer(serve_app, name="serve")


def main() -> None:
    app()
