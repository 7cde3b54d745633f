import click


class ConsoleDisplay:
    """Prints each new screen state to stdout."""

    def __init__(self):
        self.text = ""

    def set_text(self, text: str) -> None:
        self.text = text
        click.echo()
        click.echo(click.style("─" * 40, fg="cyan"))
        click.echo(text)


class ConsoleNotifier:
    def notify(self, message: str) -> None:
        click.secho(f"! {message}", fg="yellow", err=True)
