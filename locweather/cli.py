import asyncio

import click
from pydantic import ValidationError

from locweather.config import WeatherConfig, WeatherEnv
from locweather.controller import WeatherController
from locweather.lifecycle import Lifecycle
from locweather.location import FixedLocationProvider, IpGeolocationProvider, Position
from locweather.permission import ConsolePermissionProvider
from locweather.shared import configure_logging
from locweather.ui import ConsoleDisplay, ConsoleNotifier


def display_banner():
    """Display the startup banner"""
    click.echo(
        click.style("┌─[ ", fg="cyan", bold=True)
        + click.style("LOCWEATHER", fg="bright_green", bold=True)
        + click.style(" ]", fg="cyan", bold=True)
    )
    click.echo(
        click.style("└─ ", fg="cyan", bold=True)
        + click.style("Weather for wherever you are. Ctrl+C to quit.", italic=True)
    )


async def run(config: WeatherConfig, position: Position | None, assume_yes: bool) -> None:
    if position is not None:
        location_provider = FixedLocationProvider(position)
    else:
        location_provider = IpGeolocationProvider()

    controller = WeatherController(
        config=config,
        permissions=ConsolePermissionProvider(assume_granted=assume_yes),
        location_provider=location_provider,
        display=ConsoleDisplay(),
        notifier=ConsoleNotifier(),
    )

    lifecycle = Lifecycle()
    lifecycle.add_observer(controller)

    async with lifecycle.session():
        await asyncio.Event().wait()


@click.command()
@click.option("--lat", type=click.FloatRange(-90, 90), help="Fixed latitude instead of IP lookup")
@click.option("--lon", type=click.FloatRange(-180, 180), help="Fixed longitude instead of IP lookup")
@click.option("--yes", "-y", is_flag=True, help="Grant location access without asking")
@click.option("--log-level", default=None, help="Overrides LOCWEATHER_LOG_LEVEL")
def main(lat, lon, yes, log_level):
    """🌤️ LOCWEATHER - current weather for your location"""
    if (lat is None) != (lon is None):
        raise click.UsageError("--lat and --lon must be given together")

    try:
        env = WeatherEnv()
    except ValidationError as e:
        raise click.ClickException(
            "OPENWEATHER_API_KEY is not set. Put it in your environment or a .env file."
        ) from e

    configure_logging(log_level or env.locweather_log_level)
    config = WeatherConfig.from_env(env)
    position = Position(latitude=lat, longitude=lon) if lat is not None else None

    display_banner()
    try:
        asyncio.run(run(config, position, yes))
    except KeyboardInterrupt:
        click.echo("\nShutting down...")


if __name__ == "__main__":
    main()
