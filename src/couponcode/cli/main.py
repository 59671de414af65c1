import click

from couponcode.cli.codes import export, generate, normalize, preview, validate
from couponcode.log import configure_logging


@click.group()
@click.version_option(package_name="couponcode")
def cli():
    """Generates and checks typo-resistant coupon codes."""
    configure_logging()


cli.add_command(generate)
cli.add_command(validate)
cli.add_command(normalize)
cli.add_command(preview)
cli.add_command(export)


if __name__ == "__main__":
    cli()
