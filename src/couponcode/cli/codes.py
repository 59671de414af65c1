import sys
from functools import wraps

import click

from couponcode.coupon import CouponCode
from couponcode.errors import CouponCodeError
from couponcode.export import write_csv
from couponcode.preview import preview as render_preview


def layout_options(func):
    """Options shared by every command that needs a code layout."""

    @click.option(
        "--prefix",
        envvar="COUPONCODE_PREFIX",
        default=None,
        help="Prefix added in front of every code.",
    )
    @click.option(
        "--separator",
        envvar="COUPONCODE_SEPARATOR",
        default=None,
        help="Character between parts. [default: -]",
    )
    @click.option(
        "--parts",
        envvar="COUPONCODE_PARTS",
        type=int,
        default=None,
        help="Number of parts per code. [default: 2]",
    )
    @click.option(
        "--part-length",
        envvar="COUPONCODE_PART_LENGTH",
        type=int,
        default=None,
        help="Characters per part, including the checkdigit. [default: 4]",
    )
    @wraps(func)
    def wrapper(prefix, separator, parts, part_length, **kwargs):
        try:
            coupons = CouponCode(
                {
                    "prefix": prefix,
                    "separator": separator,
                    "parts": parts,
                    "part_length": part_length,
                }
            )
        except CouponCodeError as e:
            raise click.ClickException(str(e))
        return func(coupons, **kwargs)

    return wrapper


@click.command("generate")
@layout_options
@click.option(
    "--count", "-n", type=click.IntRange(min=1), default=1, help="Number of codes."
)
@click.option("--seed", help="Derive the code from this text instead of random bytes.")
def generate(coupons, count, seed):
    """Generates coupon codes, one per line."""
    if seed and count != 1:
        raise click.UsageError("--seed produces a single code; drop --count.")

    try:
        if seed:
            codes = [coupons.generate(seed)]
        else:
            codes = coupons.generate_many(count)
    except CouponCodeError as e:
        raise click.ClickException(str(e))

    for code in codes:
        click.echo(code)


@click.command("validate")
@layout_options
@click.argument("codes", nargs=-1, required=True)
def validate(coupons, codes):
    """Checks the checkdigits of one or more codes."""
    all_valid = True
    for code in codes:
        is_valid = coupons.validate(code)
        all_valid = all_valid and is_valid
        click.echo(f"{code}: {'valid' if is_valid else 'invalid'}")

    if not all_valid:
        sys.exit(1)


@click.command("normalize")
@layout_options
@click.argument("codes", nargs=-1, required=True)
def normalize(coupons, codes):
    """Prints codes in canonical form."""
    for code in coupons.normalize(list(codes)):
        click.echo(code)


@click.command("preview")
@click.option("--prefix", default=None, help="Optional prefix.")
@click.option(
    "--separator", default="-", show_default=True, help="Character between parts."
)
@click.option(
    "--parts", type=int, default=2, show_default=True, help="Number of parts."
)
@click.option(
    "--part-length",
    type=int,
    default=4,
    show_default=True,
    help="Characters per part.",
)
def preview(prefix, separator, parts, part_length):
    """Shows the shape of a code layout using X placeholders."""
    try:
        click.echo(
            render_preview(
                {
                    "prefix": prefix,
                    "separator": separator,
                    "parts": parts,
                    "part_length": part_length,
                }
            )
        )
    except CouponCodeError as e:
        raise click.ClickException(str(e))


@click.command("export")
@layout_options
@click.option(
    "--count", "-n", type=click.IntRange(min=1), default=1, help="Number of codes."
)
@click.option(
    "--output",
    "-o",
    default="coupons.csv",
    show_default=True,
    help="CSV file to write.",
)
@click.option(
    "--used-column", is_flag=True, help="Add a column marking codes as used."
)
@click.option(
    "--code-label",
    default="Coupon code",
    show_default=True,
    help="Header of the code column.",
)
@click.option(
    "--used-label",
    default="Used",
    show_default=True,
    help="Header of the used column.",
)
@click.option("--yes-label", default="Yes", show_default=True)
@click.option("--no-label", default="No", show_default=True)
def export(
    coupons, count, output, used_column, code_label, used_label, yes_label, no_label
):
    """Generates codes and writes them to a CSV file."""
    try:
        rows = coupons.generate_export_rows(
            count,
            code_label,
            used_label if used_column else None,
            yes_label,
            no_label,
        )
    except CouponCodeError as e:
        raise click.ClickException(str(e))

    try:
        path = write_csv(rows, output)
    except OSError as e:
        raise click.ClickException(f"Could not write {output}: {e}")

    click.echo(f"Wrote {len(rows) - 1} codes to {path}")
