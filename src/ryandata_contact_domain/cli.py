from __future__ import annotations

import logging
from typing import NoReturn

import typer

from ryandata_contact_domain.email.address import EmailAddress
from ryandata_contact_domain.geo.distance import Distance
from ryandata_contact_domain.geo.enums import LengthUnit
from ryandata_contact_domain.geo.street import Street
from ryandata_contact_domain.parsers.factory import ParserFactory
from ryandata_contact_domain.phone.number import PhoneNumber
from ryandata_contact_domain.validation.validators import create_default_validators

app = typer.Typer(help="Parse and convert contact details: phone numbers, streets, addresses.")

JSON_OPTION = typer.Option(False, "--json", help="Print the result as JSON.")


@app.callback()
def configure_logging(
    verbose: bool = typer.Option(  # noqa: B008
        False,
        "--verbose",
        "-v",
        help="Log parsing details to stderr.",
    ),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _fail(error: Exception | None) -> NoReturn:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(code=1)


def _echo_fields(fields: dict[str, object]) -> None:
    for label, value in fields.items():
        typer.echo(f"{label}: {value if value is not None else '-'}")


@app.command()
def phone(text: str, as_json: bool = JSON_OPTION) -> None:
    """Parse a 10-digit phone number such as "(503) 555-1234"."""
    try:
        phone_number = PhoneNumber.parse(text)
    except ValueError as error:
        _fail(error)
    if as_json:
        typer.echo(phone_number.model_dump_json())
        return
    _echo_fields(
        {
            "Area code": phone_number.area_code,
            "Exchange code": phone_number.exchange_code,
            "Line number": phone_number.line_number,
            "Country": phone_number.country,
        }
    )


@app.command()
def street(text: str, as_json: bool = JSON_OPTION) -> None:
    """Parse a street line such as "100 N Main St"."""
    try:
        parsed = Street.parse(text)
    except ValueError as error:
        _fail(error)
    if as_json:
        typer.echo(parsed.model_dump_json())
        return
    _echo_fields(
        {
            "Number": parsed.number,
            "Direction": parsed.direction,
            "Name": parsed.name,
            "Type": parsed.type,
        }
    )


@app.command()
def email(text: str, as_json: bool = JSON_OPTION) -> None:
    """Parse an email address such as "jon@doe.com"."""
    try:
        parsed = EmailAddress.parse(text)
    except ValueError as error:
        _fail(error)
    if as_json:
        typer.echo(parsed.model_dump_json())
        return
    _echo_fields({"User": parsed.username, "Domain": parsed.domain_name})


@app.command()
def address(
    text: str,
    parser: str = typer.Option("usaddress", "--parser", help="Registered parser to use."),
    validate: bool = typer.Option(
        False, "--validate", help="Check required fields and ZIP/state consistency."
    ),
    as_json: bool = JSON_OPTION,
) -> None:
    """Parse a full United States address line."""
    try:
        address_parser = ParserFactory.create(
            parser, validator=create_default_validators() if validate else None
        )
    except ValueError as error:
        _fail(error)

    result = address_parser.parse(text)
    if not result.is_parsed:
        _fail(result.error)

    if as_json:
        typer.echo(result.address.model_dump_json())
    else:
        typer.echo(str(result.address))

    if result.validation is not None and not result.validation.is_valid:
        for validation_error in result.validation.errors:
            typer.echo(f"Invalid: {validation_error.message}", err=True)
        raise typer.Exit(code=1)


@app.command()
def convert(
    measurement: float,
    from_unit: str,
    to_unit: str,
    as_json: bool = JSON_OPTION,
) -> None:
    """Convert a distance, e.g. "convert 1 mile feet"."""
    try:
        source_unit = LengthUnit.find(from_unit)
        target_unit = LengthUnit.find(to_unit)
        if source_unit is None or target_unit is None:
            unknown = from_unit if source_unit is None else to_unit
            raise ValueError(f"Unknown length unit [{unknown}]")
        converted = Distance(measurement, source_unit).to_unit(target_unit)
    except ValueError as error:
        _fail(error)
    if as_json:
        typer.echo(converted.model_dump_json())
        return
    typer.echo(str(converted))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
