import click

from .errors import ConfigurationError


def main():
    """Console entry point; invalid SS_* settings surface when the CLI imports."""
    try:
        from .cli.main import cli
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1)
    cli()


if __name__ == "__main__":
    main()
