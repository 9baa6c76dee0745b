from dag_bands.cli import cli

cli()
