from contact_scout.cli import cli

cli()
