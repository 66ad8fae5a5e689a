from plainwiki.cli import cli

cli()
