from vodsearch.interfaces.cli.cli import start

raise SystemExit(start())
