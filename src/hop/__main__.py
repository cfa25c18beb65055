from hop.cli import cli

cli(prog_name="hop")
