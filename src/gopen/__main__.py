from gopen.cli import cli

cli(prog_name="gopen")
