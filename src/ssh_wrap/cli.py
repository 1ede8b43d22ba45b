"""Click entry point."""

import sys

import click

from ssh_wrap import wrapper


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
        "help_option_names": [],
    }
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def main(args):
    """Run ssh with ARGS, answering its password prompt from stdin."""
    code = wrapper.run(list(args))
    sys.exit(code)


if __name__ == "__main__":
    main()
