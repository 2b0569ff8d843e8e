# SPDX-License-Identifier: MIT

import typer

from arenta.cleanup import register_cleanup
from arenta.initialize import initialize
from arenta.lock import LockError
from arenta.terminal.app import run


def main() -> None:
    try:
        initialize()
    except LockError as e:
        typer.echo(str(e), err=True)
        raise SystemExit(1)
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
