# SPDX-License-Identifier: MIT

from planning.cleanup import register_cleanup
from planning.initialize import initialize
from planning.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
