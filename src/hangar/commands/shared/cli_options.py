"""
Common CLI options shared by commands that talk to the CI server.
"""

import typer


class CommonOptions:
    """Factories for options used by several commands"""

    @staticmethod
    def target():
        return typer.Option(
            None, "--target", "-t", help="Target to run against (defaults to the current target)"
        )

    @staticmethod
    def non_interactive():
        return typer.Option(
            False, "--non-interactive", help="Apply without asking for confirmation"
        )

    @staticmethod
    def redact():
        return typer.Option(
            None,
            "--redact",
            help="Additional field name to redact in the diff (repeatable)",
            metavar="FIELD",
        )
