import typer
from hangar.commands import logs, pipeline, targets
from hangar.commands.team.set_team import set_team
from hangar.logging import setup_logging, get_logger

app = typer.Typer(
    help="[bold blue]hangar[/bold blue] - command-line client for the CI server",
    rich_markup_mode="rich",
)

# Command groups
app.add_typer(targets.app, name="target")
app.add_typer(logs.app, name="logs")

# Standalone commands
app.command("targets")(targets.list_targets)
app.command("set-team")(set_team)
app.command("set-pipeline")(pipeline.set_pipeline)
app.command("diff-config")(pipeline.diff_config)


@app.callback(invoke_without_command=True)
def callback(ctx: typer.Context):
    """
    [bold blue]hangar[/bold blue] - command-line client for the CI server

    Configure teams and pipelines on a CI server from the command line.
    """
    if not ctx.invoked_subcommand:
        print("Welcome to hangar! Type hangar --help to get started.")


def main():
    setup_logging()
    logger = get_logger("hangar.main")
    logger.info("hangar CLI started")

    try:
        app()
    except Exception as e:
        logger.error(f"Unhandled exception in main: {str(e)}")
        raise
    finally:
        logger.info("hangar CLI finished")


if __name__ == "__main__":
    main()
