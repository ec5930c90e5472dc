from __future__ import annotations

import json

import typer
from loguru import logger
from opentelemetry import trace

from errwhat.application.reporting import format_error, get_logging_info
from errwhat.config import Settings
from errwhat.demo import handle_request
from errwhat.infrastructure.logs import configure_logging, log_error
from errwhat.infrastructure.otel import configure_tracing

app = typer.Typer(
    name="errwhat",
    help="Structured errors with layered context, flattened for logging",
)


@app.callback()
def setup(ctx: typer.Context) -> None:
    settings = Settings()
    ctx.obj = settings
    configure_logging(settings)
    configure_tracing(settings)


@app.command()
def demo(
    ctx: typer.Context,
    as_json: bool = typer.Option(
        False, "--json", help="Print the logging view as JSON instead of text"
    ),
) -> None:
    """Run the sample three-layer call chain and show the resulting error."""
    settings: Settings = ctx.obj
    tracer = trace.get_tracer(settings.tracer_name)
    try:
        handle_request(tracer)
    except Exception as exc:
        log_error(exc, level="DEBUG")
        if as_json:
            cause, callstack, additional_info = get_logging_info(exc)
            payload = {
                "cause": cause,
                "callstack": callstack.splitlines(),
                "info": additional_info.to_json(),
            }
            typer.echo(json.dumps(payload, indent=2))
        else:
            typer.echo(format_error(exc), nl=False)
        return
    logger.warning("Demo chain finished without an error")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
